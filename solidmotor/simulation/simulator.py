"""Step-driven internal ballistics simulation of a solid rocket motor.

The simulation owns the motor configuration and one mutable state. An
external loop (a renderer, a test, :func:`solidmotor.results.run_burn`)
drives it one step at a time:

    - sim.ignite()      -> start the burn
    - sim.step(dt)      -> advance the motor by dt seconds
    - sim.snapshot()    -> read-only copy of the current state
    - sim.reset()       -> discard the run and start over

Lifecycle:
    IDLE -> BURNING -> BURNED_OUT | EXPLODED

Only BURNING advances. Both end phases are outcomes, not errors: stepping
or igniting a finished motor is silently refused until reset().

Each step evaluates, in order: burning area, Kn, chamber pressure, burn
rate, grain regression, the burnout check, thrust, casing stress and the
failure check, then integrates impulse and samples history no more often
than every HISTORY_INTERVAL of simulated time.

The caller is expected to keep dt small (<= 50 ms) so a single step cannot
jump past the burnout or failure checks.

Example:
    >>> from solidmotor.simulation import LifecyclePhase, MotorSimulation
    >>> sim = MotorSimulation()
    >>> sim.ignite()
    >>> while sim.phase is LifecyclePhase.BURNING:
    ...     sim.step(0.01)
    >>> print(f"Impulse: {sim.state.total_impulse:.0f} N·s")
"""

import math
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import NamedTuple

from beartype import beartype

from solidmotor.bounds import (
    ATMOSPHERIC_PRESSURE,
    BURNOUT_RADIUS_FRACTION,
    BURNOUT_WEB,
    HISTORY_INTERVAL,
    MAX_SAFETY_FACTOR,
    clamp_or_default,
)
from solidmotor.burn_rate import burn_rate
from solidmotor.chamber import solve_chamber_pressure
from solidmotor.config import ConfigPatch, SimulationConfig, default_config, merge_config
from solidmotor.grain import GrainType, burning_area, get_grain_type
from solidmotor.log import get_logger
from solidmotor.materials import get_material
from solidmotor.nozzle import thrust, thrust_coefficient
from solidmotor.propellants import get_propellant
from solidmotor.structure import classify_failure, hoop_stress, safety_factor

logger = get_logger(__name__)


# =============================================================================
# State
# =============================================================================


class LifecyclePhase(Enum):
    """Motor lifecycle phase."""

    IDLE = auto()        # Configured, not ignited
    BURNING = auto()     # Only phase that advances
    BURNED_OUT = auto()  # Web consumed
    EXPLODED = auto()    # Casing exceeded ultimate strength (CATO)


class HistorySample(NamedTuple):
    """One recorded point of the burn, SI units."""

    time: float          # [s]
    pressure: float      # Chamber pressure [Pa]
    thrust: float        # [N]
    burn_rate: float     # [m/s]
    inner_radius: float  # Burned-back core radius [m]
    kn: float            # Burning area / throat area [-]
    stress: float        # Casing hoop stress [Pa]


@beartype
@dataclass
class SimulationState:
    """Mutable state of one simulation run.

    Derived quantities (pressure, thrust, ...) are recomputed every step;
    the aggregates only grow while the motor is burning.

    Attributes:
        time: Simulated time since ignition [s]
        current_inner_radius: Burned-back core radius [m]
        chamber_pressure: Chamber pressure [Pa]
        thrust: Delivered thrust including nozzle efficiency [N]
        burn_rate: Regression rate [m/s]
        burning_area: Burning surface area [m²]
        kn: Burning area / throat area [-]
        stress: Casing hoop stress [Pa]
        safety_factor: Yield strength / hoop stress, capped at 99 [-]
        thrust_coefficient: Ideal thrust coefficient [-]
        yielding: Casing stress above yield strength
        phase: Lifecycle phase
        total_impulse: Integrated thrust [N·s]
        burn_time: Time of burnout, 0 until burned out [s]
        max_thrust: Peak thrust [N]
        max_pressure: Peak chamber pressure [Pa]
        explosion_time: Time of casing failure, None unless exploded [s]
        history: Sampled history, oldest first
    """

    time: float = 0.0
    current_inner_radius: float = 0.0
    chamber_pressure: float = ATMOSPHERIC_PRESSURE
    thrust: float = 0.0
    burn_rate: float = 0.0
    burning_area: float = 0.0
    kn: float = 0.0
    stress: float = 0.0
    safety_factor: float = MAX_SAFETY_FACTOR
    thrust_coefficient: float = 0.0
    yielding: bool = False
    phase: LifecyclePhase = LifecyclePhase.IDLE
    total_impulse: float = 0.0
    burn_time: float = 0.0
    max_thrust: float = 0.0
    max_pressure: float = 0.0
    explosion_time: float | None = None
    history: deque[HistorySample] = field(default_factory=deque)

    @classmethod
    def initial(
        cls,
        config: SimulationConfig,
        max_history: int | None = None,
    ) -> "SimulationState":
        """Fresh IDLE state with the core at its configured radius."""
        return cls(
            current_inner_radius=float(config.grain.core_radius),
            history=deque(maxlen=max_history),
        )


@beartype
@dataclass(frozen=True, slots=True)
class MotorSnapshot:
    """Read-only view of the simulation after a call.

    Carries every SimulationState field, the derived burn progress and the
    active configuration.
    """

    time: float
    current_inner_radius: float
    chamber_pressure: float
    thrust: float
    burn_rate: float
    burning_area: float
    kn: float
    stress: float
    safety_factor: float
    thrust_coefficient: float
    yielding: bool
    phase: LifecyclePhase
    total_impulse: float
    burn_time: float
    max_thrust: float
    max_pressure: float
    explosion_time: float | None
    burn_progress: float
    history: tuple[HistorySample, ...]
    config: SimulationConfig

    @property
    def is_burning(self) -> bool:
        return self.phase is LifecyclePhase.BURNING

    @property
    def is_burned_out(self) -> bool:
        return self.phase is LifecyclePhase.BURNED_OUT

    @property
    def has_exploded(self) -> bool:
        return self.phase is LifecyclePhase.EXPLODED

    @property
    def burn_rate_mm_s(self) -> float:
        """Burn rate [mm/s]."""
        return self.burn_rate * 1000.0


# =============================================================================
# Simulator
# =============================================================================


@beartype
def burn_progress(config: SimulationConfig, state: SimulationState) -> float:
    """Fraction of the web burned, in [0, 1].

    A burned-out grain reports 1; while burning the value stays below 1
    because burnout triggers with a thin sliver of web left.
    """
    if state.phase is LifecyclePhase.BURNED_OUT:
        return 1.0
    core = float(config.grain.core_radius)
    web = float(config.grain.outer_radius) - core
    if web == 0.0:
        return 0.0
    progress = (state.current_inner_radius - core) / web
    return clamp_or_default(progress, 0.0, 1.0, 0.0)


@beartype
@dataclass
class MotorSimulation:
    """Step-driven solid motor simulation.

    Owns the configuration and the single mutable SimulationState of a
    run. Not safe for concurrent use; one caller drives it.

    Example:
        >>> sim = MotorSimulation()
        >>> sim.ignite()
        >>> for _ in range(100):
        ...     snap = sim.step(0.01)
        >>> print(f"Pc = {snap.chamber_pressure / 1e6:.2f} MPa")

    Attributes:
        config: Motor configuration
        max_history: Optional cap on retained history samples; the oldest
            samples are dropped once reached. None keeps every sample.
        state: Current simulation state
    """

    config: SimulationConfig = field(default_factory=default_config)
    max_history: int | None = None
    state: SimulationState = field(init=False, repr=False)
    _history_view: tuple[HistorySample, ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Start in IDLE."""
        self.state = SimulationState.initial(self.config, self.max_history)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def reset(self) -> MotorSnapshot:
        """Discard the current run and return to IDLE."""
        self.state = SimulationState.initial(self.config, self.max_history)
        self._history_view = None
        logger.info("Simulation reset")
        return self.snapshot()

    def ignite(self) -> MotorSnapshot:
        """Start the burn. A finished motor cannot be re-ignited."""
        phase = self.state.phase
        if phase is LifecyclePhase.IDLE:
            self.state.phase = LifecyclePhase.BURNING
            logger.info("Motor ignited (%s)", self.config.propellant.name)
        elif phase is not LifecyclePhase.BURNING:
            logger.debug("Ignition refused, motor is %s", phase.name)
        return self.snapshot()

    def step(self, dt: float | int) -> MotorSnapshot:
        """Advance the burn by dt seconds.

        Does nothing unless the motor is burning. dt must be positive and
        finite; anything else leaves the state untouched.

        Args:
            dt: Time step [s]

        Returns:
            Snapshot after the step
        """
        s = self.state
        if s.phase is not LifecyclePhase.BURNING:
            return self.snapshot()
        if not (dt > 0 and math.isfinite(dt)):
            logger.debug("Ignoring step with dt=%r", dt)
            return self.snapshot()

        dt = float(dt)
        cfg = self.config
        grain = cfg.grain
        propellant = cfg.propellant

        s.time += dt

        throat_area = cfg.nozzle.throat_area
        exit_area = cfg.nozzle.exit_area

        s.burning_area = burning_area(grain, s.current_inner_radius)
        s.kn = s.burning_area / throat_area if throat_area > 0.0 else 0.0

        s.chamber_pressure = solve_chamber_pressure(s.burning_area, throat_area, propellant)
        s.max_pressure = max(s.max_pressure, s.chamber_pressure)

        s.burn_rate = burn_rate(s.chamber_pressure, propellant)
        s.current_inner_radius += s.burn_rate * dt

        outer = float(grain.outer_radius)
        web_remaining = outer - s.current_inner_radius
        if web_remaining <= BURNOUT_WEB or s.current_inner_radius >= BURNOUT_RADIUS_FRACTION * outer:
            s.phase = LifecyclePhase.BURNED_OUT
            s.burn_time = s.time
            s.current_inner_radius = min(s.current_inner_radius, outer)
            s.thrust = 0.0
            s.thrust_coefficient = 0.0
            s.chamber_pressure = ATMOSPHERIC_PRESSURE
            s.burn_rate = 0.0
            logger.info(
                "Burnout at t=%.3f s, impulse %.1f N·s",
                s.time,
                s.total_impulse,
            )
            return self.snapshot()

        s.thrust_coefficient = thrust_coefficient(
            propellant.gamma, exit_area, throat_area, s.chamber_pressure
        )
        ideal_thrust = thrust(s.chamber_pressure, throat_area, exit_area, propellant)
        s.thrust = clamp_or_default(
            ideal_thrust * float(cfg.nozzle.efficiency), 0.0, math.inf, 0.0
        )
        s.max_thrust = max(s.max_thrust, s.thrust)

        s.stress = hoop_stress(
            s.chamber_pressure, cfg.casing.inner_radius, cfg.casing.wall_thickness
        )
        s.safety_factor = safety_factor(s.stress, cfg.material)

        failure = classify_failure(s.stress, cfg.material)
        if failure.yielding and not s.yielding:
            logger.warning(
                "Casing yielding at t=%.3f s (%.1f MPa)", s.time, s.stress / 1e6
            )
        s.yielding = failure.yielding
        if failure.catastrophic:
            # Values are frozen, not zeroed, so the failure moment stays visible
            s.phase = LifecyclePhase.EXPLODED
            s.explosion_time = s.time
            logger.warning(
                "CATO at t=%.3f s: hoop stress %.1f MPa exceeds %s ultimate strength",
                s.time,
                s.stress / 1e6,
                cfg.material.name,
            )

        s.total_impulse += s.thrust * dt

        if not s.history or s.time - s.history[-1].time >= HISTORY_INTERVAL:
            s.history.append(
                HistorySample(
                    time=s.time,
                    pressure=s.chamber_pressure,
                    thrust=s.thrust,
                    burn_rate=s.burn_rate,
                    inner_radius=s.current_inner_radius,
                    kn=s.kn,
                    stress=s.stress,
                )
            )
            self._history_view = None

        return self.snapshot()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def update_config(self, patch: ConfigPatch) -> MotorSnapshot:
        """Merge a partial configuration. The running state is kept."""
        self.config = merge_config(self.config, patch)
        return self.snapshot()

    def set_propellant(self, key: str) -> MotorSnapshot:
        """Select a catalog propellant. An unknown key leaves the configuration unchanged."""
        try:
            propellant = get_propellant(key)
        except ValueError:
            logger.warning("Unknown propellant %r, configuration unchanged", key)
            return self.snapshot()
        self.config = replace(self.config, propellant=propellant)
        return self.snapshot()

    def set_material(self, key: str) -> MotorSnapshot:
        """Select a catalog casing material. An unknown key leaves the configuration unchanged."""
        try:
            material = get_material(key)
        except ValueError:
            logger.warning("Unknown material %r, configuration unchanged", key)
            return self.snapshot()
        self.config = replace(self.config, material=material)
        return self.snapshot()

    def set_grain_type(self, key: str | GrainType) -> MotorSnapshot:
        """Select the grain cross section. An unknown key leaves the configuration unchanged."""
        if isinstance(key, GrainType):
            grain_type = key
        else:
            try:
                grain_type = get_grain_type(key)
            except ValueError:
                logger.warning("Unknown grain type %r, configuration unchanged", key)
                return self.snapshot()
        self.config = replace(self.config, grain=replace(self.config.grain, type=grain_type))
        return self.snapshot()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def snapshot(self) -> MotorSnapshot:
        """Read-only copy of the current state and configuration."""
        s = self.state
        # Rebuilt only after a new sample, snapshots in between share one tuple
        if self._history_view is None:
            self._history_view = tuple(s.history)
        return MotorSnapshot(
            time=s.time,
            current_inner_radius=s.current_inner_radius,
            chamber_pressure=s.chamber_pressure,
            thrust=s.thrust,
            burn_rate=s.burn_rate,
            burning_area=s.burning_area,
            kn=s.kn,
            stress=s.stress,
            safety_factor=s.safety_factor,
            thrust_coefficient=s.thrust_coefficient,
            yielding=s.yielding,
            phase=s.phase,
            total_impulse=s.total_impulse,
            burn_time=s.burn_time,
            max_thrust=s.max_thrust,
            max_pressure=s.max_pressure,
            explosion_time=s.explosion_time,
            burn_progress=self.burn_progress,
            history=self._history_view,
            config=self.config,
        )

    def get_history(self) -> list[HistorySample]:
        """Recorded history, oldest first."""
        return list(self.state.history)

    @property
    def phase(self) -> LifecyclePhase:
        """Current lifecycle phase."""
        return self.state.phase

    @property
    def time(self) -> float:
        """Simulated time since ignition [s]."""
        return self.state.time

    @property
    def burn_progress(self) -> float:
        """Fraction of the web burned, in [0, 1]."""
        return burn_progress(self.config, self.state)
