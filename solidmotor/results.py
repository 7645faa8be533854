"""Burn results and a complete static-fire driver.

:class:`BurnResult` is a read-only view over a finished (or stopped) run:
history columns as numpy arrays, the aggregate performance figures and a
Polars DataFrame for whatever reporting layer consumes it.

Example:
    >>> from solidmotor.results import format_burn_summary, run_burn
    >>> result = run_burn(dt=0.01)
    >>> print(format_burn_summary(result))
    >>> df = result.to_dataframe()
"""

import math
import string
from dataclasses import dataclass

import numpy as np
import polars as pl
from beartype import beartype
from numpy.typing import NDArray

from solidmotor.bounds import G0, MAX_TIME_STEP
from solidmotor.config import SimulationConfig
from solidmotor.grain import propellant_mass
from solidmotor.log import get_logger
from solidmotor.simulation import HistorySample, LifecyclePhase, MotorSimulation

logger = get_logger(__name__)

# Upper bound of the "A" impulse class [N·s]; each letter doubles it
_CLASS_A_LIMIT = 2.5


# =============================================================================
# Results
# =============================================================================


@beartype
@dataclass(frozen=True)
class BurnResult:
    """Outcome and history of one motor burn.

    Attributes:
        samples: Recorded history, oldest first
        config: Configuration the burn ran with
        phase: Phase the run ended in
        total_impulse: Integrated thrust [N·s]
        burn_time: Time of burnout, 0 unless burned out [s]
        max_thrust: Peak thrust [N]
        max_pressure: Peak chamber pressure [Pa]
        end_time: Simulated time when the run stopped [s]
        explosion_time: Time of casing failure, None unless exploded [s]
    """

    samples: tuple[HistorySample, ...]
    config: SimulationConfig
    phase: LifecyclePhase
    total_impulse: float
    burn_time: float
    max_thrust: float
    max_pressure: float
    end_time: float
    explosion_time: float | None = None

    @classmethod
    def from_simulation(cls, sim: MotorSimulation) -> "BurnResult":
        """Create a result from the simulation's current state."""
        state = sim.state
        return cls(
            samples=tuple(state.history),
            config=sim.config,
            phase=state.phase,
            total_impulse=state.total_impulse,
            burn_time=state.burn_time,
            max_thrust=state.max_thrust,
            max_pressure=state.max_pressure,
            end_time=state.time,
            explosion_time=state.explosion_time,
        )

    def _column(self, name: str) -> NDArray[np.float64]:
        return np.array([getattr(s, name) for s in self.samples], dtype=np.float64)

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return self._column("time")

    @property
    def pressure(self) -> NDArray[np.float64]:
        """Chamber pressure history [Pa]."""
        return self._column("pressure")

    @property
    def thrust(self) -> NDArray[np.float64]:
        """Thrust history [N]."""
        return self._column("thrust")

    @property
    def burn_rate(self) -> NDArray[np.float64]:
        """Burn rate history [m/s]."""
        return self._column("burn_rate")

    @property
    def inner_radius(self) -> NDArray[np.float64]:
        """Core radius history [m]."""
        return self._column("inner_radius")

    @property
    def kn(self) -> NDArray[np.float64]:
        """Kn history [-]."""
        return self._column("kn")

    @property
    def stress(self) -> NDArray[np.float64]:
        """Hoop stress history [Pa]."""
        return self._column("stress")

    @property
    def burned_out(self) -> bool:
        return self.phase is LifecyclePhase.BURNED_OUT

    @property
    def exploded(self) -> bool:
        return self.phase is LifecyclePhase.EXPLODED

    @property
    def thrust_duration(self) -> float:
        """Time the motor produced thrust [s]."""
        if self.explosion_time is not None:
            return self.explosion_time
        if self.burn_time > 0.0:
            return self.burn_time
        return self.end_time

    @property
    def average_thrust(self) -> float:
        """Mean thrust over the thrust duration [N]."""
        duration = self.thrust_duration
        if duration <= 0.0:
            return 0.0
        return self.total_impulse / duration

    @property
    def propellant_mass(self) -> float:
        """Initial propellant mass [kg]."""
        return propellant_mass(self.config.grain, self.config.propellant)

    @property
    def delivered_isp(self) -> float:
        """Total impulse per unit propellant weight [s]."""
        mass = self.propellant_mass
        if mass <= 0.0:
            return 0.0
        return self.total_impulse / (mass * G0)

    @property
    def motor_class(self) -> str:
        """Impulse class letter (NAR/TRA)."""
        return motor_class(self.total_impulse)

    def to_dataframe(self) -> pl.DataFrame:
        """History as a Polars DataFrame, SI units."""
        return pl.DataFrame({
            "time": self.time,
            "pressure": self.pressure,
            "thrust": self.thrust,
            "burn_rate": self.burn_rate,
            "inner_radius": self.inner_radius,
            "kn": self.kn,
            "stress": self.stress,
        })


# =============================================================================
# Classification and Formatting
# =============================================================================


@beartype
def motor_class(total_impulse: float | int) -> str:
    """Impulse class of a motor.

    Classes below A are "1/4A" (<= 0.625 N·s) and "1/2A" (<= 1.25 N·s);
    from A (<= 2.5 N·s) upward each letter doubles the impulse range.

    Args:
        total_impulse: Total impulse [N·s]

    Returns:
        Class designation, or "" for no impulse
    """
    if not total_impulse > 0:
        return ""
    if total_impulse <= _CLASS_A_LIMIT / 4:
        return "1/4A"
    if total_impulse <= _CLASS_A_LIMIT / 2:
        return "1/2A"
    index = max(0, math.ceil(math.log2(total_impulse / _CLASS_A_LIMIT)))
    letters = string.ascii_uppercase
    return letters[min(index, len(letters) - 1)]


@beartype
def format_burn_summary(result: BurnResult) -> str:
    """Format burn results as a readable string."""
    config = result.config
    if result.exploded:
        outcome = f"CATO at {result.explosion_time:.3f} s"
    elif result.burned_out:
        outcome = f"Burnout at {result.burn_time:.3f} s"
    else:
        outcome = f"Stopped at {result.end_time:.3f} s ({result.phase.name})"

    designation = result.motor_class or "-"
    lines = [
        f"Motor: {config.propellant.name}, {config.grain.segments}x {config.grain.type.name}",
        "=" * 50,
        f"Outcome:         {outcome}",
        f"Class:           {designation}{result.average_thrust:.0f}",
        f"Total impulse:   {result.total_impulse:.1f} N·s",
        f"Average thrust:  {result.average_thrust:.1f} N",
        f"Peak thrust:     {result.max_thrust:.1f} N",
        f"Peak pressure:   {result.max_pressure / 1e6:.2f} MPa",
        f"Propellant mass: {result.propellant_mass:.3f} kg",
        f"Delivered Isp:   {result.delivered_isp:.1f} s",
        f"Casing:          {config.material.name}, "
        f"{config.casing.wall_thickness * 1000:.1f} mm wall",
    ]
    return "\n".join(lines)


# =============================================================================
# Driver
# =============================================================================


@beartype
def run_burn(
    config: SimulationConfig | None = None,
    dt: float | int = 0.01,
    max_time: float | int = 60.0,
) -> BurnResult:
    """Ignite a motor and step it until burnout, CATO or max_time.

    Args:
        config: Motor configuration, defaults to the stock motor
        dt: Time step [s], in (0, MAX_TIME_STEP]
        max_time: Simulated time limit [s]

    Returns:
        BurnResult of the run

    Raises:
        ValueError: If dt or max_time is out of range
    """
    if not 0.0 < dt <= MAX_TIME_STEP:
        raise ValueError(f"dt must be in (0, {MAX_TIME_STEP}] s, got {dt}")
    if not max_time > 0.0:
        raise ValueError(f"max_time must be positive, got {max_time}")

    sim = MotorSimulation(config=config) if config is not None else MotorSimulation()
    sim.ignite()
    while sim.phase is LifecyclePhase.BURNING and sim.time < max_time:
        sim.step(dt)

    if sim.phase is LifecyclePhase.BURNING:
        logger.warning("Burn still in progress at max_time=%.1f s", max_time)

    return BurnResult.from_simulation(sim)
