"""solidmotor - Internal ballistics simulation of solid rocket motors.

This package advances a solid-propellant motor through its burn one time
step at a time: burning surface, burn rate, chamber pressure, thrust and
casing stress, ending in burnout or a catastrophic casing failure (CATO).

Example:
    >>> from solidmotor import MotorSimulation, LifecyclePhase
    >>>
    >>> sim = MotorSimulation()
    >>> sim.ignite()
    >>> while sim.phase is LifecyclePhase.BURNING:
    ...     snapshot = sim.step(0.01)
    >>> print(f"Impulse: {snapshot.total_impulse:.0f} N·s")
"""

__version__ = "0.1.0"

# Physical models
from solidmotor.burn_rate import burn_rate
from solidmotor.chamber import (
    ChamberSolution,
    solve_chamber_pressure,
    solve_chamber_pressure_detailed,
)

# Configuration
from solidmotor.config import (
    CasingPatch,
    ConfigPatch,
    GrainPatch,
    NozzlePatch,
    SimulationConfig,
    default_config,
    merge_config,
)
from solidmotor.grain import (
    GrainGeometry,
    GrainType,
    burning_area,
    get_grain_type,
    list_grain_types,
    propellant_mass,
)
from solidmotor.log import configure_logging

# Catalogs
from solidmotor.materials import MaterialSpec, get_material, list_materials
from solidmotor.nozzle import (
    NozzleGeometry,
    specific_impulse,
    thrust,
    thrust_coefficient,
)
from solidmotor.propellants import PropellantSpec, get_propellant, list_propellants

# Results
from solidmotor.results import BurnResult, format_burn_summary, motor_class, run_burn

# Simulation
from solidmotor.simulation import (
    HistorySample,
    LifecyclePhase,
    MotorSimulation,
    MotorSnapshot,
    SimulationState,
)
from solidmotor.structure import (
    CasingGeometry,
    FailureCheck,
    classify_failure,
    hoop_stress,
    safety_factor,
)

__all__ = [
    # Version
    "__version__",
    # Catalogs
    "PropellantSpec",
    "get_propellant",
    "list_propellants",
    "MaterialSpec",
    "get_material",
    "list_materials",
    "GrainType",
    "get_grain_type",
    "list_grain_types",
    # Geometry
    "GrainGeometry",
    "NozzleGeometry",
    "CasingGeometry",
    # Models
    "burning_area",
    "propellant_mass",
    "burn_rate",
    "ChamberSolution",
    "solve_chamber_pressure",
    "solve_chamber_pressure_detailed",
    "thrust",
    "thrust_coefficient",
    "specific_impulse",
    "FailureCheck",
    "hoop_stress",
    "safety_factor",
    "classify_failure",
    # Configuration
    "SimulationConfig",
    "ConfigPatch",
    "GrainPatch",
    "NozzlePatch",
    "CasingPatch",
    "default_config",
    "merge_config",
    # Simulation
    "LifecyclePhase",
    "HistorySample",
    "SimulationState",
    "MotorSnapshot",
    "MotorSimulation",
    # Results
    "BurnResult",
    "run_burn",
    "motor_class",
    "format_burn_summary",
    # Logging
    "configure_logging",
]
