"""Physical constants and numerical safety bounds for the motor engine.

Every model in the package maps degenerate or non-finite intermediate
results onto a documented safe value instead of raising. The ranges and
defaults used for that live here, together with the one helper that
applies them, so the whole safety policy can be audited in one place.

Example:
    >>> from solidmotor.bounds import clamp_or_default, MAX_BURN_RATE
    >>> clamp_or_default(float("nan"), 0.0, MAX_BURN_RATE, 0.0)
    0.0
"""

import math

import numba

# =============================================================================
# Physical Constants
# =============================================================================

G0: float = 9.81  # m/s^2
ATMOSPHERIC_PRESSURE: float = 101325.0  # Pa

# =============================================================================
# Chamber Pressure Solver
# =============================================================================

MAX_CHAMBER_PRESSURE: float = 15e6  # Pa
SOLVER_SEED_PRESSURE: float = 2e6  # Pa
SOLVER_MAX_ITERATIONS: int = 20
SOLVER_TOLERANCE: float = 1000.0  # Pa
SOLVER_RELAXATION: float = 0.3  # weight of the new estimate

# =============================================================================
# Burn Rate
# =============================================================================

MAX_BURN_RATE: float = 0.030  # m/s
MIN_BURN_PRESSURE: float = 0.1  # MPa, floor of the power-law base
DEFAULT_REFERENCE_PRESSURE: float = 6.895  # MPa (1000 psi)

# =============================================================================
# Nozzle
# =============================================================================

CF_MIN: float = 1.0
CF_MAX: float = 2.2
CF_DEFAULT: float = 1.5

# =============================================================================
# Structure
# =============================================================================

MAX_SAFETY_FACTOR: float = 99.0

# =============================================================================
# Grain Regression
# =============================================================================

MIN_BURN_RADIUS: float = 0.001  # m
MAX_BURN_RADIUS_FRACTION: float = 0.99  # of outer radius
BURNOUT_WEB: float = 0.001  # m of web left at burnout
BURNOUT_RADIUS_FRACTION: float = 0.98  # of outer radius

# =============================================================================
# History
# =============================================================================

HISTORY_INTERVAL: float = 0.01  # s of simulated time between samples
MAX_TIME_STEP: float = 0.05  # s, largest step a driver loop should take


@numba.njit(cache=True)
def clamp_or_default(value: float, low: float, high: float, default: float) -> float:
    """Clamp a value to [low, high], substituting a default when non-finite.

    Args:
        value: Raw model output
        low: Lower bound of the valid range
        high: Upper bound of the valid range
        default: Value returned when ``value`` is NaN or infinite

    Returns:
        A finite value inside [low, high] (or ``default``)
    """
    if not math.isfinite(value):
        return default
    if value < low:
        return low
    if value > high:
        return high
    return value
