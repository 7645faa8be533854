"""Nozzle geometry and thrust.

Thrust is computed from the ideal (isentropic, frozen-flow) thrust
coefficient with the exit pressure fixed at sea-level atmospheric. The
pressure-thrust term is neglected; there is no altitude or back-pressure
modeling.

References:
    - Sutton & Biblarz, "Rocket Propulsion Elements", 9th Ed.
    - R. Nakka, "Solid Rocket Motor Theory -- Nozzle Theory"
"""

import math
from dataclasses import dataclass

import numba
from beartype import beartype

from solidmotor.bounds import (
    ATMOSPHERIC_PRESSURE,
    CF_DEFAULT,
    CF_MAX,
    CF_MIN,
    G0,
    clamp_or_default,
)
from solidmotor.propellants import PropellantSpec

# =============================================================================
# Geometry
# =============================================================================


@beartype
def area_from_diameter(diameter: float | int) -> float:
    """Circular area from diameter [m²]."""
    r = float(diameter) / 2.0
    return math.pi * r * r


@beartype
@dataclass(frozen=True, slots=True)
class NozzleGeometry:
    """Convergent-divergent nozzle.

    Attributes:
        throat_diameter: Throat diameter [m]
        exit_diameter: Exit diameter [m]
        efficiency: Thrust efficiency factor applied to ideal thrust [0-1]
    """

    throat_diameter: float | int = 0.009
    exit_diameter: float | int = 0.018
    efficiency: float | int = 0.90

    @property
    def throat_area(self) -> float:
        """Throat area [m²]."""
        return area_from_diameter(self.throat_diameter)

    @property
    def exit_area(self) -> float:
        """Exit area [m²]."""
        return area_from_diameter(self.exit_diameter)

    @property
    def expansion_ratio(self) -> float:
        """Exit to throat area ratio Ae/At; 0 for a degenerate throat."""
        throat = self.throat_area
        if throat <= 0.0:
            return 0.0
        return self.exit_area / throat


# =============================================================================
# Numba-Optimized Core
# =============================================================================


@numba.njit(cache=True)
def _thrust_coefficient_core(gamma: float, chamber_pressure: float) -> float:
    pe_pc = ATMOSPHERIC_PRESSURE / chamber_pressure

    gm1 = gamma - 1.0
    gp1 = gamma + 1.0

    term1 = 2.0 * gamma * gamma / gm1
    term2 = math.pow(2.0 / gp1, gp1 / gm1)
    term3 = max(1.0 - math.pow(pe_pc, gm1 / gamma), 0.0)

    cf = math.sqrt(term1 * term2 * term3)
    return clamp_or_default(cf, CF_MIN, CF_MAX, CF_DEFAULT)


# =============================================================================
# Public API
# =============================================================================


@beartype
def thrust_coefficient(
    gamma: float | int,
    exit_area: float | int,
    throat_area: float | int,
    chamber_pressure: float | int,
) -> float:
    """Ideal thrust coefficient Cf.

    The exit plane is assumed to sit at atmospheric pressure, so the
    expansion ratio does not enter the momentum term. The area arguments
    are accepted for callers that carry the full nozzle description.

    Args:
        gamma: Ratio of specific heats [-]
        exit_area: Nozzle exit area [m²]
        throat_area: Nozzle throat area [m²]
        chamber_pressure: Chamber pressure [Pa]

    Returns:
        Cf in [CF_MIN, CF_MAX]; 0 when the chamber is not above atmospheric
    """
    pc = float(chamber_pressure)
    if not pc > ATMOSPHERIC_PRESSURE:
        return 0.0
    # gamma <= 1 has no isentropic solution
    if not gamma > 1.0:
        return CF_DEFAULT
    return _thrust_coefficient_core(float(gamma), pc)


@beartype
def thrust(
    chamber_pressure: float | int,
    throat_area: float | int,
    exit_area: float | int,
    propellant: PropellantSpec,
) -> float:
    """Ideal thrust F = Cf * Pc * At.

    The nozzle efficiency factor is applied by the caller.

    Args:
        chamber_pressure: Chamber pressure [Pa]
        throat_area: Throat area [m²]
        exit_area: Exit area [m²]
        propellant: Propellant properties (gamma)

    Returns:
        Thrust [N], never negative; 0 below atmospheric pressure
    """
    pc = float(chamber_pressure)
    at = float(throat_area)
    if not pc > ATMOSPHERIC_PRESSURE or at <= 0.0:
        return 0.0

    cf = thrust_coefficient(propellant.gamma, exit_area, at, pc)
    return clamp_or_default(cf * pc * at, 0.0, math.inf, 0.0)


@beartype
def specific_impulse(cstar: float | int, cf: float | int) -> float:
    """Specific impulse Isp = c* * Cf / g0 [s]."""
    return float(cstar) * float(cf) / G0
