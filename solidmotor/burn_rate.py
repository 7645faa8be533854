"""Propellant burn rate (Saint-Venant / Vieille power law).

    r = a * (P / Pref)^n

with a in mm/s and P, Pref in MPa. The result is returned in m/s and held
inside the envelope expected for the supported propellant family so that a
runaway value cannot destabilize the chamber pressure solver.
"""

import math

import numba
from beartype import beartype

from solidmotor.bounds import (
    DEFAULT_REFERENCE_PRESSURE,
    MAX_BURN_RATE,
    MIN_BURN_PRESSURE,
    clamp_or_default,
)
from solidmotor.propellants import PropellantSpec


@numba.njit(cache=True)
def burn_rate_core(pressure: float, a: float, n: float, pref: float) -> float:
    """Burn rate kernel.

    Args:
        pressure: Chamber pressure [Pa]
        a: Burn rate coefficient [mm/s]
        n: Pressure exponent [-]
        pref: Reference pressure [MPa]

    Returns:
        Burn rate [m/s] in [0, MAX_BURN_RATE]
    """
    if pref <= 0.0:
        pref = DEFAULT_REFERENCE_PRESSURE
    p_mpa = max(pressure / 1e6, MIN_BURN_PRESSURE)
    rate_mm_s = a * math.pow(p_mpa / pref, n)
    return clamp_or_default(rate_mm_s / 1000.0, 0.0, MAX_BURN_RATE, 0.0)


@beartype
def burn_rate(pressure: float | int, propellant: PropellantSpec) -> float:
    """Linear regression rate of the burning surface.

    Args:
        pressure: Chamber pressure [Pa]
        propellant: Propellant properties

    Returns:
        Burn rate [m/s], 0 when the law yields a non-finite value
    """
    return burn_rate_core(
        float(pressure),
        float(propellant.burn_rate_coeff),
        float(propellant.burn_rate_exponent),
        float(propellant.reference_pressure),
    )
