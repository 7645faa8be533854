"""Steady-state chamber pressure solver.

The chamber pressure balances the mass generated by the burning surface
against the choked outflow through the nozzle throat:

    rho_p * r(Pc) * Ab = Pc * At / c*

Because r(Pc) is itself a power law in Pc, the balance is solved by a
relaxed fixed-point iteration. Near the operating point of the supported
propellants the update is a contraction, so a fixed blend converges in a
handful of iterations without derivatives. The iteration count is capped
and the result is always clamped to [atmospheric, MAX_CHAMBER_PRESSURE].

Example:
    >>> from solidmotor.chamber import solve_chamber_pressure
    >>> from solidmotor.propellants import get_propellant
    >>> pc = solve_chamber_pressure(0.0186, 6.36e-5, get_propellant("KNSB"))
    >>> print(f"Pc = {pc / 1e6:.2f} MPa")
"""

import math
from typing import NamedTuple

import numba
from beartype import beartype

from solidmotor.bounds import (
    ATMOSPHERIC_PRESSURE,
    MAX_CHAMBER_PRESSURE,
    SOLVER_MAX_ITERATIONS,
    SOLVER_RELAXATION,
    SOLVER_SEED_PRESSURE,
    SOLVER_TOLERANCE,
    clamp_or_default,
)
from solidmotor.burn_rate import burn_rate_core
from solidmotor.log import get_logger
from solidmotor.propellants import PropellantSpec

logger = get_logger(__name__)


class ChamberSolution(NamedTuple):
    """Chamber pressure together with solver diagnostics."""

    pressure: float  # Chamber pressure [Pa]
    iterations: int  # Iterations performed
    converged: bool  # Successive estimates agreed within tolerance


# =============================================================================
# Numba-Optimized Core
# =============================================================================


@numba.njit(cache=True)
def _solve_core(
    burning_area: float,
    throat_area: float,
    density: float,
    a: float,
    n: float,
    pref: float,
    cstar: float,
) -> tuple[float, int, bool]:
    """Relaxed fixed-point iteration on the mass balance."""
    if burning_area <= 0.0 or throat_area <= 0.0:
        return ATMOSPHERIC_PRESSURE, 0, False

    pc = SOLVER_SEED_PRESSURE
    iterations = 0
    converged = False
    for _ in range(SOLVER_MAX_ITERATIONS):
        iterations += 1
        rate = burn_rate_core(pc, a, n, pref)
        mdot_gen = density * rate * burning_area
        pc_new = mdot_gen * cstar / throat_area

        if not math.isfinite(pc_new):
            return ATMOSPHERIC_PRESSURE, iterations, False

        if abs(pc_new - pc) < SOLVER_TOLERANCE:
            converged = True
            break
        pc = (1.0 - SOLVER_RELAXATION) * pc + SOLVER_RELAXATION * pc_new

    pc = clamp_or_default(pc, ATMOSPHERIC_PRESSURE, MAX_CHAMBER_PRESSURE, ATMOSPHERIC_PRESSURE)
    return pc, iterations, converged


# =============================================================================
# Public API
# =============================================================================


@beartype
def solve_chamber_pressure_detailed(
    burning_area: float | int,
    throat_area: float | int,
    propellant: PropellantSpec,
) -> ChamberSolution:
    """Solve for chamber pressure and report solver diagnostics.

    Args:
        burning_area: Burning surface area Ab [m²]
        throat_area: Nozzle throat area At [m²]
        propellant: Propellant properties

    Returns:
        ChamberSolution with the pressure [Pa], iterations used and
        whether the iteration met the 1 kPa tolerance
    """
    pressure, iterations, converged = _solve_core(
        float(burning_area),
        float(throat_area),
        float(propellant.density),
        float(propellant.burn_rate_coeff),
        float(propellant.burn_rate_exponent),
        float(propellant.reference_pressure),
        float(propellant.characteristic_velocity),
    )
    if iterations == SOLVER_MAX_ITERATIONS and not converged:
        logger.debug(
            "Chamber pressure not converged after %d iterations (Pc=%.0f Pa)",
            iterations,
            pressure,
        )
    return ChamberSolution(float(pressure), int(iterations), bool(converged))


@beartype
def solve_chamber_pressure(
    burning_area: float | int,
    throat_area: float | int,
    propellant: PropellantSpec,
) -> float:
    """Solve for the self-consistent chamber pressure.

    Degenerate inputs (no burning surface or no throat) return atmospheric
    pressure, as do non-finite intermediate results.

    Args:
        burning_area: Burning surface area Ab [m²]
        throat_area: Nozzle throat area At [m²]
        propellant: Propellant properties

    Returns:
        Chamber pressure [Pa] in [ATMOSPHERIC_PRESSURE, MAX_CHAMBER_PRESSURE]
    """
    return solve_chamber_pressure_detailed(burning_area, throat_area, propellant).pressure
