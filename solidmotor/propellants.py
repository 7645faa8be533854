"""Solid propellant catalog for solidmotor.

This module holds the reference data for the supported sugar and composite
propellants: density, Saint-Venant burn-rate law coefficients, and the
thermochemical properties the ballistics models need.

Burn rate law: r = a * (P / Pref)^n with a in mm/s and Pref in MPa.

Example:
    >>> from solidmotor.propellants import get_propellant
    >>> knsb = get_propellant("KNSB")
    >>> print(f"c* = {knsb.characteristic_velocity:.0f} m/s")
"""

from dataclasses import dataclass

from beartype import beartype

# =============================================================================
# Data Structures
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class PropellantSpec:
    """Reference properties of a solid propellant.

    Attributes:
        name: Human readable propellant name
        density: Propellant density [kg/m³]
        burn_rate_coeff: Burn rate coefficient a at reference pressure [mm/s]
        burn_rate_exponent: Pressure exponent n [-]
        reference_pressure: Reference pressure Pref [MPa]
        characteristic_velocity: c* [m/s]
        gamma: Ratio of specific heats of the products [-]
        combustion_temp: Adiabatic flame temperature [K]
        molecular_mass: Mean molecular mass of the products [kg/kmol]
    """

    name: str
    density: float | int
    burn_rate_coeff: float | int
    burn_rate_exponent: float | int
    reference_pressure: float | int
    characteristic_velocity: float | int
    gamma: float | int
    combustion_temp: float | int
    molecular_mass: float | int


# =============================================================================
# Propellant Database
# =============================================================================

# Sugar propellant data after Richard Nakka's measurements.
# Pref = 6.895 MPa (1000 psi) for every entry.
PROPELLANTS: dict[str, PropellantSpec] = {
    "KNSB": PropellantSpec(
        name="KNSB (KNO3/Sorbitol 65/35)",
        density=1841.0,
        burn_rate_coeff=8.26,
        burn_rate_exponent=0.319,
        reference_pressure=6.895,
        characteristic_velocity=885.0,
        gamma=1.133,
        combustion_temp=1600.0,
        molecular_mass=39.9,
    ),
    "KNSU": PropellantSpec(
        name="KNSU (KNO3/Sucrose 65/35)",
        density=1889.0,
        burn_rate_coeff=8.26,
        burn_rate_exponent=0.319,
        reference_pressure=6.895,
        characteristic_velocity=914.0,
        gamma=1.133,
        combustion_temp=1720.0,
        molecular_mass=42.0,
    ),
    "KNDX": PropellantSpec(
        name="KNDX (KNO3/Dextrose 65/35)",
        density=1879.0,
        burn_rate_coeff=8.87,
        burn_rate_exponent=0.326,
        reference_pressure=6.895,
        characteristic_velocity=889.0,
        gamma=1.131,
        combustion_temp=1710.0,
        molecular_mass=42.4,
    ),
    # Typical amateur 70% AP composite
    "APCP": PropellantSpec(
        name="APCP (70% AP Composite)",
        density=1772.0,
        burn_rate_coeff=3.517,
        burn_rate_exponent=0.395,
        reference_pressure=6.895,
        characteristic_velocity=1550.0,
        gamma=1.25,
        combustion_temp=3000.0,
        molecular_mass=26.0,
    ),
}


# =============================================================================
# Public API
# =============================================================================


@beartype
def list_propellants() -> list[str]:
    """List available propellant keys.

    Returns:
        List of catalog keys
    """
    return list(PROPELLANTS.keys())


@beartype
def get_propellant(key: str) -> PropellantSpec:
    """Look up a propellant by catalog key.

    Args:
        key: Catalog key (e.g., "KNSB", "APCP"); case-insensitive

    Returns:
        PropellantSpec for the key

    Raises:
        ValueError: If the key is not in the catalog
    """
    normalized = key.upper().strip()
    if normalized not in PROPELLANTS:
        available = ", ".join(list_propellants())
        raise ValueError(f"Unknown propellant: {key}. Available: {available}")
    return PROPELLANTS[normalized]
