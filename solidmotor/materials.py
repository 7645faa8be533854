"""Casing material catalog for structural analysis.

Strength data is given at room temperature; the motor casing is treated as
a thin-walled pressure vessel, so only density, yield strength and ultimate
strength enter the structural model. Thermal conductivity is carried for
renderers that shade the casing.

Example:
    >>> from solidmotor.materials import get_material
    >>> al = get_material("ALUMINUM")
    >>> print(f"Yield: {al.yield_strength / 1e6:.0f} MPa")
"""

from dataclasses import dataclass

from beartype import beartype

# =============================================================================
# Data Structures
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class MaterialSpec:
    """Mechanical properties of a casing material.

    Attributes:
        name: Human readable material name
        density: Density [kg/m³]
        yield_strength: Yield strength [Pa]
        ultimate_strength: Ultimate tensile strength [Pa]
        thermal_conductivity: Thermal conductivity [W/(m·K)]
    """

    name: str
    density: float | int
    yield_strength: float | int
    ultimate_strength: float | int
    thermal_conductivity: float | int = 0.0


# =============================================================================
# Material Database
# =============================================================================

MATERIALS: dict[str, MaterialSpec] = {
    "ALUMINUM": MaterialSpec(
        name="Aluminum 6061-T6",
        density=2700.0,
        yield_strength=276e6,
        ultimate_strength=310e6,
        thermal_conductivity=167.0,
    ),
    "STEEL": MaterialSpec(
        name="Steel 4130",
        density=7850.0,
        yield_strength=435e6,
        ultimate_strength=560e6,
        thermal_conductivity=42.0,
    ),
    # Brittle: yields and ruptures at the same stress
    "PVC": MaterialSpec(
        name="PVC Schedule 40",
        density=1400.0,
        yield_strength=52e6,
        ultimate_strength=52e6,
        thermal_conductivity=0.19,
    ),
    "COMPOSITE": MaterialSpec(
        name="Carbon Fiber Composite",
        density=1600.0,
        yield_strength=600e6,
        ultimate_strength=800e6,
        thermal_conductivity=5.0,
    ),
}


@beartype
def list_materials() -> list[str]:
    """List available casing material keys."""
    return list(MATERIALS.keys())


@beartype
def get_material(key: str) -> MaterialSpec:
    """Look up a casing material by catalog key.

    Args:
        key: Catalog key (e.g., "ALUMINUM", "STEEL"); case-insensitive

    Returns:
        MaterialSpec for the key

    Raises:
        ValueError: If the key is not in the catalog
    """
    normalized = key.upper().strip()
    if normalized not in MATERIALS:
        available = ", ".join(list_materials())
        raise ValueError(f"Unknown material: {key}. Available: {available}")
    return MATERIALS[normalized]
