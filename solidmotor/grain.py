"""Propellant grain geometry and burning surface area.

The grain is a stack of identical cylindrical segments with a circular
core. As the propellant regresses the core radius grows until the web is
consumed. Burning area is evaluated analytically from the current core
radius; no 2D burnback is performed.

Approximations:
    - BATES end faces burn at a fixed exposed fraction of their area
      (END_EXPOSURE_FRACTION) for the whole burn instead of tracking the
      true end-face regression.
    - STAR grains are a cylindrical core scaled by a fixed perimeter
      multiplier (STAR_PERIMETER_FACTOR); this is not a star burnback.
    - FINOCYL is reserved and burns like a cylindrical core.

Example:
    >>> from solidmotor.grain import GrainGeometry, GrainType, burning_area
    >>> grain = GrainGeometry(type=GrainType.BATES, outer_radius=0.0285,
    ...                       core_radius=0.0095, length=0.055, segments=4)
    >>> print(f"Ab = {burning_area(grain, grain.core_radius) * 1e4:.1f} cm²")
"""

import math
from dataclasses import dataclass
from enum import Enum

from beartype import beartype

from solidmotor.bounds import MAX_BURN_RADIUS_FRACTION, MIN_BURN_RADIUS
from solidmotor.propellants import PropellantSpec

END_EXPOSURE_FRACTION: float = 0.3
STAR_PERIMETER_FACTOR: float = 2.5


class GrainType(Enum):
    """Supported grain cross sections."""

    BATES = "bates"
    STAR = "star"
    CYLINDRICAL = "cylindrical"
    FINOCYL = "finocyl"  # reserved, burns as CYLINDRICAL


@beartype
@dataclass(frozen=True, slots=True)
class GrainGeometry:
    """Grain dimensions.

    Attributes:
        type: Grain cross section
        outer_radius: Outer radius of the propellant [m]
        core_radius: Initial core (inner) radius [m]
        length: Length of one segment [m]
        segments: Number of segments
        star_points: Number of star points (rendering only)
        star_inner_radius: Star valley radius (rendering only) [m]
    """

    type: GrainType = GrainType.BATES
    outer_radius: float | int = 0.0285
    core_radius: float | int = 0.0095
    length: float | int = 0.055
    segments: int = 4
    star_points: int = 5
    star_inner_radius: float | int = 0.006

    @property
    def web_thickness(self) -> float:
        """Initial web thickness [m]."""
        return float(self.outer_radius - self.core_radius)

    @property
    def total_length(self) -> float:
        """Length of the whole grain stack [m]."""
        return float(self.length * self.segments)


@beartype
def list_grain_types() -> list[str]:
    """List grain type keys."""
    return [grain_type.name for grain_type in GrainType]


@beartype
def get_grain_type(key: str) -> GrainType:
    """Look up a grain type by key (case-insensitive).

    Raises:
        ValueError: If the key is not a grain type
    """
    normalized = key.upper().strip()
    if normalized not in GrainType.__members__:
        available = ", ".join(list_grain_types())
        raise ValueError(f"Unknown grain type: {key}. Available: {available}")
    return GrainType[normalized]


@beartype
def burning_area(geometry: GrainGeometry, inner_radius: float | int) -> float:
    """Instantaneous burning surface area.

    Args:
        geometry: Grain geometry
        inner_radius: Current burned-back core radius [m]

    Returns:
        Burning surface area [m²]
    """
    R = float(geometry.outer_radius)
    L = float(geometry.length)
    N = geometry.segments

    # Keep away from a zero-area core and from burning past the casing
    r = min(max(float(inner_radius), MIN_BURN_RADIUS), R * MAX_BURN_RADIUS_FRACTION)

    core_area = N * 2.0 * math.pi * r * L

    if geometry.type is GrainType.BATES:
        end_area = N * 2.0 * math.pi * (R * R - r * r) * END_EXPOSURE_FRACTION
        return core_area + end_area

    if geometry.type is GrainType.STAR:
        return core_area * STAR_PERIMETER_FACTOR

    return core_area


@beartype
def propellant_mass(geometry: GrainGeometry, propellant: PropellantSpec) -> float:
    """Initial propellant mass of the grain [kg]."""
    R = float(geometry.outer_radius)
    r = float(geometry.core_radius)
    volume = geometry.segments * math.pi * (R * R - r * r) * float(geometry.length)
    return max(volume, 0.0) * float(propellant.density)
