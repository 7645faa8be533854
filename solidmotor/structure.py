"""Casing structural model.

The casing is a thin-walled cylindrical pressure vessel. Hoop stress is
compared against the material's yield strength (informational) and
ultimate strength (catastrophic failure, CATO).
"""

import math
from dataclasses import dataclass
from typing import NamedTuple

from beartype import beartype

from solidmotor.bounds import MAX_SAFETY_FACTOR, clamp_or_default
from solidmotor.materials import MaterialSpec


@beartype
@dataclass(frozen=True, slots=True)
class CasingGeometry:
    """Motor casing tube.

    Attributes:
        inner_radius: Casing inner radius [m]
        wall_thickness: Casing wall thickness [m]
    """

    inner_radius: float | int = 0.030
    wall_thickness: float | int = 0.003


class FailureCheck(NamedTuple):
    """Structural failure classification."""

    yielding: bool  # Hoop stress above yield strength
    catastrophic: bool  # Hoop stress above ultimate strength


@beartype
def hoop_stress(
    pressure: float | int,
    inner_radius: float | int,
    wall_thickness: float | int,
) -> float:
    """Thin-wall hoop stress sigma = P * r / t.

    A zero or negative wall thickness is a configuration error; it maps to
    an infinite stress rather than raising.

    Args:
        pressure: Internal pressure [Pa]
        inner_radius: Casing inner radius [m]
        wall_thickness: Casing wall thickness [m]

    Returns:
        Hoop stress [Pa], never negative
    """
    if wall_thickness <= 0:
        return math.inf
    stress = float(pressure) * float(inner_radius) / float(wall_thickness)
    return clamp_or_default(stress, 0.0, math.inf, 0.0)


@beartype
def safety_factor(stress: float | int, material: MaterialSpec) -> float:
    """Yield safety factor, capped at MAX_SAFETY_FACTOR.

    No stress means an effectively unbounded margin, represented by the cap.
    """
    if not stress > 0:
        return MAX_SAFETY_FACTOR
    sf = float(material.yield_strength) / float(stress)
    return clamp_or_default(sf, 0.0, MAX_SAFETY_FACTOR, MAX_SAFETY_FACTOR)


@beartype
def classify_failure(stress: float | int, material: MaterialSpec) -> FailureCheck:
    """Classify the casing state at a given hoop stress."""
    return FailureCheck(
        yielding=bool(stress > material.yield_strength),
        catastrophic=bool(stress > material.ultimate_strength),
    )
