"""Motor configuration and partial configuration updates.

A :class:`SimulationConfig` bundles everything that describes the motor.
It is immutable; changes are expressed as a :class:`ConfigPatch` and
applied with the pure function :func:`merge_config`. Only the sections
and fields present in the patch change. No cross-field validation is
done (e.g. a core radius larger than the outer radius is accepted and
simply produces degenerate output).

Example:
    >>> from solidmotor.config import ConfigPatch, GrainPatch, default_config, merge_config
    >>> config = default_config()
    >>> six = merge_config(config, ConfigPatch(grain=GrainPatch(segments=6)))
    >>> six.grain.segments, six.nozzle == config.nozzle
    (6, True)
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from beartype import beartype

from solidmotor.grain import GrainGeometry, GrainType
from solidmotor.materials import MaterialSpec, get_material
from solidmotor.nozzle import NozzleGeometry
from solidmotor.propellants import PropellantSpec, get_propellant
from solidmotor.structure import CasingGeometry

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Complete motor description.

    Attributes:
        propellant: Propellant properties
        material: Casing material properties
        grain: Grain geometry
        nozzle: Nozzle geometry
        casing: Casing geometry
    """

    propellant: PropellantSpec = field(default_factory=lambda: get_propellant("KNSB"))
    material: MaterialSpec = field(default_factory=lambda: get_material("ALUMINUM"))
    grain: GrainGeometry = field(default_factory=GrainGeometry)
    nozzle: NozzleGeometry = field(default_factory=NozzleGeometry)
    casing: CasingGeometry = field(default_factory=CasingGeometry)


@beartype
def default_config() -> SimulationConfig:
    """Stock motor: KNSB, 4-segment BATES, 9/18 mm nozzle, 60 mm ID aluminum case."""
    return SimulationConfig()


# =============================================================================
# Partial Updates
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class GrainPatch:
    """Grain fields to change; None leaves a field as is."""

    type: GrainType | None = None
    outer_radius: float | int | None = None
    core_radius: float | int | None = None
    length: float | int | None = None
    segments: int | None = None
    star_points: int | None = None
    star_inner_radius: float | int | None = None


@beartype
@dataclass(frozen=True, slots=True)
class NozzlePatch:
    """Nozzle fields to change; None leaves a field as is."""

    throat_diameter: float | int | None = None
    exit_diameter: float | int | None = None
    efficiency: float | int | None = None


@beartype
@dataclass(frozen=True, slots=True)
class CasingPatch:
    """Casing fields to change; None leaves a field as is."""

    inner_radius: float | int | None = None
    wall_thickness: float | int | None = None


@beartype
@dataclass(frozen=True, slots=True)
class ConfigPatch:
    """Sections of a configuration to change.

    Propellant and material are replaced wholesale; grain, nozzle and
    casing are merged field by field.
    """

    propellant: PropellantSpec | None = None
    material: MaterialSpec | None = None
    grain: GrainPatch | None = None
    nozzle: NozzlePatch | None = None
    casing: CasingPatch | None = None


def _set_fields(patch: Any) -> dict[str, Any]:
    """Fields of a patch that carry a value."""
    values = {f.name: getattr(patch, f.name) for f in fields(patch)}
    return {name: value for name, value in values.items() if value is not None}


@beartype
def merge_config(config: SimulationConfig, patch: ConfigPatch) -> SimulationConfig:
    """Apply a patch to a configuration.

    Args:
        config: Current configuration (not modified)
        patch: Sections/fields to change

    Returns:
        New configuration with only the patched values changed
    """
    changes: dict[str, Any] = {}

    if patch.propellant is not None:
        changes["propellant"] = patch.propellant
    if patch.material is not None:
        changes["material"] = patch.material
    if patch.grain is not None:
        changes["grain"] = replace(config.grain, **_set_fields(patch.grain))
    if patch.nozzle is not None:
        changes["nozzle"] = replace(config.nozzle, **_set_fields(patch.nozzle))
    if patch.casing is not None:
        changes["casing"] = replace(config.casing, **_set_fields(patch.casing))

    return replace(config, **changes)
