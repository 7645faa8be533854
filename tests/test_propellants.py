"""Tests for the propellant, material and grain type catalogs."""

import pytest

from solidmotor.grain import GrainType, get_grain_type, list_grain_types
from solidmotor.materials import MATERIALS, MaterialSpec, get_material, list_materials
from solidmotor.propellants import (
    PROPELLANTS,
    PropellantSpec,
    get_propellant,
    list_propellants,
)


class TestPropellantCatalog:
    """Test the propellant database."""

    def test_list_propellants(self) -> None:
        """Test the stable catalog keys."""
        assert list_propellants() == ["KNSB", "KNSU", "KNDX", "APCP"]

    def test_get_knsb(self) -> None:
        """Test KNSB reference data."""
        knsb = get_propellant("KNSB")

        assert knsb.density == 1841.0
        assert knsb.burn_rate_coeff == 8.26
        assert knsb.burn_rate_exponent == 0.319
        assert knsb.reference_pressure == 6.895
        assert knsb.characteristic_velocity == 885.0
        assert knsb.gamma == 1.133

    def test_lookup_is_case_insensitive(self) -> None:
        """Test lowercase keys resolve."""
        assert get_propellant("apcp") is PROPELLANTS["APCP"]

    def test_unknown_propellant(self) -> None:
        """Test unknown keys raise with the available keys listed."""
        with pytest.raises(ValueError, match="KNSB"):
            get_propellant("HTPB")

    def test_all_entries_physical(self) -> None:
        """Test every entry has positive properties and gamma > 1."""
        for spec in PROPELLANTS.values():
            assert spec.density > 0
            assert spec.burn_rate_coeff > 0
            assert 0 < spec.burn_rate_exponent < 1
            assert spec.characteristic_velocity > 0
            assert spec.gamma > 1.0

    def test_spec_is_immutable(self) -> None:
        """Test propellant specs cannot be modified."""
        knsb = get_propellant("KNSB")
        with pytest.raises(AttributeError):
            knsb.density = 1.0  # type: ignore[misc]

    def test_custom_propellant(self) -> None:
        """Test creating a propellant outside the catalog."""
        spec = PropellantSpec(
            name="Test",
            density=1700.0,
            burn_rate_coeff=5.0,
            burn_rate_exponent=0.3,
            reference_pressure=6.895,
            characteristic_velocity=900.0,
            gamma=1.2,
            combustion_temp=1800.0,
            molecular_mass=30.0,
        )
        assert spec.name == "Test"


class TestMaterialCatalog:
    """Test the casing material database."""

    def test_list_materials(self) -> None:
        """Test the stable catalog keys."""
        assert list_materials() == ["ALUMINUM", "STEEL", "PVC", "COMPOSITE"]

    def test_get_aluminum(self) -> None:
        """Test 6061-T6 strengths."""
        al = get_material("ALUMINUM")
        assert al.yield_strength == 276e6
        assert al.ultimate_strength == 310e6

    def test_ultimate_not_below_yield(self) -> None:
        """Test ultimate strength is never below yield strength."""
        for spec in MATERIALS.values():
            assert spec.ultimate_strength >= spec.yield_strength

    def test_unknown_material(self) -> None:
        """Test unknown keys raise."""
        with pytest.raises(ValueError, match="Unknown material"):
            get_material("titanium")

    def test_thermal_conductivity_defaults(self) -> None:
        """Test conductivity is optional."""
        spec = MaterialSpec(name="X", density=1.0, yield_strength=1.0, ultimate_strength=2.0)
        assert spec.thermal_conductivity == 0.0


class TestGrainTypes:
    """Test grain type keys."""

    def test_list_grain_types(self) -> None:
        """Test the stable catalog keys."""
        assert list_grain_types() == ["BATES", "STAR", "CYLINDRICAL", "FINOCYL"]

    def test_get_grain_type(self) -> None:
        """Test key lookup."""
        assert get_grain_type("star") is GrainType.STAR

    def test_unknown_grain_type(self) -> None:
        """Test unknown keys raise."""
        with pytest.raises(ValueError, match="BATES"):
            get_grain_type("moonburner")
