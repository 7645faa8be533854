"""Tests for the chamber pressure solver."""

import math
from dataclasses import replace

import numpy as np
import pytest

from solidmotor.bounds import (
    ATMOSPHERIC_PRESSURE,
    MAX_CHAMBER_PRESSURE,
    SOLVER_MAX_ITERATIONS,
    SOLVER_SEED_PRESSURE,
)
from solidmotor.burn_rate import burn_rate
from solidmotor.chamber import solve_chamber_pressure, solve_chamber_pressure_detailed
from solidmotor.grain import GrainGeometry, burning_area
from solidmotor.nozzle import area_from_diameter
from solidmotor.propellants import PROPELLANTS, get_propellant

THROAT_AREA = area_from_diameter(0.009)


class TestDegenerateInputs:
    """Test inputs that cannot pressurize the chamber."""

    def test_zero_burning_area(self) -> None:
        knsb = get_propellant("KNSB")
        assert solve_chamber_pressure(0.0, THROAT_AREA, knsb) == ATMOSPHERIC_PRESSURE

    def test_negative_burning_area(self) -> None:
        knsb = get_propellant("KNSB")
        assert solve_chamber_pressure(-1.0, THROAT_AREA, knsb) == ATMOSPHERIC_PRESSURE

    def test_zero_throat_area(self) -> None:
        knsb = get_propellant("KNSB")
        assert solve_chamber_pressure(0.02, 0.0, knsb) == ATMOSPHERIC_PRESSURE

    def test_degenerate_reports_no_iterations(self) -> None:
        solution = solve_chamber_pressure_detailed(0.0, 0.0, get_propellant("KNSB"))
        assert solution.iterations == 0
        assert solution.converged is False


class TestSolver:
    """Test the relaxed fixed-point iteration."""

    def test_stock_motor_at_ignition(self) -> None:
        """Test the stock grain at ignition sits near its mass-balance point (~3 MPa)."""
        knsb = get_propellant("KNSB")
        grain = GrainGeometry()
        ab = burning_area(grain, grain.core_radius)

        pc = solve_chamber_pressure(ab, THROAT_AREA, knsb)

        assert 2.5e6 < pc < 3.5e6
        generated = knsb.density * burn_rate(pc, knsb) * ab * knsb.characteristic_velocity
        assert generated / THROAT_AREA == pytest.approx(pc, rel=0.02)

    def test_converges_immediately_at_seed(self) -> None:
        """Test a motor whose equilibrium is the seed pressure stops after one iteration."""
        knsb = get_propellant("KNSB")
        rate = burn_rate(SOLVER_SEED_PRESSURE, knsb)
        ab = SOLVER_SEED_PRESSURE * THROAT_AREA / (knsb.density * rate * knsb.characteristic_velocity)

        solution = solve_chamber_pressure_detailed(ab, THROAT_AREA, knsb)

        assert solution.converged is True
        assert solution.iterations == 1
        assert solution.pressure == pytest.approx(SOLVER_SEED_PRESSURE)

    def test_clamped_high(self) -> None:
        """Test an absurd Kn is held at 15 MPa."""
        pc = solve_chamber_pressure(10.0, 1e-5, get_propellant("KNSB"))
        assert pc == MAX_CHAMBER_PRESSURE

    def test_clamped_low(self) -> None:
        """Test a tiny Kn is held at atmospheric pressure."""
        pc = solve_chamber_pressure(1e-6, 1e-3, get_propellant("KNSB"))
        assert pc == ATMOSPHERIC_PRESSURE

    def test_pressure_increases_with_kn(self) -> None:
        """Test more burning area gives more pressure."""
        knsb = get_propellant("KNSB")
        low = solve_chamber_pressure(0.015, THROAT_AREA, knsb)
        high = solve_chamber_pressure(0.030, THROAT_AREA, knsb)
        assert high > low

    def test_bounded_over_parameter_space(self) -> None:
        """Test finite, in-range results within the iteration cap for any positive areas."""
        for spec in PROPELLANTS.values():
            for ab in np.logspace(-6, 1, 15):
                for at in np.logspace(-7, -2, 11):
                    solution = solve_chamber_pressure_detailed(float(ab), float(at), spec)

                    assert math.isfinite(solution.pressure)
                    assert ATMOSPHERIC_PRESSURE <= solution.pressure <= MAX_CHAMBER_PRESSURE
                    assert 1 <= solution.iterations <= SOLVER_MAX_ITERATIONS


class TestNonFinite:
    """Test non-finite intermediate results."""

    @pytest.mark.parametrize("cstar", [math.inf, math.nan])
    def test_non_finite_cstar(self, cstar: float) -> None:
        """Test a non-finite mass balance falls back to atmospheric pressure."""
        spec = replace(get_propellant("KNSB"), characteristic_velocity=cstar)

        solution = solve_chamber_pressure_detailed(0.02, THROAT_AREA, spec)

        assert solution.pressure == ATMOSPHERIC_PRESSURE
        assert solution.converged is False
        assert solution.iterations == 1
