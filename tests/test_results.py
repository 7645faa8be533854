"""Tests for burn results and the run_burn driver."""

import numpy as np
import polars as pl
import pytest

from solidmotor.bounds import HISTORY_INTERVAL
from solidmotor.config import CasingPatch, ConfigPatch, default_config, merge_config
from solidmotor.grain import propellant_mass
from solidmotor.results import BurnResult, format_burn_summary, motor_class, run_burn
from solidmotor.simulation import LifecyclePhase, MotorSimulation


@pytest.fixture(scope="module")
def stock_result() -> BurnResult:
    return run_burn(dt=0.01)


@pytest.fixture(scope="module")
def thin_wall_result() -> BurnResult:
    config = merge_config(default_config(), ConfigPatch(casing=CasingPatch(wall_thickness=0.0005)))
    return run_burn(config, dt=0.01)


class TestRunBurn:
    """Test the complete static-fire driver."""

    def test_stock_motor(self, stock_result: BurnResult) -> None:
        assert stock_result.burned_out
        assert not stock_result.exploded
        assert stock_result.total_impulse > 0
        assert 1e6 <= stock_result.max_pressure <= 10e6
        assert stock_result.end_time == stock_result.burn_time
        assert stock_result.explosion_time is None

    def test_thin_wall(self, thin_wall_result: BurnResult, stock_result: BurnResult) -> None:
        assert thin_wall_result.exploded
        assert thin_wall_result.explosion_time < stock_result.burn_time
        assert thin_wall_result.burn_time == 0.0

    def test_matches_manual_loop(self, stock_result: BurnResult) -> None:
        """Test run_burn gives the same result as stepping by hand."""
        sim = MotorSimulation()
        sim.ignite()
        while sim.phase is LifecyclePhase.BURNING:
            sim.step(0.01)

        manual = BurnResult.from_simulation(sim)

        assert manual == stock_result

    def test_stops_at_max_time(self) -> None:
        result = run_burn(dt=0.01, max_time=0.5)
        assert result.phase is LifecyclePhase.BURNING
        assert 0.5 <= result.end_time + 1e-9 < 0.52

    @pytest.mark.parametrize("dt", [0.0, -0.01, 0.051, 0.1])
    def test_invalid_dt(self, dt: float) -> None:
        with pytest.raises(ValueError, match="dt must be"):
            run_burn(dt=dt)

    def test_invalid_max_time(self) -> None:
        with pytest.raises(ValueError, match="max_time"):
            run_burn(max_time=0)


class TestBurnResult:
    """Test derived performance figures."""

    def test_columns_match_samples(self, stock_result: BurnResult) -> None:
        n = len(stock_result.samples)
        assert n > 0
        for column in (
            stock_result.time,
            stock_result.pressure,
            stock_result.thrust,
            stock_result.burn_rate,
            stock_result.inner_radius,
            stock_result.kn,
            stock_result.stress,
        ):
            assert column.shape == (n,)

    def test_history_spacing(self, stock_result: BurnResult) -> None:
        assert np.all(np.diff(stock_result.time) >= HISTORY_INTERVAL)

    def test_core_regresses(self, stock_result: BurnResult) -> None:
        assert np.all(np.diff(stock_result.inner_radius) > 0)

    def test_average_thrust(self, stock_result: BurnResult) -> None:
        assert stock_result.average_thrust == pytest.approx(
            stock_result.total_impulse / stock_result.burn_time
        )
        assert 0 < stock_result.average_thrust <= stock_result.max_thrust

    def test_thrust_duration_after_cato(self, thin_wall_result: BurnResult) -> None:
        assert thin_wall_result.thrust_duration == thin_wall_result.explosion_time

    def test_delivered_isp(self, stock_result: BurnResult) -> None:
        mass = propellant_mass(stock_result.config.grain, stock_result.config.propellant)
        assert stock_result.propellant_mass == pytest.approx(mass)
        assert 0 < stock_result.delivered_isp < 300

    def test_to_dataframe(self, stock_result: BurnResult) -> None:
        df = stock_result.to_dataframe()

        assert isinstance(df, pl.DataFrame)
        assert df.columns == [
            "time",
            "pressure",
            "thrust",
            "burn_rate",
            "inner_radius",
            "kn",
            "stress",
        ]
        assert df.height == len(stock_result.samples)
        np.testing.assert_allclose(df["thrust"].to_numpy(), stock_result.thrust)
        np.testing.assert_allclose(df["stress"].to_numpy(), stock_result.stress)

    def test_empty_result(self) -> None:
        """Test an unignited simulation gives an empty but usable result."""
        result = BurnResult.from_simulation(MotorSimulation())

        assert result.time.shape == (0,)
        assert result.average_thrust == 0.0
        assert result.motor_class == ""
        assert result.to_dataframe().height == 0


class TestMotorClass:
    """Test impulse class designation."""

    @pytest.mark.parametrize(
        ("impulse", "expected"),
        [
            (0.0, ""),
            (-1.0, ""),
            (0.5, "1/4A"),
            (1.0, "1/2A"),
            (2.0, "A"),
            (2.5, "A"),
            (3.0, "B"),
            (5.0, "B"),
            (100.0, "G"),
            (640.0, "I"),
            (641.0, "J"),
        ],
    )
    def test_class(self, impulse: float, expected: str) -> None:
        assert motor_class(impulse) == expected

    def test_accepts_int(self) -> None:
        assert motor_class(10) == "C"


class TestFormatSummary:
    """Test the text summary."""

    def test_burnout_summary(self, stock_result: BurnResult) -> None:
        summary = format_burn_summary(stock_result)
        assert "Burnout at" in summary
        assert "KNSB" in summary
        assert "Total impulse" in summary

    def test_cato_summary(self, thin_wall_result: BurnResult) -> None:
        summary = format_burn_summary(thin_wall_result)
        assert "CATO at" in summary
        assert "0.5 mm wall" in summary
