"""
Tests de integración: escenario completo con run_simulation.
"""

import pytest
from pydantic import ValidationError

import hidrocanal
from hidrocanal.config import (
    BalancePolicy,
    FloodSeverity,
    SimulationScenario,
    SimulationSettings,
    StormSpec,
)
from hidrocanal.core import PreconditionError, resolve_catchment, run_simulation
from hidrocanal.data import DEFAULT_CHANNEL, default_scenario


class TestDemoScenario:
    """Cuenca de demostración: 100 mm en 3 h, 6 intervalos."""

    def test_record_count(self, demo_scenario):
        result = run_simulation(demo_scenario)
        assert len(result.records) == 6

    def test_hour_labels(self, demo_scenario):
        result = run_simulation(demo_scenario)
        assert [row["Hour"] for row in result.rows()] == [
            "0.50", "1.00", "1.50", "2.00", "2.50", "3.00",
        ]

    def test_rainfall_follows_triangle(self, demo_scenario):
        """Tc ≈ 0.1 h: el pico cae en el primer intervalo y luego decrece."""
        result = run_simulation(demo_scenario)
        rain = [r.rainfall_mm for r in result.records]
        assert all(r >= 0 for r in rain)
        assert rain[0] == max(rain)
        assert all(a >= b for a, b in zip(rain, rain[1:]))

    def test_summary(self, demo_scenario):
        result = run_simulation(demo_scenario)
        assert result.summary.average_intensity_mmhr == pytest.approx(33.33)
        assert result.summary.runoff_coefficient == pytest.approx(0.61)
        assert 0.1 <= result.summary.tc_hr <= 0.2

    def test_worst_severity(self, demo_scenario):
        result = run_simulation(demo_scenario)
        assert result.worst_severity == FloodSeverity.MODERATE
        assert result.peak_water_depth_mm == result.records[-1].water_depth_mm

    def test_values_rounded(self, demo_scenario):
        result = run_simulation(demo_scenario)
        for r in result.records:
            assert round(r.rainfall_mm, 2) == r.rainfall_mm
            assert round(r.water_depth_mm, 2) == r.water_depth_mm

    def test_package_entry_point(self, demo_scenario):
        assert hidrocanal.run_simulation(demo_scenario) == run_simulation(demo_scenario)

    def test_continuity_policy(self):
        scenario = default_scenario(
            settings=SimulationSettings(policy=BalancePolicy.CONTINUITY_PONDING)
        )
        result = run_simulation(scenario)
        assert result.policy == BalancePolicy.CONTINUITY_PONDING
        assert len(result.records) == 6

    def test_conserved_storm(self):
        scenario = default_scenario(settings=SimulationSettings(conserve_storm_depth=True))
        result = run_simulation(scenario)
        assert sum(result.rainfall_series_mm) == pytest.approx(100)

    def test_zero_rainfall(self):
        scenario = default_scenario(storm=StormSpec(total_depth_mm=0, duration_hr=3, timesteps=6))
        result = run_simulation(scenario)
        assert all(r.water_depth_mm == 0 for r in result.records)
        assert all(r.severity == FloodSeverity.NONE for r in result.records)


class TestLandUseScenario:
    """Cuenca definida por usos de suelo."""

    def test_weighted_c_used(self, land_use_scenario):
        result = run_simulation(land_use_scenario)
        assert result.summary.runoff_coefficient == pytest.approx(0.64)
        assert result.scenario_name == "usos"

    def test_resolve_catchment(self, land_use_scenario):
        c, area = resolve_catchment(land_use_scenario)
        assert c == pytest.approx(0.64)
        assert area == pytest.approx(19274.25)

    def test_land_uses_with_fixed_c_rejected(self, land_uses):
        """Usos de suelo y C fijo con área no se combinan en silencio."""
        with pytest.raises(ValidationError, match="no ambos"):
            SimulationScenario(
                storm=StormSpec(total_depth_mm=50, duration_hr=1, timesteps=4),
                channel=DEFAULT_CHANNEL,
                land_uses=land_uses,
                runoff_coefficient=0.1,
                catchment_area_m2=10.0,
            )


class TestPreconditions:
    """Escenarios inválidos se rechazan antes de simular."""

    def test_empty_land_uses(self):
        scenario = SimulationScenario(
            storm=StormSpec(total_depth_mm=50, duration_hr=1, timesteps=4),
            channel=DEFAULT_CHANNEL,
            land_uses=(),
        )
        with pytest.raises(PreconditionError, match="al menos un uso"):
            run_simulation(scenario)

    def test_missing_catchment(self):
        scenario = SimulationScenario(
            storm=StormSpec(total_depth_mm=50, duration_hr=1, timesteps=4),
            channel=DEFAULT_CHANNEL,
        )
        with pytest.raises(PreconditionError, match="coeficiente C fijo"):
            run_simulation(scenario)

    def test_is_value_error(self):
        assert issubclass(PreconditionError, ValueError)
