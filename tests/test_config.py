"""
Tests para los modelos Pydantic de configuración.
"""

import json

import pytest
from pydantic import ValidationError

from hidrocanal.config import (
    BalancePolicy,
    ChannelGeometry,
    LandUseAllocation,
    SeverityThresholds,
    SimulationScenario,
    SimulationSettings,
    StormSpec,
)
from hidrocanal.data import DEFAULT_CHANNEL


class TestModels:
    """Validación de campos."""

    def test_channel_properties(self, demo_channel):
        assert demo_channel.plan_area_m2 == pytest.approx(176.16 * 0.3045)
        assert demo_channel.max_storage_m3 == pytest.approx(176.16 * 0.3045 * 0.33)

    def test_channel_rejects_zero(self):
        with pytest.raises(ValidationError):
            ChannelGeometry(length_m=0, width_m=1, height_m=1, slope=0.01)

    def test_storm_timestep(self):
        assert StormSpec(total_depth_mm=10, duration_hr=3, timesteps=6).timestep_hr == 0.5

    def test_storm_rejects_zero_timesteps(self):
        with pytest.raises(ValidationError):
            StormSpec(total_depth_mm=10, duration_hr=3, timesteps=0)

    def test_land_use_rejects_c_above_one(self):
        with pytest.raises(ValidationError):
            LandUseAllocation(label="X", coefficient=1.5, area_m2=10)

    def test_land_use_rejects_empty_label(self):
        with pytest.raises(ValidationError):
            LandUseAllocation(label="", coefficient=0.5, area_m2=10)

    def test_frozen(self, demo_channel):
        with pytest.raises(ValidationError):
            demo_channel.width_m = 2.0

    def test_settings_defaults(self):
        s = SimulationSettings()
        assert s.roughness == 0.015
        assert s.flood_area_factor == 0.2
        assert s.policy == BalancePolicy.PARTITION_THEN_FILL
        assert s.conserve_storm_depth is False

    def test_flood_factor_bounds(self):
        with pytest.raises(ValidationError):
            SimulationSettings(flood_area_factor=0)
        with pytest.raises(ValidationError):
            SimulationSettings(flood_area_factor=1.5)

    def test_storm_rejects_infinite_depth(self):
        with pytest.raises(ValidationError):
            StormSpec(total_depth_mm=float("inf"), duration_hr=3, timesteps=6)

    def test_channel_rejects_infinite_length(self):
        with pytest.raises(ValidationError):
            ChannelGeometry(length_m=float("inf"), width_m=1, height_m=1, slope=0.01)

    def test_land_use_rejects_nan_area(self):
        with pytest.raises(ValidationError):
            LandUseAllocation(label="X", coefficient=0.5, area_m2=float("nan"))

    def test_scenario_rejects_infinite_area(self, demo_channel):
        with pytest.raises(ValidationError):
            SimulationScenario(
                storm=StormSpec(total_depth_mm=10, duration_hr=3, timesteps=6),
                channel=demo_channel,
                runoff_coefficient=0.5,
                catchment_area_m2=float("inf"),
            )

    def test_scenario_rejects_land_uses_with_fixed_c(self, demo_channel, land_uses):
        with pytest.raises(ValidationError, match="no ambos"):
            SimulationScenario(
                storm=StormSpec(total_depth_mm=10, duration_hr=3, timesteps=6),
                channel=demo_channel,
                land_uses=land_uses,
                runoff_coefficient=0.5,
            )


class TestSeverityThresholds:
    def test_defaults(self):
        t = SeverityThresholds()
        assert (t.minor, t.moderate, t.severe, t.extreme) == (51, 151, 301, 600)

    def test_must_increase(self):
        with pytest.raises(ValidationError, match="crecientes"):
            SeverityThresholds(minor=200, moderate=100)


class TestScenarioFile:
    """Tests para from_file / save."""

    def test_save_and_load(self, tmp_path, land_use_scenario):
        path = tmp_path / "escenario.json"
        land_use_scenario.save(path)
        assert SimulationScenario.from_file(path) == land_use_scenario

    def test_save_omits_unset(self, tmp_path, land_use_scenario):
        path = tmp_path / "escenario.json"
        land_use_scenario.save(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert "runoff_coefficient" not in data
        assert len(data["land_uses"]) == 2

    def test_load_minimal(self, tmp_path):
        path = tmp_path / "min.json"
        path.write_text(json.dumps({
            "storm": {"total_depth_mm": 80, "duration_hr": 2, "timesteps": 4},
            "channel": DEFAULT_CHANNEL.model_dump(),
            "runoff_coefficient": 0.5,
            "catchment_area_m2": 1000,
            "settings": {"policy": "continuity_ponding"},
        }), encoding="utf-8")

        scenario = SimulationScenario.from_file(path)
        assert scenario.name == "escenario"
        assert scenario.settings.policy == BalancePolicy.CONTINUITY_PONDING
        assert not scenario.uses_land_uses

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SimulationScenario.from_file(tmp_path / "nada.json")

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"storm": {"total_depth_mm": 10}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            SimulationScenario.from_file(path)

    def test_infinity_in_file(self, tmp_path):
        """json acepta Infinity; el modelo debe rechazarlo."""
        path = tmp_path / "inf.json"
        path.write_text(
            '{"storm": {"total_depth_mm": Infinity, "duration_hr": 3, "timesteps": 6},'
            ' "channel": {"length_m": 176.16, "width_m": 0.3045, "height_m": 0.33, "slope": 0.0125},'
            ' "runoff_coefficient": 0.61, "catchment_area_m2": 19274.25}',
            encoding="utf-8",
        )
        with pytest.raises(ValidationError):
            SimulationScenario.from_file(path)
