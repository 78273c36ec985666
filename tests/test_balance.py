"""
Tests para el simulador de balance hídrico canal/superficie.
"""

import pytest

from hidrocanal.config import (
    BalancePolicy,
    FloodSeverity,
    SimulationSettings,
)
from hidrocanal.core.balance import (
    SimulationState,
    WaterBalanceSimulator,
    continuity_ponding,
    partition_then_fill,
)
from hidrocanal.core.temporal import triangular_storm
from hidrocanal.core.validation import PreconditionError
from hidrocanal.data import DEFAULT_CATCHMENT_AREA_M2, DEFAULT_RUNOFF_COEFFICIENT

POLICIES = list(BalancePolicy)


def _demo_rain():
    return triangular_storm(100, 3, 6, 0.1).depth_mm


def _simulator(channel, policy=BalancePolicy.PARTITION_THEN_FILL):
    return WaterBalanceSimulator(
        channel,
        DEFAULT_CATCHMENT_AREA_M2,
        DEFAULT_RUNOFF_COEFFICIENT,
        SimulationSettings(policy=policy),
    )


class TestStorageBounds:
    """El almacenamiento respeta los límites en cada intervalo."""

    @pytest.mark.parametrize("policy", POLICIES)
    def test_channel_and_surface_bounds(self, demo_channel, policy):
        sim = _simulator(demo_channel, policy)
        sim.run(_demo_rain(), 0.5)

        assert len(sim.trace) == 6
        for state in sim.trace:
            assert 0 <= state.channel_storage_m3 <= demo_channel.max_storage_m3 + 1e-9
            assert state.surface_storage_m3 >= 0

    @pytest.mark.parametrize("policy", POLICIES)
    def test_water_depth_non_negative(self, demo_channel, policy):
        records = _simulator(demo_channel, policy).run(_demo_rain(), 0.5)
        assert all(r.water_depth_mm >= 0 for r in records)


class TestPartitionThenFill:
    """Política por defecto: llenar canal, encharcar, descargar."""

    def test_demo_sequence(self, demo_channel):
        """El canal se llena y vacía cada intervalo; la lámina crece."""
        records = _simulator(demo_channel).run(_demo_rain(), 0.5)
        depths = [r.water_depth_mm for r in records]

        assert depths == sorted(depths)
        assert records[0].water_depth_mm == pytest.approx(91.8, abs=0.5)
        assert records[0].severity == FloodSeverity.MINOR
        assert records[-1].water_depth_mm == pytest.approx(288.1, abs=1.0)
        assert records[-1].severity == FloodSeverity.MODERATE

    def test_single_step_fill(self, demo_channel):
        """Entrada menor que la capacidad: todo al canal, nada encharcado."""
        state = SimulationState()
        flows = partition_then_fill(state, 5.0, demo_channel, 0.015, 0.5)

        assert flows.incoming_m3 == pytest.approx(5.0)
        assert state.surface_storage_m3 == 0
        # La descarga nunca supera lo almacenado
        assert flows.outflow_m3 <= 5.0
        assert state.channel_storage_m3 == pytest.approx(5.0 - flows.outflow_m3)

    def test_overflow_ponds(self, demo_channel):
        state = SimulationState()
        partition_then_fill(state, 100.0, demo_channel, 0.015, 0.5)
        assert state.surface_storage_m3 == pytest.approx(100.0 - demo_channel.max_storage_m3)


class TestContinuityPonding:
    """Política alternativa: descarga primero, encharca el remanente."""

    def test_less_ponding_than_default(self, demo_channel):
        rain = _demo_rain()
        default = _simulator(demo_channel).run(rain, 0.5)
        ponding = _simulator(demo_channel, BalancePolicy.CONTINUITY_PONDING).run(rain, 0.5)

        assert max(r.water_depth_mm for r in ponding) < max(r.water_depth_mm for r in default)

    def test_drains_when_rain_drops(self, demo_channel):
        """Cuando la entrada cabe en la descarga, la superficie se vacía."""
        records = _simulator(demo_channel, BalancePolicy.CONTINUITY_PONDING).run(_demo_rain(), 0.5)
        assert records[-1].water_depth_mm == 0
        assert records[-1].severity == FloodSeverity.NONE

    def test_single_step(self, demo_channel):
        state = SimulationState()
        flows = continuity_ponding(state, 400.0, demo_channel, 0.015, 0.5)
        remaining = 400.0 - flows.outflow_m3
        assert state.total_storage_m3 == pytest.approx(remaining)
        assert state.channel_storage_m3 == pytest.approx(
            min(remaining, demo_channel.max_storage_m3)
        )


class TestSimulatorRuns:
    """Tests de ejecución completa."""

    @pytest.mark.parametrize("policy", POLICIES)
    def test_zero_rainfall(self, demo_channel, policy):
        """Sin lluvia: lámina 0 y sin inundación en todos los intervalos."""
        records = _simulator(demo_channel, policy).run([0.0] * 6, 0.5)
        assert len(records) == 6
        assert all(r.water_depth_mm == 0 for r in records)
        assert all(r.severity == FloodSeverity.NONE for r in records)

    def test_one_record_per_step(self, demo_channel):
        records = _simulator(demo_channel).run([1.0] * 11, 0.25)
        assert [r.step for r in records] == list(range(11))

    def test_hour_marks(self, demo_channel):
        records = _simulator(demo_channel).run(_demo_rain(), 0.5)
        assert [r.hour_label for r in records] == ["0.50", "1.00", "1.50", "2.00", "2.50", "3.00"]

    def test_runs_are_independent(self, demo_channel):
        """Cada run() parte de almacenamientos en cero."""
        sim = _simulator(demo_channel)
        first = sim.run(_demo_rain(), 0.5)
        second = sim.run(_demo_rain(), 0.5)
        assert first == second

    def test_wide_channel_no_flooding(self, wide_channel):
        """Canal amplio: toda la escorrentía cabe, sin encharcamiento."""
        sim = WaterBalanceSimulator(wide_channel, 5000.0, 0.5)
        records = sim.run([2.0, 4.0, 2.0], 0.5)
        assert all(r.water_depth_mm == 0 for r in records)

    def test_flood_area(self, demo_channel):
        sim = _simulator(demo_channel)
        assert sim.flood_area_m2 == pytest.approx(DEFAULT_CATCHMENT_AREA_M2 * 0.2)

    def test_invalid_area(self, demo_channel):
        with pytest.raises(PreconditionError):
            WaterBalanceSimulator(demo_channel, 0.0, 0.5)

    def test_invalid_coefficient(self, demo_channel):
        with pytest.raises(PreconditionError):
            WaterBalanceSimulator(demo_channel, 100.0, 1.5)

    def test_step_logs_debug(self, demo_channel, caplog):
        with caplog.at_level("DEBUG", logger="hidrocanal"):
            _simulator(demo_channel).run([1.0], 0.5)
        assert "t=0" in caplog.text
        assert "Balance completo" in caplog.text
