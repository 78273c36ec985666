"""Configuración de pytest para tests de hidrocanal."""

import pytest

from hidrocanal.config import (
    ChannelGeometry,
    LandUseAllocation,
    SimulationScenario,
    StormSpec,
)
from hidrocanal.data import DEFAULT_CHANNEL, default_scenario
from hidrocanal.logging_setup import teardown_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    """Quita handlers agregados por la CLI entre tests."""
    yield
    teardown_logging()


@pytest.fixture
def demo_scenario():
    """Cuenca de demostración: 19274.25 m², C = 0.61, 100 mm en 3 h, 6 intervalos."""
    return default_scenario()


@pytest.fixture
def demo_channel():
    return DEFAULT_CHANNEL


@pytest.fixture
def land_uses():
    """Usos de suelo de ejemplo (C ponderado = 0.64)."""
    return (
        LandUseAllocation(label="Techos", coefficient=0.9, area_m2=12000.0),
        LandUseAllocation(label="Parque", coefficient=0.2, area_m2=7274.25),
    )


@pytest.fixture
def land_use_scenario(land_uses):
    return SimulationScenario(
        name="usos",
        storm=StormSpec(total_depth_mm=100.0, duration_hr=3.0, timesteps=6),
        channel=DEFAULT_CHANNEL,
        land_uses=land_uses,
    )


@pytest.fixture
def wide_channel():
    """Canal con capacidad de sobra para tormentas pequeñas."""
    return ChannelGeometry(length_m=500.0, width_m=2.0, height_m=1.5, slope=0.01)
