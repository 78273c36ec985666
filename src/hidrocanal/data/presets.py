"""
Escenario de demostración con cuenca de C fijo.

Cuenca de 19274.25 m² con C = 0.61 drenada por un canal de
176.16 m × 0.3045 m × 0.33 m con pendiente 0.01047.
"""

from hidrocanal.config import (
    ChannelGeometry,
    SimulationScenario,
    SimulationSettings,
    StormSpec,
)

DEFAULT_CATCHMENT_AREA_M2 = 19274.25
DEFAULT_RUNOFF_COEFFICIENT = 0.61

DEFAULT_CHANNEL = ChannelGeometry(
    length_m=176.16,
    width_m=0.3045,
    height_m=0.33,
    slope=0.01047,
)

DEFAULT_STORM = StormSpec(total_depth_mm=100.0, duration_hr=3.0, timesteps=6)


def default_scenario(
    storm: StormSpec | None = None,
    settings: SimulationSettings | None = None,
) -> SimulationScenario:
    """
    Escenario de demostración.

    Args:
        storm: Tormenta a simular (por defecto 100 mm en 3 h, 6 intervalos)
        settings: Configuración de la simulación

    Returns:
        SimulationScenario con C fijo
    """
    return SimulationScenario(
        name="demo",
        storm=storm or DEFAULT_STORM,
        channel=DEFAULT_CHANNEL,
        runoff_coefficient=DEFAULT_RUNOFF_COEFFICIENT,
        catchment_area_m2=DEFAULT_CATCHMENT_AREA_M2,
        settings=settings or SimulationSettings(),
    )
