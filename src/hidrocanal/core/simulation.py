"""
Simulación completa de un evento de lluvia.

Encadena: C ponderado → Tc (Kirpich) → hietograma triangular →
balance hídrico con descarga por Manning → resultado.
"""

import logging

from hidrocanal.config import SimulationResult, SimulationScenario
from hidrocanal.core.balance import WaterBalanceSimulator
from hidrocanal.core.coefficients import total_area, weighted_coefficient
from hidrocanal.core.results import assemble_result
from hidrocanal.core.tc import kirpich
from hidrocanal.core.temporal import triangular_storm
from hidrocanal.core.validation import PreconditionError, validate_scenario

logger = logging.getLogger(__name__)


def resolve_catchment(scenario: SimulationScenario) -> tuple[float, float]:
    """
    Coeficiente C y área total de la cuenca.

    Con usos de suelo, C es el ponderado por área; sin ellos, se usan
    el C fijo y el área del escenario.

    Returns:
        Tupla (C, área en m²)
    """
    if scenario.uses_land_uses:
        c = weighted_coefficient(scenario.land_uses)
        if c is None:
            raise PreconditionError("No se puede ponderar C: sin usos de suelo o área total nula.")
        return c, total_area(scenario.land_uses)

    if scenario.runoff_coefficient is None or scenario.catchment_area_m2 is None:
        raise PreconditionError("Defina usos de suelo o un coeficiente C fijo con su área total.")
    return scenario.runoff_coefficient, scenario.catchment_area_m2


def run_simulation(scenario: SimulationScenario) -> SimulationResult:
    """
    Ejecuta la simulación de un escenario.

    Args:
        scenario: Escenario validado

    Returns:
        SimulationResult con un registro por intervalo y el resumen

    Raises:
        PreconditionError: si el escenario no cumple las precondiciones
    """
    validate_scenario(scenario)

    storm = scenario.storm
    channel = scenario.channel
    settings = scenario.settings

    c, area = resolve_catchment(scenario)
    tc_hr = kirpich(channel.length_m, channel.slope)

    logger.info(
        "Simulando '%s': P=%.2f mm, D=%.2f h, n=%d, C=%.2f, A=%.2f m2, Tc=%.3f h",
        scenario.name, storm.total_depth_mm, storm.duration_hr, storm.timesteps,
        c, area, tc_hr,
    )

    hyetograph = triangular_storm(
        storm.total_depth_mm,
        storm.duration_hr,
        storm.timesteps,
        tc_hr,
        conserve_depth=settings.conserve_storm_depth,
    )

    simulator = WaterBalanceSimulator(channel, area, c, settings)
    records = simulator.run(hyetograph.depth_mm, storm.timestep_hr)

    return assemble_result(
        records,
        storm,
        tc_hr,
        c,
        hyetograph.depth_mm,
        scenario_name=scenario.name,
        policy=settings.policy,
    )
