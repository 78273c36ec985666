"""
Verificación de precondiciones de un escenario.

La simulación no corrige entradas: si un escenario no cumple las
precondiciones se rechaza con PreconditionError antes de calcular.
"""

import math
from typing import Optional

from hidrocanal.config import SimulationScenario
from hidrocanal.constants import MIXED_CATCHMENT_MESSAGE


class PreconditionError(ValueError):
    """Escenario que no cumple las precondiciones de la simulación."""


def check_scenario(scenario: SimulationScenario) -> Optional[str]:
    """
    Revisa un escenario y devuelve el primer problema encontrado.

    Los valores no finitos (inf, nan) se rechazan como fuera de rango.

    Args:
        scenario: Escenario a revisar

    Returns:
        Mensaje de error, o None si el escenario es válido
    """
    storm = scenario.storm
    channel = scenario.channel

    if not _finite(storm.total_depth_mm) or storm.total_depth_mm < 0:
        return "La precipitación total debe ser >= 0."
    if not _finite(storm.duration_hr) or storm.duration_hr <= 0:
        return "La duración de la tormenta debe ser > 0."
    if isinstance(storm.timesteps, bool) or not isinstance(storm.timesteps, int) or storm.timesteps < 1:
        return "El número de intervalos debe ser un entero positivo."
    dimensions = (channel.length_m, channel.width_m, channel.height_m)
    if not all(_finite(d) and d > 0 for d in dimensions):
        return "Las dimensiones del canal deben ser > 0."
    if not _finite(channel.slope) or channel.slope <= 0:
        return "La pendiente del canal debe ser > 0."

    if scenario.land_uses is not None:
        if scenario.runoff_coefficient is not None or scenario.catchment_area_m2 is not None:
            return MIXED_CATCHMENT_MESSAGE
        if len(scenario.land_uses) == 0:
            return "Debe agregar al menos un uso de suelo."
        for land_use in scenario.land_uses:
            if not _finite(land_use.area_m2) or land_use.area_m2 <= 0:
                return f"Ingrese un área válida para {land_use.label}."
            if not _finite(land_use.coefficient) or not 0 <= land_use.coefficient <= 1:
                return f"El coeficiente C de {land_use.label} debe estar entre 0 y 1."
    else:
        if scenario.runoff_coefficient is None or scenario.catchment_area_m2 is None:
            return "Defina usos de suelo o un coeficiente C fijo con su área total."
        if not _finite(scenario.runoff_coefficient) or not 0 <= scenario.runoff_coefficient <= 1:
            return "El coeficiente C debe estar entre 0 y 1."
        if not _finite(scenario.catchment_area_m2) or scenario.catchment_area_m2 <= 0:
            return "El área total debe ser > 0."

    return None


def _finite(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def validate_scenario(scenario: SimulationScenario) -> None:
    """Lanza PreconditionError si el escenario no es válido."""
    problem = check_scenario(scenario)
    if problem is not None:
        raise PreconditionError(problem)
