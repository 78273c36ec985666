"""
Funciones de ponderación de coeficientes por área.

Calcula el coeficiente C ponderado para cuencas
con múltiples usos de suelo.
"""

import logging
from typing import Iterable, Optional, Sequence

from hidrocanal.config import LandUseAllocation
from hidrocanal.core.coefficients.tables_c import LAND_USE_C_TABLE
from hidrocanal.core.rounding import round_half_up

logger = logging.getLogger(__name__)


def total_area(allocations: Iterable[LandUseAllocation]) -> float:
    """Área total de la cuenca (m²)."""
    return sum(a.area_m2 for a in allocations)


def weighted_coefficient(allocations: Sequence[LandUseAllocation]) -> Optional[float]:
    """
    Calcula coeficiente C ponderado por area.

    C = Σ(Aᵢ × Cᵢ) / Σ(Aᵢ), redondeado a 2 decimales.

    Args:
        allocations: Usos de suelo de la cuenca

    Returns:
        C ponderado, o None si no hay usos de suelo o el área total es cero.
        None es una precondición no cumplida, no un C nulo.
    """
    if not allocations:
        logger.warning("Ponderacion de C sin usos de suelo")
        return None

    area_sum = total_area(allocations)
    if area_sum <= 0:
        logger.warning("Ponderacion de C con area total nula")
        return None

    weighted_sum = sum(a.area_m2 * a.coefficient for a in allocations)
    return round_half_up(weighted_sum / area_sum, 2)


def allocation_from_table(index: int, area_m2: float) -> LandUseAllocation:
    """
    Crea un uso de suelo a partir de la tabla de referencia.

    Args:
        index: Posición en LAND_USE_C_TABLE (base 0)
        area_m2: Área asignada (m²)

    Returns:
        LandUseAllocation con el C recomendado de la tabla
    """
    if not 0 <= index < len(LAND_USE_C_TABLE):
        raise ValueError(f"Indice de uso de suelo fuera de rango: {index}")
    entry = LAND_USE_C_TABLE[index]
    return LandUseAllocation(
        label=entry.label,
        coefficient=entry.c_recommended,
        area_m2=area_m2,
    )
