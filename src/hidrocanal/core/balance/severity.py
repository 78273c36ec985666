"""
Clasificación de severidad de inundación por lámina de agua.
"""

import logging
from typing import Optional

from hidrocanal.config import FloodSeverity, SeverityThresholds

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS = SeverityThresholds()


def classify_severity(
    depth_mm: float,
    thresholds: Optional[SeverityThresholds] = None,
) -> FloodSeverity:
    """
    Clasifica una lámina de agua en la escala de severidad.

    Se evalúa del umbral mayor al menor; los límites inferiores son inclusivos.
    Con los umbrales por defecto:
    >=600 Extreme, >=301 Severe, >=151 Moderate, >=51 Minor, resto None.

    Args:
        depth_mm: Lámina de agua superficial (mm)
        thresholds: Umbrales de severidad (por defecto 51/151/301/600)

    Returns:
        FloodSeverity correspondiente
    """
    t = thresholds or DEFAULT_THRESHOLDS

    if depth_mm < 0:
        logger.warning("Lamina de agua negativa (%.4f mm), se reporta como None", depth_mm)
        return FloodSeverity.NONE

    if depth_mm >= t.extreme:
        return FloodSeverity.EXTREME
    if depth_mm >= t.severe:
        return FloodSeverity.SEVERE
    if depth_mm >= t.moderate:
        return FloodSeverity.MODERATE
    if depth_mm >= t.minor:
        return FloodSeverity.MINOR
    return FloodSeverity.NONE
