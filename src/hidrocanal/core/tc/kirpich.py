"""
Método Kirpich (1940) para tiempo de concentración.

Desarrollado para pequeñas cuencas agrícolas en Tennessee.
"""

from hidrocanal.constants import KIRPICH_COEFFICIENT


def kirpich(length_m: float, slope: float) -> float:
    """
    Calcula Tc usando fórmula Kirpich (1940).

    tc = 0.01947 × L^0.77 × S^(-0.385)  [tc: min, L: m, S: m/m]

    Args:
        length_m: Longitud del cauce principal en metros
        slope: Pendiente media del cauce (m/m)

    Returns:
        Tiempo de concentración en horas
    """
    if length_m <= 0:
        raise ValueError("Longitud debe ser > 0")
    if slope <= 0:
        raise ValueError("Pendiente debe ser > 0")

    # Fórmula Kirpich (resultado en minutos)
    tc_min = KIRPICH_COEFFICIENT * (length_m ** 0.77) * (slope ** -0.385)

    return tc_min / 60.0  # Convertir a horas
