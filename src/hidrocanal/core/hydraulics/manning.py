"""
Ecuación de Manning para canal rectangular.

Q = (1/n) × A × R^(2/3) × S^(1/2)  [Q: m³/s, A: m², R: m]
"""

from hidrocanal.constants import DEFAULT_ROUGHNESS, SECONDS_PER_HOUR


def rectangular_section(width_m: float, depth_m: float) -> tuple[float, float, float]:
    """
    Geometría de una sección rectangular.

    Args:
        width_m: Ancho de fondo (m)
        depth_m: Tirante (m)

    Returns:
        Tupla (área, perímetro mojado, radio hidráulico)
    """
    area = width_m * depth_m
    perimeter = width_m + 2 * depth_m
    return area, perimeter, area / perimeter


def manning_flow_rate(
    width_m: float,
    depth_m: float,
    slope: float,
    roughness: float = DEFAULT_ROUGHNESS,
) -> float:
    """
    Caudal en canal rectangular por Manning.

    Args:
        width_m: Ancho del canal (m)
        depth_m: Tirante (m)
        slope: Pendiente (m/m)
        roughness: Coeficiente n de Manning

    Returns:
        Caudal en m³/s (0 si no hay tirante)
    """
    if depth_m <= 0:
        return 0.0
    if roughness <= 0:
        raise ValueError("Coeficiente n debe ser > 0")

    area, _, radius = rectangular_section(width_m, depth_m)
    return (1 / roughness) * area * radius ** (2 / 3) * slope ** 0.5


def manning_outflow_volume(
    width_m: float,
    depth_m: float,
    slope: float,
    roughness: float,
    timestep_hr: float,
) -> float:
    """
    Volumen descargado por el canal en un intervalo.

    Args:
        width_m: Ancho del canal (m)
        depth_m: Tirante (m)
        slope: Pendiente (m/m)
        roughness: Coeficiente n de Manning
        timestep_hr: Duración del intervalo (hr)

    Returns:
        Volumen en m³ por intervalo
    """
    if depth_m <= 0:
        return 0.0
    q = manning_flow_rate(width_m, depth_m, slope, roughness)
    return q * timestep_hr * SECONDS_PER_HOUR


def full_channel_capacity(
    width_m: float,
    height_m: float,
    slope: float,
    roughness: float = DEFAULT_ROUGHNESS,
) -> float:
    """Caudal a banca llena (m³/s)."""
    return manning_flow_rate(width_m, height_m, slope, roughness)
