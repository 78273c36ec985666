"""
Utilidades de formateo para la CLI de HidroCanal.
"""


def format_flow(flow_m3s: float) -> str:
    """
    Formatea caudal con máximo 3 decimales.

    Args:
        flow_m3s: Caudal en m³/s

    Returns:
        String formateado (ej: "0.15", "1.2", "12", "120")
    """
    if flow_m3s is None:
        return "-"
    if flow_m3s == 0:
        return "0"
    if flow_m3s >= 100:
        return f"{flow_m3s:.0f}"
    elif flow_m3s >= 10:
        return f"{flow_m3s:.1f}"
    elif flow_m3s >= 1:
        return f"{flow_m3s:.2f}"
    elif flow_m3s >= 0.001:
        return f"{flow_m3s:.3f}"
    else:
        return "0.00"


def format_volume(volume_m3: float) -> str:
    """
    Formatea volumen en m³ según magnitud.

    Args:
        volume_m3: Volumen en m³

    Returns:
        String formateado (ej: "0.85", "12.3", "1,250")
    """
    if volume_m3 is None:
        return "-"
    if volume_m3 == 0:
        return "0"
    if volume_m3 >= 1000:
        return f"{volume_m3:,.0f}"
    elif volume_m3 >= 10:
        return f"{volume_m3:.1f}"
    return f"{volume_m3:.2f}"


def format_duration(hours: float) -> str:
    """Formatea una duración en horas y minutos (ej: "0.10 hr (6.0 min)")."""
    return f"{hours:.2f} hr ({hours * 60:.1f} min)"
