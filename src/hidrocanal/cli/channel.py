"""
Comandos CLI para hidráulica del canal (Manning).
"""

from typing import Annotated, Optional

import typer

from hidrocanal.constants import DEFAULT_ROUGHNESS
from hidrocanal.core import full_channel_capacity, manning_flow_rate, manning_outflow_volume
from hidrocanal.core.hydraulics import CHANNEL_ROUGHNESS_N, rectangular_section
from hidrocanal.cli.formatters import format_flow, format_volume
from hidrocanal.cli.theme import print_error, print_header, print_field, print_separator
from hidrocanal.cli.validators import (
    validate_duration, validate_length, validate_roughness, validate_slope,
)

# Crear sub-aplicación
channel_app = typer.Typer(help="Hidráulica de canal rectangular (Manning)")


@channel_app.command("capacity")
def channel_capacity(
    width: Annotated[float, typer.Argument(help="Ancho del canal en m")],
    height: Annotated[float, typer.Argument(help="Altura a banca llena en m")],
    slope: Annotated[float, typer.Argument(help="Pendiente (m/m)")],
    n: Annotated[float, typer.Option("--n", help="Coeficiente de Manning")] = DEFAULT_ROUGHNESS,
    material: Annotated[Optional[str], typer.Option(
        "--material", "-m", help="Revestimiento de referencia (reemplaza --n)",
    )] = None,
):
    """
    Calcula el caudal a banca llena.

    Ejemplo:
        hc channel capacity 0.3045 0.33 0.01047
        hc channel capacity 1.0 0.5 0.002 --n 0.025
    """
    if material is not None:
        n = _roughness_for(material)
    validate_length(width, name="El ancho")
    validate_length(height, name="La altura")
    validate_slope(slope)
    validate_roughness(n)

    area, perimeter, radius = rectangular_section(width, height)
    q = full_channel_capacity(width, height, slope, n)

    print_header("CAPACIDAD A BANCA LLENA")
    print_field("Ancho", f"{width:.3f}", "m")
    print_field("Altura", f"{height:.3f}", "m")
    print_field("Pendiente", f"{slope:.5f}", "m/m")
    print_field("n Manning", f"{n:.3f}")
    print_separator()
    print_field("Area mojada", f"{area:.4f}", "m2")
    print_field("Perimetro mojado", f"{perimeter:.4f}", "m")
    print_field("Radio hidraulico", f"{radius:.4f}", "m")
    print_field("Caudal", format_flow(q), "m3/s")


@channel_app.command("outflow")
def channel_outflow(
    width: Annotated[float, typer.Argument(help="Ancho del canal en m")],
    depth: Annotated[float, typer.Argument(help="Tirante en m")],
    slope: Annotated[float, typer.Argument(help="Pendiente (m/m)")],
    dt: Annotated[float, typer.Argument(help="Intervalo en horas")],
    n: Annotated[float, typer.Option("--n", help="Coeficiente de Manning")] = DEFAULT_ROUGHNESS,
):
    """
    Calcula el volumen descargado en un intervalo.

    Ejemplo:
        hc channel outflow 0.3045 0.2 0.01047 0.5
    """
    validate_length(width, name="El ancho")
    if depth < 0:
        print_error(f"El tirante no puede ser negativo (recibido: {depth})")
        raise typer.Exit(1)
    validate_slope(slope)
    validate_duration(dt)
    validate_roughness(n)

    q = manning_flow_rate(width, depth, slope, n)
    volume = manning_outflow_volume(width, depth, slope, n, dt)

    print_header("DESCARGA POR MANNING")
    print_field("Tirante", f"{depth:.3f}", "m")
    print_field("Intervalo", f"{dt:.3f}", "hr")
    print_separator()
    print_field("Caudal", format_flow(q), "m3/s")
    print_field("Volumen", format_volume(volume), "m3")


def _roughness_for(material: str) -> float:
    """n de Manning de referencia para un revestimiento."""
    key = material.lower()
    if key not in CHANNEL_ROUGHNESS_N:
        print_error(f"Revestimiento desconocido: {material}")
        print_error(f"Opciones: {', '.join(CHANNEL_ROUGHNESS_N)}")
        raise typer.Exit(1)
    return CHANNEL_ROUGHNESS_N[key]
