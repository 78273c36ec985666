"""
Comandos CLI para cálculo de tiempo de concentración.
"""

from typing import Annotated

import typer

from hidrocanal.core import kirpich
from hidrocanal.cli.formatters import format_duration
from hidrocanal.cli.theme import print_header, print_field, print_separator
from hidrocanal.cli.validators import validate_length, validate_slope

# Crear sub-aplicación
tc_app = typer.Typer(help="Cálculo de tiempo de concentración")


@tc_app.command("kirpich")
def tc_kirpich(
    length: Annotated[float, typer.Argument(help="Longitud del cauce en metros")],
    slope: Annotated[float, typer.Argument(help="Pendiente (m/m)")],
):
    """
    Calcula Tc usando fórmula Kirpich.

    Ejemplo:
        hc tc kirpich 176.16 0.01047
        hc tc kirpich 1500 0.02
    """
    validate_length(length)
    validate_slope(slope)

    tc = kirpich(length, slope)

    print_header("TIEMPO DE CONCENTRACION - KIRPICH")
    print_field("Longitud", f"{length:.2f}", "m")
    print_field("Pendiente", f"{slope:.4f} m/m ({slope*100:.2f}%)")
    print_separator()
    print_field("Tc", format_duration(tc))
