"""
Comandos CLI para coeficiente de escorrentia.
"""

from typing import Annotated, Optional

import typer

from hidrocanal.core import (
    LAND_USE_C_TABLE,
    allocation_from_table,
    total_area,
    weighted_coefficient,
)
from hidrocanal.cli.theme import (
    print_allocations_table, print_error, print_field, print_header,
    print_land_use_table, print_separator,
)
from hidrocanal.cli.validators import parse_land_use

# Crear sub-aplicación
runoff_app = typer.Typer(help="Calculo de coeficiente de escorrentia")


def _parse_table_use(value: str):
    """Interpreta "indice:area" contra la tabla de usos de suelo."""
    try:
        index_text, area_text = value.split(":")
        index, area = int(index_text), float(area_text)
    except ValueError:
        print_error(f"Formato inválido: '{value}' (use indice:area)")
        raise typer.Exit(1)
    if area <= 0:
        print_error(f"Ingrese un área válida para el uso {index}.")
        raise typer.Exit(1)
    try:
        return allocation_from_table(index, area)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)


@runoff_app.command("weighted-c")
def runoff_weighted_c(
    land_use: Annotated[Optional[list[str]], typer.Option(
        "--land-use", "-u", help="Uso de suelo 'etiqueta:C:area_m2' (repetible)",
    )] = None,
    table_use: Annotated[Optional[list[str]], typer.Option(
        "--table-use", "-t", help="Uso de la tabla 'indice:area_m2' (repetible)",
    )] = None,
):
    """
    Calcula coeficiente C ponderado por area.

    C = Σ(Ai × Ci) / Σ(Ai), redondeado a 2 decimales.

    Ejemplos:
        hc runoff weighted-c -u "Techos:0.9:1200" -u "Jardines:0.2:800"
        hc runoff weighted-c -t 2:5000 -t 11:3000
    """
    allocations = [parse_land_use(v) for v in land_use or []]
    allocations += [_parse_table_use(v) for v in table_use or []]

    c = weighted_coefficient(allocations)
    if c is None:
        print_error("Debe agregar al menos un uso de suelo.")
        raise typer.Exit(1)

    print_header("COEFICIENTE C PONDERADO")
    print_allocations_table(allocations)
    print_separator()
    print_field("Area total", f"{total_area(allocations):,.2f}", "m2")
    print_field("C ponderado", f"{c:.2f}")


@runoff_app.command("land-uses")
def runoff_land_uses():
    """
    Muestra la tabla de coeficientes C por uso de suelo.

    El índice de la primera columna se usa con 'weighted-c --table-use'.
    """
    print_land_use_table(LAND_USE_C_TABLE, title="Coeficientes C por uso de suelo")
