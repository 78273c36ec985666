"""
Comandos CLI para generación de tormentas de diseño.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from hidrocanal.core import triangular_storm
from hidrocanal.cli.theme import (
    create_results_table, get_console, print_header, print_field,
    print_separator, print_success,
)
from hidrocanal.cli.validators import (
    validate_depth, validate_duration, validate_timesteps,
)
from hidrocanal.reports import hyetograph_to_csv

# Crear sub-aplicación
storm_app = typer.Typer(help="Generación de tormentas de diseño")


@storm_app.command("triangular")
def storm_triangular(
    depth: Annotated[float, typer.Argument(help="Precipitación total en mm")],
    duration: Annotated[float, typer.Argument(help="Duración en horas")],
    timesteps: Annotated[int, typer.Argument(help="Número de intervalos")],
    tc: Annotated[Optional[float], typer.Option("--tc", help="Tiempo al pico en horas (default: D/2)")] = None,
    conserve: Annotated[bool, typer.Option("--conserve", help="Reescalar para conservar P")] = False,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo .json o .csv")] = None,
):
    """
    Genera hietograma triangular.

    El pico ocurre en min(Tc, D/2). Sin --tc el triángulo es simétrico.

    Ejemplo:
        hc storm triangular 100 3 6
        hc storm triangular 100 3 6 --tc 0.1 --conserve
        hc storm triangular 80 2 24 -o hietograma.csv
    """
    validate_depth(depth)
    validate_duration(duration)
    validate_timesteps(timesteps)

    peak = tc if tc is not None else duration / 2
    if peak < 0:
        from hidrocanal.cli.theme import print_error
        print_error(f"El tiempo al pico no puede ser negativo (recibido: {peak})")
        raise typer.Exit(1)

    result = triangular_storm(depth, duration, timesteps, peak, conserve_depth=conserve)

    if output:
        path = Path(output)
        if path.suffix.lower() == ".csv":
            hyetograph_to_csv(result, path)
        else:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(result.model_dump(), f, indent=2)
        print_success(f"Hietograma guardado en {output}")
        return

    print_header("HIETOGRAMA TRIANGULAR")
    print_field("Precipitacion", f"{depth:.2f}", "mm")
    print_field("Duracion", f"{duration:.2f}", "hr")
    print_field("Intervalos", f"{timesteps}")
    print_field("Tiempo al pico", f"{result.peak_time_hr:.3f}", "hr")
    print_separator()
    print_field("Lluvia generada", f"{result.total_depth_mm:.2f}", "mm")
    print_field("Intensidad pico", f"{result.peak_intensity_mmhr:.2f}", "mm/hr")

    table = create_results_table(columns=[
        ("t (hr)", "right"),
        ("i (mm/hr)", "right"),
        ("P (mm)", "right"),
        ("Acum. (mm)", "right"),
    ])
    for t, i, d, c in zip(
        result.time_hr, result.intensity_mmhr, result.depth_mm, result.cumulative_mm
    ):
        table.add_row(f"{t:.3f}", f"{i:.2f}", f"{d:.2f}", f"{c:.2f}")
    get_console().print(table)
