"""
Comandos CLI para archivos de escenario.
"""

from typing import Annotated

import typer

from hidrocanal.config import SimulationScenario
from hidrocanal.core import allocation_from_table, check_scenario, resolve_catchment
from hidrocanal.data import DEFAULT_CHANNEL, DEFAULT_STORM, default_scenario
from hidrocanal.cli.simulate import load_scenario_file
from hidrocanal.cli.theme import (
    print_error, print_field, print_header, print_separator, print_success,
)

# Crear sub-aplicación
scenario_app = typer.Typer(help="Archivos de escenario (JSON)")


def template_scenario(with_land_uses: bool = False) -> SimulationScenario:
    """Escenario de ejemplo para usar como plantilla."""
    if not with_land_uses:
        return default_scenario()
    return SimulationScenario(
        name="usos_de_suelo",
        storm=DEFAULT_STORM,
        channel=DEFAULT_CHANNEL,
        land_uses=(
            allocation_from_table(2, 12000.0),
            allocation_from_table(11, 7274.25),
        ),
    )


@scenario_app.command("template")
def scenario_template(
    output: Annotated[str, typer.Argument(help="Archivo JSON de salida")] = "escenario.json",
    land_uses: Annotated[bool, typer.Option("--land-uses", help="Plantilla con usos de suelo")] = False,
):
    """
    Escribe un escenario de ejemplo en JSON.

    Ejemplo:
        hc scenario template
        hc scenario template cuenca.json --land-uses
    """
    template_scenario(land_uses).save(output)
    print_success(f"Plantilla guardada en {output}")


@scenario_app.command("check")
def scenario_check(
    path: Annotated[str, typer.Argument(help="Archivo JSON del escenario")],
):
    """
    Valida un archivo de escenario sin simular.

    Ejemplo:
        hc scenario check escenario.json
    """
    scenario = load_scenario_file(path)

    problem = check_scenario(scenario)
    if problem is not None:
        print_error(problem)
        raise typer.Exit(1)

    c, area = resolve_catchment(scenario)
    storm = scenario.storm
    channel = scenario.channel

    print_header("ESCENARIO", scenario.name)
    print_field("Precipitacion", f"{storm.total_depth_mm:.2f}", "mm")
    print_field("Duracion", f"{storm.duration_hr:.2f}", "hr")
    print_field("Intervalos", f"{storm.timesteps}")
    print_field("Canal", f"{channel.length_m} x {channel.width_m} x {channel.height_m}", "m")
    print_field("Pendiente", f"{channel.slope:.5f}", "m/m")
    if scenario.uses_land_uses:
        print_field("Usos de suelo", f"{len(scenario.land_uses)}")
    print_field("Area", f"{area:,.2f}", "m2")
    print_field("C", f"{c:.2f}")
    print_field("Politica", scenario.settings.policy.value)
    print_separator()
    print_success("Escenario válido")
