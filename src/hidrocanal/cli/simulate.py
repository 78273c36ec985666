"""
Comandos CLI para simulación de inundación.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from hidrocanal.config import (
    BalancePolicy,
    ChannelGeometry,
    SimulationResult,
    SimulationScenario,
    SimulationSettings,
    StormSpec,
)
from hidrocanal.constants import (
    DEFAULT_FLOOD_AREA_FACTOR, DEFAULT_ROUGHNESS, MIXED_CATCHMENT_MESSAGE,
)
from hidrocanal.core import PreconditionError, run_simulation
from hidrocanal.data import DEFAULT_CHANNEL, DEFAULT_STORM, default_scenario
from hidrocanal.cli.formatters import format_duration
from hidrocanal.cli.theme import (
    print_error, print_header, print_simulation_table, print_success,
    print_summary_box,
)
from hidrocanal.cli.validators import (
    parse_land_use, validate_c_coefficient, validate_area, validate_depth,
    validate_duration, validate_flood_factor, validate_length, validate_policy,
    validate_roughness, validate_slope, validate_timesteps,
)
from hidrocanal.reports import simulation_to_csv, simulation_to_json

# Crear sub-aplicación
simulate_app = typer.Typer(help="Simulación de inundación superficial")


def load_scenario_file(path: str) -> SimulationScenario:
    """Carga un escenario JSON; termina con error si no es válido."""
    try:
        return SimulationScenario.from_file(path)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except ValidationError as e:
        print_error(f"Escenario inválido en {path}:")
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            print_error(f"  {loc}: {err['msg']}")
        raise typer.Exit(1)
    except ValueError as e:
        # JSONDecodeError
        print_error(f"No se pudo leer {path}: {e}")
        raise typer.Exit(1)


def export_result(result: SimulationResult, output: str) -> None:
    """Guarda el resultado según la extensión (.json o .csv)."""
    path = Path(output)
    suffix = path.suffix.lower()
    if suffix == ".json":
        simulation_to_json(result, path)
    elif suffix == ".csv":
        simulation_to_csv(result, path)
    else:
        print_error(f"Extensión no soportada: '{suffix}' (use .json o .csv)")
        raise typer.Exit(1)
    print_success(f"Resultados guardados en {output}")


def print_result(result: SimulationResult) -> None:
    """Imprime resumen y tabla de intervalos."""
    summary = result.summary
    print_header("SIMULACION DE INUNDACION", result.scenario_name)
    print_summary_box("Resumen", [
        ("Intensidad media", f"{summary.average_intensity_mmhr:.2f}", "mm/hr"),
        ("Tc", format_duration(summary.tc_hr), ""),
        ("C", f"{summary.runoff_coefficient:.2f}", ""),
        ("Politica", result.policy.value, ""),
        ("Lamina maxima", f"{result.peak_water_depth_mm:.2f}", "mm"),
        ("Severidad maxima", result.worst_severity.description, ""),
    ])
    print_simulation_table(result)


def execute(scenario: SimulationScenario, output: Optional[str] = None) -> SimulationResult:
    """
    Ejecuta un escenario y muestra o exporta el resultado.

    Las violaciones de precondición terminan con código 1.
    """
    try:
        result = run_simulation(scenario)
    except PreconditionError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_result(result)
    if output:
        export_result(result, output)
    return result


@simulate_app.command("run")
def simulate_run(
    scenario: Annotated[Optional[str], typer.Option("--scenario", "-s", help="Escenario JSON")] = None,
    depth: Annotated[float, typer.Option("--depth", "-p", help="Precipitación total en mm")] = DEFAULT_STORM.total_depth_mm,
    duration: Annotated[float, typer.Option("--duration", "-d", help="Duración en horas")] = DEFAULT_STORM.duration_hr,
    timesteps: Annotated[int, typer.Option("--timesteps", "-n", help="Número de intervalos")] = DEFAULT_STORM.timesteps,
    length: Annotated[float, typer.Option("--length", help="Longitud del canal en m")] = DEFAULT_CHANNEL.length_m,
    width: Annotated[float, typer.Option("--width", help="Ancho del canal en m")] = DEFAULT_CHANNEL.width_m,
    height: Annotated[float, typer.Option("--height", help="Altura del canal en m")] = DEFAULT_CHANNEL.height_m,
    slope: Annotated[float, typer.Option("--slope", help="Pendiente del canal (m/m)")] = DEFAULT_CHANNEL.slope,
    land_use: Annotated[Optional[list[str]], typer.Option(
        "--land-use", "-u", help="Uso de suelo 'etiqueta:C:area_m2' (repetible)",
    )] = None,
    c: Annotated[Optional[float], typer.Option("--c", help="C fijo (sin usos de suelo)")] = None,
    area: Annotated[Optional[float], typer.Option("--area", "-a", help="Área total con C fijo (m2)")] = None,
    policy: Annotated[str, typer.Option("--policy", help="partition_then_fill o continuity_ponding")] = BalancePolicy.PARTITION_THEN_FILL.value,
    roughness: Annotated[float, typer.Option("--roughness", help="n de Manning")] = DEFAULT_ROUGHNESS,
    flood_factor: Annotated[float, typer.Option("--flood-factor", help="Fracción de área inundable")] = DEFAULT_FLOOD_AREA_FACTOR,
    conserve: Annotated[bool, typer.Option("--conserve", help="Conservar la precipitación total")] = False,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo .json o .csv")] = None,
):
    """
    Simula el balance hídrico de una cuenca drenada por un canal.

    Con --scenario se usa el archivo JSON y se ignoran los demás
    parámetros (excepto --output).

    Ejemplos:
        hc simulate run --c 0.61 --area 19274.25
        hc simulate run -u "Techos:0.9:12000" -u "Parque:0.2:7000" -p 80
        hc simulate run -s escenario.json -o resultados.csv
    """
    if scenario is not None:
        execute(load_scenario_file(scenario), output)
        return

    validate_depth(depth)
    validate_duration(duration)
    validate_timesteps(timesteps)
    validate_length(length)
    validate_length(width, name="El ancho")
    validate_length(height, name="La altura")
    validate_slope(slope)
    validate_policy(policy)
    validate_roughness(roughness)
    validate_flood_factor(flood_factor)
    if c is not None:
        validate_c_coefficient(c)
    if area is not None:
        validate_area(area)

    if land_use and (c is not None or area is not None):
        print_error(MIXED_CATCHMENT_MESSAGE)
        raise typer.Exit(1)

    allocations = tuple(parse_land_use(v) for v in land_use) if land_use else None

    built = SimulationScenario(
        name="cli",
        storm=StormSpec(total_depth_mm=depth, duration_hr=duration, timesteps=timesteps),
        channel=ChannelGeometry(length_m=length, width_m=width, height_m=height, slope=slope),
        land_uses=allocations,
        runoff_coefficient=c,
        catchment_area_m2=area,
        settings=SimulationSettings(
            roughness=roughness,
            flood_area_factor=flood_factor,
            policy=BalancePolicy(policy),
            conserve_storm_depth=conserve,
        ),
    )
    execute(built, output)


@simulate_app.command("default")
def simulate_default(
    depth: Annotated[float, typer.Option("--depth", "-p", help="Precipitación total en mm")] = DEFAULT_STORM.total_depth_mm,
    duration: Annotated[float, typer.Option("--duration", "-d", help="Duración en horas")] = DEFAULT_STORM.duration_hr,
    timesteps: Annotated[int, typer.Option("--timesteps", "-n", help="Número de intervalos")] = DEFAULT_STORM.timesteps,
    policy: Annotated[str, typer.Option("--policy", help="partition_then_fill o continuity_ponding")] = BalancePolicy.PARTITION_THEN_FILL.value,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo .json o .csv")] = None,
):
    """
    Simula la cuenca de demostración (C fijo = 0.61).

    Cuenca de 19274.25 m2 y canal de 176.16 x 0.3045 x 0.33 m, S = 0.01047.

    Ejemplo:
        hc simulate default
        hc simulate default -p 150 -d 2 -n 12
    """
    validate_depth(depth)
    validate_duration(duration)
    validate_timesteps(timesteps)
    validate_policy(policy)

    scenario = default_scenario(
        storm=StormSpec(total_depth_mm=depth, duration_hr=duration, timesteps=timesteps),
        settings=SimulationSettings(policy=BalancePolicy(policy)),
    )
    execute(scenario, output)
