"""
CLI de HidroCanal - Simulación de inundación en cuencas con canal.

Este módulo organiza los comandos CLI en sub-aplicaciones temáticas:
- simulate: Simulación de inundación (run, default)
- tc: Cálculo de tiempo de concentración
- storm: Generación de hietogramas
- runoff: Coeficiente de escorrentía ponderado
- channel: Hidráulica del canal (Manning)
- scenario: Archivos de escenario
"""

import logging
from typing import Annotated, Optional

import typer

from hidrocanal.cli.channel import channel_app
from hidrocanal.cli.runoff import runoff_app
from hidrocanal.cli.scenario import scenario_app
from hidrocanal.cli.simulate import simulate_app
from hidrocanal.cli.storm import storm_app
from hidrocanal.cli.tc import tc_app
from hidrocanal.cli.theme import CLITheme, ThemeName
from hidrocanal.logging_setup import configure_logging

# Crear aplicación principal
app = typer.Typer(
    name="hidrocanal",
    help="Simulación de inundación superficial en cuencas drenadas por un canal.",
    no_args_is_help=True,
)

app.add_typer(simulate_app, name="simulate")
app.add_typer(tc_app, name="tc")
app.add_typer(storm_app, name="storm")
app.add_typer(runoff_app, name="runoff")
app.add_typer(channel_app, name="channel")
app.add_typer(scenario_app, name="scenario")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar mensajes de depuración")] = False,
    log_file: Annotated[Optional[str], typer.Option("--log-file", help="Archivo de log")] = None,
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.DEFAULT,
):
    """
    HidroCanal - Balance hídrico canal/superficie por intervalos.

    Tc por Kirpich, hietograma triangular, descarga por Manning y
    clasificación de severidad de inundación.
    """
    CLITheme.set_theme(theme)
    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=log_file,
    )


__all__ = [
    "app",
]
