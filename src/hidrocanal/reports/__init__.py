"""Exportación de resultados a JSON y CSV."""

from hidrocanal.reports.generator import (
    SIMULATION_HEADERS,
    export_to_json,
    export_to_csv,
    simulation_to_dict,
    simulation_to_json,
    simulation_to_csv,
    hyetograph_to_csv,
)

__all__ = [
    "SIMULATION_HEADERS",
    "export_to_json",
    "export_to_csv",
    "simulation_to_dict",
    "simulation_to_json",
    "simulation_to_csv",
    "hyetograph_to_csv",
]
