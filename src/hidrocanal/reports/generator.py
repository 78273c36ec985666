"""
Exportación de resultados de simulación a JSON y CSV.
"""

import csv
import json
from pathlib import Path
from typing import Any

from hidrocanal.config import HyetographResult, SimulationResult

SIMULATION_HEADERS = ["Hour", "Rainfall_mm", "WaterDepth_mm", "FloodSeverity"]


def export_to_json(data: dict[str, Any], filepath: str | Path) -> None:
    """Exporta datos a JSON."""
    filepath = Path(filepath)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)


def export_to_csv(
    headers: list[str],
    rows: list[list[Any]],
    filepath: str | Path,
    delimiter: str = ",",
) -> None:
    """
    Exporta datos a CSV.

    Args:
        headers: Lista de encabezados
        rows: Lista de filas (cada fila es una lista de valores)
        filepath: Ruta del archivo
        delimiter: Delimitador (default: coma)
    """
    filepath = Path(filepath)

    with open(filepath, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f, delimiter=delimiter)
        writer.writerow(headers)
        writer.writerows(rows)


def simulation_to_dict(result: SimulationResult) -> dict[str, Any]:
    """
    Estructura de salida de una simulación: filas y metadatos.

    Los metadatos son la intensidad media, Tc y C, números ya
    redondeados a 2 decimales.
    """
    summary = result.summary
    return {
        "scenario": result.scenario_name,
        "policy": result.policy.value,
        "data": result.rows(),
        "meta": {
            "rainfallIntensity": summary.average_intensity_mmhr,
            "Tc": summary.tc_hr,
            "C": summary.runoff_coefficient,
        },
    }


def simulation_to_json(result: SimulationResult, filepath: str | Path) -> None:
    """Exporta una simulación a JSON (filas + metadatos)."""
    export_to_json(simulation_to_dict(result), filepath)


def simulation_to_csv(
    result: SimulationResult,
    filepath: str | Path,
    delimiter: str = ",",
) -> None:
    """
    Exporta los registros de una simulación a CSV.

    Columnas: Hour, Rainfall_mm, WaterDepth_mm, FloodSeverity.
    """
    rows = [
        [row[h] for h in SIMULATION_HEADERS]
        for row in result.rows()
    ]
    export_to_csv(SIMULATION_HEADERS, rows, filepath, delimiter)


def hyetograph_to_csv(
    result: HyetographResult,
    filepath: str | Path,
    delimiter: str = ",",
) -> None:
    """
    Exporta hietograma a CSV.

    Args:
        result: Resultado del hietograma
        filepath: Ruta del archivo
        delimiter: Delimitador
    """
    headers = ["Tiempo (hr)", "Intensidad (mm/hr)", "Profundidad (mm)", "Acumulado (mm)"]
    rows = [
        [f"{t:.3f}", f"{i:.2f}", f"{d:.3f}", f"{c:.2f}"]
        for t, i, d, c in zip(
            result.time_hr, result.intensity_mmhr, result.depth_mm, result.cumulative_mm
        )
    ]
    export_to_csv(headers, rows, filepath, delimiter)
