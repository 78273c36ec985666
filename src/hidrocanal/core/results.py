"""
Empaquetado de resultados de simulación.
"""

from typing import Sequence

from hidrocanal.config import (
    BalancePolicy,
    SimulationResult,
    SimulationSummary,
    StormSpec,
    TimestepRecord,
)
from hidrocanal.core.rounding import round_half_up


def build_summary(
    storm: StormSpec,
    tc_hr: float,
    runoff_coefficient: float,
) -> SimulationSummary:
    """
    Métricas resumen a partir de las entradas.

    Intensidad media = P / D; Tc y C se redondean a 2 decimales.
    """
    return SimulationSummary(
        average_intensity_mmhr=round_half_up(storm.total_depth_mm / storm.duration_hr, 2),
        tc_hr=round_half_up(tc_hr, 2),
        runoff_coefficient=round_half_up(runoff_coefficient, 2),
    )


def assemble_result(
    records: Sequence[TimestepRecord],
    storm: StormSpec,
    tc_hr: float,
    runoff_coefficient: float,
    rainfall_series_mm: Sequence[float],
    scenario_name: str = "escenario",
    policy: BalancePolicy = BalancePolicy.PARTITION_THEN_FILL,
) -> SimulationResult:
    """
    Arma el resultado final.

    Los registros se conservan tal cual, en el orden recibido.
    """
    return SimulationResult(
        scenario_name=scenario_name,
        policy=policy,
        records=list(records),
        summary=build_summary(storm, tc_hr, runoff_coefficient),
        rainfall_series_mm=[float(v) for v in rainfall_series_mm],
        water_depth_series_mm=[r.water_depth_mm for r in records],
        timestep_hr=storm.timestep_hr,
    )
