"""Módulos de cálculo hidrológico e hidráulico."""

from hidrocanal.core.rounding import round_half_up

from hidrocanal.core.coefficients import (
    LAND_USE_C_TABLE,
    allocation_from_table,
    total_area,
    weighted_coefficient,
)

from hidrocanal.core.tc import kirpich

from hidrocanal.core.temporal import triangular_storm

from hidrocanal.core.hydraulics import (
    full_channel_capacity,
    manning_flow_rate,
    manning_outflow_volume,
)

from hidrocanal.core.validation import (
    PreconditionError,
    check_scenario,
    validate_scenario,
)

from hidrocanal.core.balance import (
    SimulationState,
    WaterBalanceSimulator,
    classify_severity,
)

from hidrocanal.core.results import assemble_result, build_summary

from hidrocanal.core.simulation import resolve_catchment, run_simulation

__all__ = [
    "round_half_up",
    # Coeficientes
    "LAND_USE_C_TABLE",
    "allocation_from_table",
    "total_area",
    "weighted_coefficient",
    # Tiempo de concentración
    "kirpich",
    # Hietograma
    "triangular_storm",
    # Hidráulica
    "full_channel_capacity",
    "manning_flow_rate",
    "manning_outflow_volume",
    # Validación
    "PreconditionError",
    "check_scenario",
    "validate_scenario",
    # Balance
    "SimulationState",
    "WaterBalanceSimulator",
    "classify_severity",
    # Resultados
    "assemble_result",
    "build_summary",
    # Simulación
    "resolve_catchment",
    "run_simulation",
]
