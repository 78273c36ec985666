"""Datos de referencia y escenarios predefinidos."""

from hidrocanal.data.presets import (
    DEFAULT_CATCHMENT_AREA_M2,
    DEFAULT_CHANNEL,
    DEFAULT_RUNOFF_COEFFICIENT,
    DEFAULT_STORM,
    default_scenario,
)

__all__ = [
    "DEFAULT_CATCHMENT_AREA_M2",
    "DEFAULT_CHANNEL",
    "DEFAULT_RUNOFF_COEFFICIENT",
    "DEFAULT_STORM",
    "default_scenario",
]
