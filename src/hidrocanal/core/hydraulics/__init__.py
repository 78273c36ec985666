"""
Módulo hidráulico: conducción en canal abierto por Manning.
"""

from .constants import CHANNEL_ROUGHNESS_N
from .manning import (
    full_channel_capacity,
    manning_flow_rate,
    manning_outflow_volume,
    rectangular_section,
)

__all__ = [
    "CHANNEL_ROUGHNESS_N",
    "full_channel_capacity",
    "manning_flow_rate",
    "manning_outflow_volume",
    "rectangular_section",
]
