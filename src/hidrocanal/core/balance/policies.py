"""
Políticas de reparto del agua entre canal y superficie.

- partition_then_fill: el agua llena el canal hasta su capacidad, el exceso
  se encharca y luego el canal descarga por Manning.
- continuity_ponding: el agua pasa primero por el canal (descarga por Manning
  con el tirante que daría todo el volumen, limitado a banca llena) y el
  remanente llena el canal; el exceso se encharca.

En ambas el agua encharcada vuelve al balance del intervalo siguiente.
"""

from dataclasses import dataclass
from typing import Callable

from hidrocanal.config import BalancePolicy, ChannelGeometry
from hidrocanal.core.balance.state import SimulationState
from hidrocanal.core.hydraulics import manning_outflow_volume


@dataclass
class StepFlows:
    """Volúmenes de un intervalo."""
    incoming_m3: float
    flow_depth_m: float
    outflow_m3: float


def _flow_depth(volume_m3: float, channel: ChannelGeometry) -> float:
    """Tirante equivalente de un volumen en el canal, limitado a banca llena."""
    return min(volume_m3 / channel.plan_area_m2, channel.height_m)


def partition_then_fill(
    state: SimulationState,
    runoff_m3: float,
    channel: ChannelGeometry,
    roughness: float,
    timestep_hr: float,
) -> StepFlows:
    """Llena el canal, encharca el exceso y descarga el canal."""
    incoming = runoff_m3 + state.channel_storage_m3 + state.surface_storage_m3

    state.channel_storage_m3 = min(incoming, channel.max_storage_m3)
    state.surface_storage_m3 = incoming - state.channel_storage_m3

    depth = _flow_depth(state.channel_storage_m3, channel)
    capacity = manning_outflow_volume(
        channel.width_m, depth, channel.slope, roughness, timestep_hr
    )
    outflow = min(capacity, state.channel_storage_m3)
    state.channel_storage_m3 -= outflow

    return StepFlows(incoming_m3=incoming, flow_depth_m=depth, outflow_m3=outflow)


def continuity_ponding(
    state: SimulationState,
    runoff_m3: float,
    channel: ChannelGeometry,
    roughness: float,
    timestep_hr: float,
) -> StepFlows:
    """Descarga por el canal primero y encharca lo que no cabe."""
    incoming = runoff_m3 + state.channel_storage_m3 + state.surface_storage_m3

    depth = _flow_depth(incoming, channel)
    capacity = manning_outflow_volume(
        channel.width_m, depth, channel.slope, roughness, timestep_hr
    )
    outflow = min(capacity, incoming)
    remaining = incoming - outflow

    state.channel_storage_m3 = min(remaining, channel.max_storage_m3)
    state.surface_storage_m3 = remaining - state.channel_storage_m3

    return StepFlows(incoming_m3=incoming, flow_depth_m=depth, outflow_m3=outflow)


PolicyFunction = Callable[
    [SimulationState, float, ChannelGeometry, float, float], StepFlows
]

BALANCE_POLICIES: dict[BalancePolicy, PolicyFunction] = {
    BalancePolicy.PARTITION_THEN_FILL: partition_then_fill,
    BalancePolicy.CONTINUITY_PONDING: continuity_ponding,
}
