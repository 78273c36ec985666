"""
Simulador de balance hídrico cuenca-canal.

En cada intervalo:
1. Lluvia → volumen sobre el área total de la cuenca
2. Escorrentía = C × volumen de lluvia
3. Reparto canal/superficie según la política configurada
4. Descarga del canal por Manning (nunca mayor que lo almacenado)
5. Lámina superficial = volumen encharcado / (área × factor de inundación)
6. Clasificación de severidad
"""

import logging
from dataclasses import replace
from typing import Optional, Sequence

from hidrocanal.config import (
    ChannelGeometry,
    SimulationSettings,
    TimestepRecord,
)
from hidrocanal.constants import MM_PER_M
from hidrocanal.core.balance.policies import BALANCE_POLICIES, StepFlows
from hidrocanal.core.balance.severity import classify_severity
from hidrocanal.core.balance.state import SimulationState
from hidrocanal.core.rounding import round_half_up
from hidrocanal.core.validation import PreconditionError

logger = logging.getLogger(__name__)


class WaterBalanceSimulator:
    """
    Balance hídrico secuencial de una cuenca drenada por un canal.

    El intervalo t depende solo del estado al final de t-1. Cada llamada a
    run() parte de un estado nuevo, así que una instancia puede reutilizarse
    pero no debe compartirse entre hilos.
    """

    def __init__(
        self,
        channel: ChannelGeometry,
        total_area_m2: float,
        runoff_coefficient: float,
        settings: Optional[SimulationSettings] = None,
    ):
        if not total_area_m2 > 0:
            raise PreconditionError("El área total debe ser > 0.")
        if runoff_coefficient is None or not 0 <= runoff_coefficient <= 1:
            raise PreconditionError("El coeficiente C debe estar entre 0 y 1.")

        self.channel = channel
        self.total_area_m2 = total_area_m2
        self.runoff_coefficient = runoff_coefficient
        self.settings = settings or SimulationSettings()
        self.state = SimulationState()
        self.trace: list[SimulationState] = []
        self._policy = BALANCE_POLICIES[self.settings.policy]

    @property
    def flood_area_m2(self) -> float:
        """Área donde se acumula el agua desbordada (m²)."""
        return self.total_area_m2 * self.settings.flood_area_factor

    def reset(self) -> None:
        """Vuelve al estado inicial (almacenamientos en cero)."""
        self.state = SimulationState()
        self.trace = []

    def step(self, index: int, rainfall_mm: float, timestep_hr: float) -> TimestepRecord:
        """Avanza un intervalo y devuelve su registro."""
        rain_volume = rainfall_mm / MM_PER_M * self.total_area_m2
        runoff = self.runoff_coefficient * rain_volume

        flows: StepFlows = self._policy(
            self.state, runoff, self.channel, self.settings.roughness, timestep_hr
        )
        self.trace.append(replace(self.state))

        water_depth = round_half_up(
            self.state.surface_storage_m3 / self.flood_area_m2 * MM_PER_M, 2
        )
        severity = classify_severity(water_depth, self.settings.severity_thresholds)

        logger.debug(
            "t=%d lluvia=%.3f mm escorrentia=%.3f m3 entrada=%.3f m3 tirante=%.4f m "
            "descarga=%.3f m3 canal=%.3f m3 superficie=%.3f m3",
            index, rainfall_mm, runoff, flows.incoming_m3, flows.flow_depth_m,
            flows.outflow_m3, self.state.channel_storage_m3, self.state.surface_storage_m3,
        )

        return TimestepRecord(
            step=index,
            hour_mark=round_half_up((index + 1) * timestep_hr, 2),
            rainfall_mm=round_half_up(rainfall_mm, 2),
            water_depth_mm=water_depth,
            severity=severity,
        )

    def run(self, rainfall_mm: Sequence[float], timestep_hr: float) -> list[TimestepRecord]:
        """
        Simula la serie completa de lluvia.

        Args:
            rainfall_mm: Lluvia por intervalo (mm), en orden
            timestep_hr: Duración de cada intervalo (hr)

        Returns:
            Un TimestepRecord por intervalo, en el mismo orden
        """
        self.reset()
        records = [
            self.step(i, float(depth), timestep_hr)
            for i, depth in enumerate(rainfall_mm)
        ]
        logger.info(
            "Balance completo: %d intervalos, politica=%s, canal=%.2f m3, superficie=%.2f m3",
            len(records), self.settings.policy.value,
            self.state.channel_storage_m3, self.state.surface_storage_m3,
        )
        return records
