"""
Estado del balance hídrico durante una simulación.
"""

from dataclasses import dataclass


@dataclass
class SimulationState:
    """
    Almacenamientos de agua de una corrida.

    Cada corrida crea su propio estado; no se comparte entre corridas.
    """
    channel_storage_m3: float = 0.0  # Agua dentro del canal
    surface_storage_m3: float = 0.0  # Agua encharcada sobre la cuenca

    @property
    def total_storage_m3(self) -> float:
        return self.channel_storage_m3 + self.surface_storage_m3
