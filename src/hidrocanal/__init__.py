"""HidroCanal - Simulación de inundación en cuencas drenadas por un canal."""

__version__ = "0.1.0"

from hidrocanal.core.simulation import run_simulation

__all__ = [
    "__version__",
    "run_simulation",
]
