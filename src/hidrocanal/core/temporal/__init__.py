"""
Módulo de distribuciones temporales de lluvia.

Implementa el hietograma triangular sintético usado por la simulación.
"""

from .triangular import triangular_factors, triangular_storm

__all__ = [
    "triangular_factors",
    "triangular_storm",
]
