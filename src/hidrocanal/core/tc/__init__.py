"""
Módulo de tiempo de concentración (Tc).

El canal de descarga define el recorrido más largo de la cuenca,
por lo que Tc se estima con la fórmula de Kirpich sobre el canal.
"""

from .kirpich import kirpich

__all__ = [
    "kirpich",
]
