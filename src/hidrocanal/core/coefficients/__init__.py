"""
Coeficientes de escorrentía C por uso de suelo.

Fuentes:
- FHWA HEC-22 (Federal Highway Administration)
- ASCE Manual of Practice No. 37
"""

# Tipos de datos
from .types import LandUseEntry

# Tabla de referencia
from .tables_c import LAND_USE_C_TABLE

# Funciones de ponderación
from .weighting import (
    allocation_from_table,
    total_area,
    weighted_coefficient,
)

__all__ = [
    "LandUseEntry",
    "LAND_USE_C_TABLE",
    "allocation_from_table",
    "total_area",
    "weighted_coefficient",
]
