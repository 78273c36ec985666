"""
Tipos de datos para la tabla de usos de suelo.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LandUseEntry:
    """Entrada de tabla de usos de suelo (rango de C)."""
    category: str
    description: str
    c_min: float
    c_max: float
    c_typical: Optional[float] = None

    @property
    def label(self) -> str:
        return f"{self.category} - {self.description}"

    @property
    def c_range(self) -> str:
        return f"{self.c_min:.2f}-{self.c_max:.2f}"

    @property
    def c_recommended(self) -> float:
        """Retorna valor tipico o promedio."""
        if self.c_typical is not None:
            return self.c_typical
        return (self.c_min + self.c_max) / 2
