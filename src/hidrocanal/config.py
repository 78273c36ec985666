"""Modelos Pydantic para configuración y validación de datos."""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hidrocanal.constants import (
    DEFAULT_FLOOD_AREA_FACTOR,
    DEFAULT_ROUGHNESS,
    MIXED_CATCHMENT_MESSAGE,
)


class FloodSeverity(str, Enum):
    """Niveles de severidad de inundación (de menor a mayor)."""
    NONE = "None"
    MINOR = "Minor"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    EXTREME = "Extreme"

    @property
    def description(self) -> str:
        """Etiqueta larga para tablas y reportes."""
        return _SEVERITY_DESCRIPTIONS[self]

    @property
    def rank(self) -> int:
        """Posición en la escala (0 = sin inundación)."""
        return list(FloodSeverity).index(self)


_SEVERITY_DESCRIPTIONS = {
    FloodSeverity.NONE: "No flooding",
    FloodSeverity.MINOR: "Minor Flooding",
    FloodSeverity.MODERATE: "Moderate Flooding",
    FloodSeverity.SEVERE: "Severe Flooding",
    FloodSeverity.EXTREME: "Extreme Flooding",
}


class BalancePolicy(str, Enum):
    """Políticas de balance hídrico canal/superficie."""
    PARTITION_THEN_FILL = "partition_then_fill"
    CONTINUITY_PONDING = "continuity_ponding"


# ============================================================================
# Modelos de Entrada
# ============================================================================

class SeverityThresholds(BaseModel):
    """Umbrales inferiores (inclusivos) de lámina de agua en mm por nivel."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    minor: float = Field(default=51.0, ge=0, description="Inundación menor (mm)")
    moderate: float = Field(default=151.0, ge=0, description="Inundación moderada (mm)")
    severe: float = Field(default=301.0, ge=0, description="Inundación severa (mm)")
    extreme: float = Field(default=600.0, ge=0, description="Inundación extrema (mm)")

    @model_validator(mode="after")
    def check_increasing(self) -> "SeverityThresholds":
        if not self.minor < self.moderate < self.severe < self.extreme:
            raise ValueError("Los umbrales de severidad deben ser estrictamente crecientes")
        return self


class LandUseAllocation(BaseModel):
    """Subdivisión de la cuenca con un uso de suelo homogéneo."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    label: str = Field(..., min_length=1, description="Tipo de uso de suelo")
    coefficient: float = Field(..., ge=0, le=1, description="Coeficiente de escorrentía C")
    area_m2: float = Field(..., gt=0, description="Área (m²)")


class ChannelGeometry(BaseModel):
    """Canal rectangular de descarga de la cuenca."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    length_m: float = Field(..., gt=0, description="Longitud (m)")
    width_m: float = Field(..., gt=0, description="Ancho (m)")
    height_m: float = Field(..., gt=0, description="Altura de banca llena (m)")
    slope: float = Field(..., gt=0, description="Pendiente (m/m)")

    @property
    def plan_area_m2(self) -> float:
        """Área en planta del canal (m²)."""
        return self.length_m * self.width_m

    @property
    def max_storage_m3(self) -> float:
        """Volumen máximo almacenable en el canal (m³)."""
        return self.length_m * self.width_m * self.height_m


class StormSpec(BaseModel):
    """Evento de tormenta de diseño."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    total_depth_mm: float = Field(..., ge=0, description="Precipitación total (mm)")
    duration_hr: float = Field(..., gt=0, description="Duración total (hr)")
    timesteps: int = Field(..., ge=1, description="Número de intervalos")

    @property
    def timestep_hr(self) -> float:
        """Duración de cada intervalo (hr)."""
        return self.duration_hr / self.timesteps


class SimulationSettings(BaseModel):
    """Constantes de configuración de la simulación."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    roughness: float = Field(default=DEFAULT_ROUGHNESS, gt=0, description="n de Manning")
    flood_area_factor: float = Field(
        default=DEFAULT_FLOOD_AREA_FACTOR, gt=0, le=1,
        description="Fracción de la cuenca donde se acumula el agua",
    )
    policy: BalancePolicy = Field(
        default=BalancePolicy.PARTITION_THEN_FILL,
        description="Política de balance hídrico",
    )
    severity_thresholds: SeverityThresholds = Field(default_factory=SeverityThresholds)
    conserve_storm_depth: bool = Field(
        default=False,
        description="Reescalar el hietograma para conservar la lámina total",
    )


class SimulationScenario(BaseModel):
    """
    Paquete de parámetros de una simulación.

    La cuenca se describe por usos de suelo (C ponderado) o, si no hay
    detalle, por un coeficiente fijo y un área total.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(default="escenario", description="Nombre del escenario")
    storm: StormSpec
    channel: ChannelGeometry
    land_uses: Optional[tuple[LandUseAllocation, ...]] = Field(
        None, description="Usos de suelo de la cuenca"
    )
    runoff_coefficient: Optional[float] = Field(
        None, ge=0, le=1, description="C fijo (sin detalle de usos de suelo)"
    )
    catchment_area_m2: Optional[float] = Field(
        None, gt=0, description="Área total con C fijo (m²)"
    )
    settings: SimulationSettings = Field(default_factory=SimulationSettings)

    @model_validator(mode="after")
    def check_single_catchment_source(self) -> "SimulationScenario":
        if self.land_uses is not None and (
            self.runoff_coefficient is not None or self.catchment_area_m2 is not None
        ):
            raise ValueError(MIXED_CATCHMENT_MESSAGE)
        return self

    @property
    def uses_land_uses(self) -> bool:
        """True si la cuenca se define por usos de suelo."""
        return self.land_uses is not None

    @classmethod
    def from_file(cls, path: str | Path) -> "SimulationScenario":
        """Carga y valida un escenario desde un archivo JSON."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"No se encontró el archivo de escenario: {path}")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)

    def save(self, path: str | Path) -> None:
        """Guarda el escenario como JSON."""
        Path(path).write_text(
            self.model_dump_json(indent=2, exclude_none=True), encoding="utf-8"
        )


# ============================================================================
# Modelos de Resultados
# ============================================================================

class HyetographResult(BaseModel):
    """Resultado de hietograma."""
    time_hr: list[float] = Field(..., description="Tiempo al centro del intervalo (hr)")
    intensity_mmhr: list[float] = Field(..., description="Intensidad (mm/hr)")
    depth_mm: list[float] = Field(..., description="Profundidad incremental (mm)")
    cumulative_mm: list[float] = Field(..., description="Profundidad acumulada (mm)")
    method: str = Field(..., description="Método utilizado")
    total_depth_mm: float = Field(..., description="Precipitación total (mm)")
    peak_intensity_mmhr: float = Field(..., description="Intensidad pico (mm/hr)")
    peak_time_hr: float = Field(..., description="Tiempo al pico (hr)")
    timestep_hr: float = Field(..., description="Intervalo (hr)")


class TimestepRecord(BaseModel):
    """Resultado de un intervalo de la simulación."""
    model_config = ConfigDict(frozen=True)

    step: int = Field(..., ge=0, description="Índice del intervalo")
    hour_mark: float = Field(..., description="Fin del intervalo (hr)")
    rainfall_mm: float = Field(..., description="Lluvia del intervalo (mm)")
    water_depth_mm: float = Field(..., description="Lámina de agua superficial (mm)")
    severity: FloodSeverity = Field(..., description="Severidad de inundación")

    @property
    def hour_label(self) -> str:
        return f"{self.hour_mark:.2f}"

    def to_row(self) -> dict:
        """Fila tabular para exportación."""
        return {
            "Hour": self.hour_label,
            "Rainfall_mm": self.rainfall_mm,
            "WaterDepth_mm": self.water_depth_mm,
            "FloodSeverity": self.severity.description,
        }


class SimulationSummary(BaseModel):
    """Métricas resumen de la simulación."""
    model_config = ConfigDict(frozen=True)

    average_intensity_mmhr: float = Field(..., description="Intensidad media (mm/hr)")
    tc_hr: float = Field(..., description="Tiempo de concentración (hr)")
    runoff_coefficient: float = Field(..., description="Coeficiente de escorrentía C")


class SimulationResult(BaseModel):
    """Resultado completo de una simulación."""
    scenario_name: str = Field(default="escenario")
    policy: BalancePolicy = Field(default=BalancePolicy.PARTITION_THEN_FILL)
    records: list[TimestepRecord] = Field(..., description="Registros por intervalo")
    summary: SimulationSummary
    rainfall_series_mm: list[float] = Field(..., description="Lluvia sin redondear (mm)")
    water_depth_series_mm: list[float] = Field(..., description="Lámina por intervalo (mm)")
    timestep_hr: float = Field(..., description="Intervalo (hr)")

    @property
    def peak_water_depth_mm(self) -> float:
        """Lámina máxima registrada (mm)."""
        return max((r.water_depth_mm for r in self.records), default=0.0)

    @property
    def worst_severity(self) -> FloodSeverity:
        """Severidad más alta alcanzada."""
        return max(
            (r.severity for r in self.records),
            key=lambda s: s.rank,
            default=FloodSeverity.NONE,
        )

    def rows(self) -> list[dict]:
        """Registros en forma tabular, en orden."""
        return [r.to_row() for r in self.records]
