"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme

from hidrocanal.config import FloodSeverity


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos
    accent: str       # Valores importantes

    # Colores semánticos
    success: str
    warning: str
    error: str
    muted: str

    # Colores para datos
    number: str
    unit: str
    label: str

    border: str

    # Escala de severidad de inundación (de menor a mayor)
    flood_none: str
    flood_minor: str
    flood_moderate: str
    flood_severe: str
    flood_extreme: str

    def severity_color(self, severity: FloodSeverity) -> str:
        """Color asociado a un nivel de severidad."""
        return {
            FloodSeverity.NONE: self.flood_none,
            FloodSeverity.MINOR: self.flood_minor,
            FloodSeverity.MODERATE: self.flood_moderate,
            FloodSeverity.SEVERE: self.flood_severe,
            FloodSeverity.EXTREME: self.flood_extreme,
        }[severity]


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    muted="#808080",
    number="#d7af5f",       # Amarillo para números
    unit="#87af87",         # Verde para unidades
    label="#afafaf",
    border="#5f5f5f",
    flood_none="#87af87",
    flood_minor="#d7d787",
    flood_moderate="#d7af5f",
    flood_severe="#d7875f",
    flood_extreme="#d75f5f",
)

# Tema Minimal - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    muted="#606060",
    number="#ffffff",
    unit="#909090",
    label="#909090",
    border="#404040",
    flood_none="#909090",
    flood_minor="#b0b0b0",
    flood_moderate="#ffd787",
    flood_severe="#ffaf87",
    flood_extreme="#ff8787",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _instance: Optional["CLITheme"] = None
    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Se recrea con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "muted": p.muted,
                "number": p.number,
                "unit": p.unit,
                "label": p.label,
                "title": f"bold {p.primary}",
                "value": f"bold {p.number}",
                "flood.none": p.flood_none,
                "flood.minor": p.flood_minor,
                "flood.moderate": p.flood_moderate,
                "flood.severe": f"bold {p.flood_severe}",
                "flood.extreme": f"bold {p.flood_extreme}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


# Funciones de acceso global
def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
