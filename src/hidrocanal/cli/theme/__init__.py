"""
Sistema de temas para la interfaz CLI de HidroCanal.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
- tables: Funciones para crear e imprimir tablas Rich
"""

from hidrocanal.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from hidrocanal.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_severity,
    styled_success,
    styled_warning,
    styled_error,
)

from hidrocanal.cli.theme.printing import (
    print_separator,
    print_header,
    print_field,
    print_success,
    print_warning,
    print_error,
    print_summary_box,
)

from hidrocanal.cli.theme.tables import (
    create_results_table,
    print_simulation_table,
    print_land_use_table,
    print_allocations_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_label",
    "styled_severity",
    "styled_success",
    "styled_warning",
    "styled_error",
    # printing
    "print_separator",
    "print_header",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    "print_summary_box",
    # tables
    "create_results_table",
    "print_simulation_table",
    "print_land_use_table",
    "print_allocations_table",
]
