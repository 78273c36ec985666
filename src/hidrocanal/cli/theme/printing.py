"""
Funciones que imprimen directamente a la consola.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from hidrocanal.cli.theme.palette import get_console, get_palette
from hidrocanal.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_error,
)


def print_separator(char: str = "-", width: int = 60) -> None:
    """Imprime un separador."""
    console = get_console()
    p = get_palette()
    console.print(char * width, style=p.border)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    console = get_console()
    prefix = " " * indent
    console.print(prefix, styled_label(label, value, unit))


def print_success(text: str) -> None:
    console = get_console()
    console.print(styled_success(text))


def print_warning(text: str) -> None:
    console = get_console()
    console.print(styled_warning(text))


def print_error(text: str) -> None:
    console = get_console()
    console.print(styled_error(text))


def print_summary_box(title: str, items: list[tuple[str, str, str]]) -> None:
    """Imprime un cuadro de resumen.

    Args:
        title: Título del cuadro
        items: Lista de tuplas (label, value, unit)
    """
    console = get_console()
    p = get_palette()

    lines = []
    for label, value, unit in items:
        line = Text()
        line.append(f"{label}: ", style=p.label)
        line.append(str(value), style=f"bold {p.number}")
        if unit:
            line.append(f" {unit}", style=p.unit)
        lines.append(line)

    content = Text("\n").join(lines)

    panel = Panel(
        content,
        title=title,
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    )
    console.print(panel)
