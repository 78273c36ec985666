"""
Funciones para crear e imprimir tablas Rich.
"""

from typing import TYPE_CHECKING

from rich.table import Table
from rich import box

from hidrocanal.cli.theme.palette import get_console, get_palette
from hidrocanal.cli.theme.styled import styled_severity

if TYPE_CHECKING:
    from hidrocanal.config import LandUseAllocation, SimulationResult
    from hidrocanal.core.coefficients import LandUseEntry


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada para resultados."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_simulation_table(result: "SimulationResult", title: str = None) -> None:
    """Imprime la tabla de intervalos de una simulación."""
    console = get_console()
    p = get_palette()

    table = create_results_table(title=title)
    table.add_column("Hora", justify="right", style=p.accent)
    table.add_column("Lluvia (mm)", justify="right", style=p.number)
    table.add_column("Lámina (mm)", justify="right", style=p.number)
    table.add_column("Severidad", justify="left")

    for record in result.records:
        table.add_row(
            record.hour_label,
            f"{record.rainfall_mm:.2f}",
            f"{record.water_depth_mm:.2f}",
            styled_severity(record.severity),
        )

    console.print(table)


def print_land_use_table(entries: list["LandUseEntry"], title: str = None) -> None:
    """Imprime la tabla de coeficientes C por uso de suelo."""
    console = get_console()
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.SIMPLE,
        show_header=True,
        padding=(0, 1),
    )
    table.add_column("#", justify="right", style=p.muted)
    table.add_column("Uso de suelo", justify="left")
    table.add_column("C min", justify="right", style=p.number)
    table.add_column("C max", justify="right", style=p.number)
    table.add_column("C rec.", justify="right", style=f"bold {p.accent}")

    for i, entry in enumerate(entries):
        table.add_row(
            str(i),
            entry.label,
            f"{entry.c_min:.2f}",
            f"{entry.c_max:.2f}",
            f"{entry.c_recommended:.3f}",
        )

    console.print(table)


def print_allocations_table(allocations: list["LandUseAllocation"]) -> None:
    """Imprime los usos de suelo asignados con su aporte al C ponderado."""
    console = get_console()

    total = sum(a.area_m2 for a in allocations)
    table = create_results_table(columns=[
        ("Uso de suelo", "left"),
        ("C", "right"),
        ("Área (m²)", "right"),
        ("%", "right"),
    ])
    for a in allocations:
        share = a.area_m2 / total * 100 if total > 0 else 0.0
        table.add_row(
            a.label,
            f"{a.coefficient:.2f}",
            f"{a.area_m2:,.2f}",
            f"{share:.1f}",
        )

    console.print(table)
