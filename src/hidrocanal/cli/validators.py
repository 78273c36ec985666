"""
Validadores centralizados para entradas CLI.

Proporciona funciones de validación con mensajes de error consistentes.
"""

import math

import typer

from hidrocanal.config import BalancePolicy, LandUseAllocation
from hidrocanal.cli.theme import print_error, print_warning


# =============================================================================
# VALIDADORES DE RANGO
# =============================================================================

def validate_c_coefficient(value: float, exit_on_error: bool = True) -> bool:
    """
    Valida que el coeficiente de escorrentía C esté en rango válido (0-1).

    Args:
        value: Valor de C a validar
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    if not math.isfinite(value) or not 0 <= value <= 1:
        print_error(f"Coeficiente C debe estar entre 0 y 1 (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_slope(value: float, exit_on_error: bool = True) -> bool:
    """
    Valida que la pendiente sea positiva y razonable.

    Args:
        value: Pendiente en m/m
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    if not math.isfinite(value) or value <= 0:
        print_error(f"La pendiente debe ser positiva (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    if value > 1:
        # Probablemente en porcentaje, advertir pero no fallar
        print_warning(f"Pendiente={value} parece estar en %. Asegúrese de usar m/m.")
    return True


def validate_area(value: float, exit_on_error: bool = True) -> bool:
    """Valida que el área sea positiva."""
    if not math.isfinite(value) or value <= 0:
        print_error(f"El área debe ser positiva (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_length(value: float, exit_on_error: bool = True, name: str = "La longitud") -> bool:
    """Valida que una longitud (largo, ancho, altura, tirante) sea positiva."""
    if not math.isfinite(value) or value <= 0:
        print_error(f"{name} debe ser positiva (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_depth(value: float, exit_on_error: bool = True) -> bool:
    """Valida que la precipitación total no sea negativa."""
    if not math.isfinite(value) or value < 0:
        print_error(f"La precipitación debe ser un número >= 0 (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_duration(value: float, exit_on_error: bool = True) -> bool:
    """
    Valida que la duración sea positiva.

    Args:
        value: Duración en horas
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    if not math.isfinite(value) or value <= 0:
        print_error(f"La duración debe ser positiva (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    if value > 72:
        print_warning(f"Duración={value} hr es inusualmente larga. Verifique las unidades.")
    return True


def validate_timesteps(value: int, exit_on_error: bool = True) -> bool:
    if value < 1:
        print_error(f"El número de intervalos debe ser >= 1 (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_flood_factor(value: float, exit_on_error: bool = True) -> bool:
    """Valida la fracción de área inundable (0 < f <= 1)."""
    if not 0 < value <= 1:
        print_error(f"El factor de área inundable debe estar en (0, 1] (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_roughness(value: float, exit_on_error: bool = True) -> bool:
    """Valida el coeficiente n de Manning."""
    if not math.isfinite(value) or value <= 0:
        print_error(f"El coeficiente n debe ser positivo (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    if value > 0.2:
        print_warning(f"n={value} es inusualmente alto para un canal.")
    return True


# =============================================================================
# VALIDADORES DE OPCIONES
# =============================================================================

def validate_policy(value: str, exit_on_error: bool = True) -> bool:
    """Valida el nombre de la política de balance."""
    valid = [p.value for p in BalancePolicy]
    if value not in valid:
        print_error(f"Política de balance inválida: {value}")
        print_error(f"Opciones: {', '.join(valid)}")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def parse_land_use(value: str) -> LandUseAllocation:
    """
    Interpreta un uso de suelo con formato "etiqueta:C:area".

    La etiqueta puede contener ':'; se toman los dos últimos campos
    como C y área.

    Raises:
        typer.Exit: si el formato o los valores son inválidos
    """
    parts = value.rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        print_error(f"Formato de uso de suelo inválido: '{value}' (use etiqueta:C:area)")
        raise typer.Exit(1)

    label = parts[0].strip()
    try:
        coefficient = float(parts[1])
        area = float(parts[2])
    except ValueError:
        print_error(f"C y área deben ser numéricos en '{value}'")
        raise typer.Exit(1)

    if not math.isfinite(area) or area <= 0:
        print_error(f"Ingrese un área válida para {label}.")
        raise typer.Exit(1)
    if not math.isfinite(coefficient) or not 0 <= coefficient <= 1:
        print_error(f"El coeficiente C de {label} debe estar entre 0 y 1.")
        raise typer.Exit(1)

    return LandUseAllocation(label=label, coefficient=coefficient, area_m2=area)
