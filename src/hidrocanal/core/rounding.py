"""
Redondeo decimal para valores reportados.

Usa redondeo "mitad hacia afuera del cero" (0.125 -> 0.13, -0.125 -> -0.13)
sobre la representación decimal del número, no sobre su valor binario.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, decimals: int = 2) -> float:
    """
    Redondea un valor a `decimals` decimales, mitades lejos del cero.

    Args:
        value: Valor a redondear
        decimals: Número de decimales

    Returns:
        Valor redondeado
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
