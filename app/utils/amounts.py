import math
from typing import Any


def to_amount(value: Any) -> float:
    """Convierte a número; None, texto no numérico, NaN o infinito → 0.

    Los negativos se conservan tal cual.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


# rango de la columna Integer (32 bits con signo)
MAX_COUNT = 2**31 - 1


def to_count(value: Any) -> int:
    """Como `to_amount`, truncado a entero (cuotas) y acotado a `MAX_COUNT`."""
    return max(-MAX_COUNT, min(MAX_COUNT, int(to_amount(value))))


def to_text(value: Any) -> str:
    return "" if value is None else str(value)


def remaining_balance(total_amount: float, monthly_payment: float, paid_installments: int) -> float:
    # Saldo pendiente derivado: el capital original nunca se modifica al pagar
    return max(0.0, (total_amount or 0) - (monthly_payment or 0) * (paid_installments or 0))
