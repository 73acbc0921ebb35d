from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from pocketledger.domain.errors import ValidationError

_QUANT = Decimal("0.01")


def _parse_decimal(value: str) -> Decimal:
    """
    Parse robuste depuis string.
    Autorise "12.34", "12", et optionnellement "12,34".
    """
    raw = value.strip()
    if raw == "":
        raise ValidationError("Amount cannot be empty")

    # tolérance minimale pour les virgules françaises
    raw = raw.replace(",", ".")

    try:
        dec = Decimal(raw)
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid decimal amount: {value!r}") from exc

    # NaN, sNaN et Infinity passent le constructeur
    if not dec.is_finite():
        raise ValidationError(f"Amount must be finite: {value!r}")
    return dec


def _quantize_money(amount: Decimal) -> Decimal:
    # Arrondi comptable classique
    return amount.quantize(_QUANT, rounding=ROUND_HALF_UP)


def parse_amount(value: object, *, field: str = "amount") -> float:
    """
    Montant >= 0 tel qu'il est stocké (nombre JSON).
    Accepte int / float / str ; refuse None, bool, NaN, infini et négatif.
    """
    if value is None:
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")

    if isinstance(value, str):
        number = float(_parse_decimal(value))
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        raise ValidationError(f"{field} must be a number")

    if not math.isfinite(number):
        raise ValidationError(f"{field} must be finite")
    if number < 0:
        raise ValidationError(f"{field} cannot be negative")
    return number


def format_amount(value: float) -> str:
    """Affichage "1234.57" (HALF_UP), utilisé par l'API."""
    return f"{_quantize_money(Decimal(repr(float(value)))):.2f}"
