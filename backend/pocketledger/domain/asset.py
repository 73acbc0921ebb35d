from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from pocketledger.domain.errors import ValidationError
from pocketledger.domain.money import parse_amount
from pocketledger.engine.amortization import monthly_income


def require_type(value: object, *, field: str = "type") -> str:
    # catégorie libre : on refuse seulement le vide (pas de normalisation,
    # le lien income/expenditure -> ledger se fait par égalité stricte)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} cannot be empty")
    return value


def optional_text(value: object, *, field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value


@dataclass(frozen=True)
class Asset:
    id: int
    type: str
    value: float
    is_monthly_income: bool
    interest_rate: Optional[float] = None
    monthly_income_amount: Optional[float] = None
    description: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        id: int,
        type: str,
        value: object,
        is_monthly_income: bool = False,
        interest_rate: object = None,
        description: Optional[str] = None,
    ) -> "Asset":
        norm_type = require_type(type)
        norm_value = parse_amount(value, field="value")

        rate = None
        if interest_rate is not None:
            rate = parse_amount(interest_rate, field="interestRate")

        # taux ignoré sans revenu mensuel ; un taux de 0 reste un taux
        if not is_monthly_income:
            rate = None

        return cls(
            id=id,
            type=norm_type,
            value=norm_value,
            is_monthly_income=bool(is_monthly_income),
            interest_rate=rate,
            monthly_income_amount=monthly_income(norm_value, rate) if rate is not None else None,
            description=optional_text(description, field="description"),
        )

    @property
    def generates_income(self) -> bool:
        return bool(self.is_monthly_income and self.interest_rate)

    def with_value(self, value: float) -> "Asset":
        """Nouvelle valeur + recalcul du revenu mensuel dérivé."""
        if self.generates_income:
            return replace(
                self,
                value=value,
                monthly_income_amount=monthly_income(value, self.interest_rate),
            )
        return replace(self, value=value)

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValidationError("asset.id must be an integer")
        if self.value < 0:
            raise ValidationError("asset.value cannot be negative")
