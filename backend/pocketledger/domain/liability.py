from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from pocketledger.domain.asset import optional_text, require_type
from pocketledger.domain.errors import ValidationError
from pocketledger.domain.money import parse_amount
from pocketledger.engine.amortization import monthly_payment


# Liability représente une dette / un passif
@dataclass(frozen=True)
class Liability:
    id: int
    type: str

    # amount : capital restant dû (>= 0)
    amount: float
    interest_rate: float
    has_monthly_payment: bool
    description: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        id: int,
        type: str,
        amount: object,
        interest_rate: object,
        has_monthly_payment: bool = False,
        description: Optional[str] = None,
    ) -> "Liability":
        return cls(
            id=id,
            type=require_type(type),
            amount=parse_amount(amount, field="amount"),
            interest_rate=parse_amount(interest_rate, field="interestRate"),
            has_monthly_payment=bool(has_monthly_payment),
            description=optional_text(description, field="description"),
        )

    @property
    def monthly_payment(self) -> float:
        # jamais stocké sur l'entité : toujours recalculé depuis le capital courant
        return monthly_payment(self.amount, self.interest_rate)

    def with_amount(self, amount: float) -> "Liability":
        return replace(self, amount=amount)

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValidationError("liability.id must be an integer")
        if self.amount < 0:
            raise ValidationError("liability.amount cannot be negative")


@dataclass(frozen=True)
class LiabilityPayment:
    """Ligne de la table dérivée `expenditureLiabilities`."""
    type: str
    amount: float
