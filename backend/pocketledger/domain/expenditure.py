from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pocketledger.domain.asset import require_type
from pocketledger.domain.errors import ValidationError
from pocketledger.domain.money import parse_amount
from pocketledger.domain.period import Period


class ExpenditureKind(str, Enum):
    PERSONAL = "personal"
    OTHER = "other"


class ExpenditureNature(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _enum(enum_cls, value: object, *, field: str):
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise ValidationError(f"invalid {field} {value!r}") from exc


@dataclass(frozen=True)
class Expenditure:
    id: int
    expenditure_type: ExpenditureKind
    amount: float
    type: ExpenditureNature
    year: int
    month: int
    timestamp: int
    name: Optional[str] = None
    liability_type: Optional[str] = None
    state: Optional[Severity] = None

    @staticmethod
    def create(
        *,
        id: int,
        expenditure_type: object,
        amount: object,
        type: object,
        year: int,
        month: int,
        timestamp: int,
        name: Optional[str] = None,
        liability_type: Optional[str] = None,
        state: object = None,
    ) -> "Expenditure":
        kind = _enum(ExpenditureKind, expenditure_type, field="expenditureType")
        nature = _enum(ExpenditureNature, type, field="type")
        period = Period(year=year, month=month)

        # personal => name ; other => liabilityType (lien vers une dette)
        norm_name = require_type(name, field="name") if kind == ExpenditureKind.PERSONAL else None
        norm_liability = (
            require_type(liability_type, field="liabilityType") if kind == ExpenditureKind.OTHER else None
        )

        if nature == ExpenditureNature.DYNAMIC:
            # défaut du formulaire d'origine : "medium"
            norm_state = Severity.MEDIUM if state is None else _enum(Severity, state, field="state")
        else:
            norm_state = None

        return Expenditure(
            id=id,
            expenditure_type=kind,
            amount=parse_amount(amount),
            type=nature,
            year=period.year,
            month=period.month,
            timestamp=timestamp,
            name=norm_name,
            liability_type=norm_liability,
            state=norm_state,
        )

    @property
    def period(self) -> Period:
        return Period(year=self.year, month=self.month)

    @property
    def linked_liability_type(self) -> Optional[str]:
        if self.expenditure_type == ExpenditureKind.OTHER and self.liability_type:
            return self.liability_type
        return None
