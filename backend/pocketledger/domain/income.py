from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pocketledger.domain.asset import optional_text, require_type
from pocketledger.domain.errors import ValidationError
from pocketledger.domain.money import parse_amount
from pocketledger.domain.period import Period


class IncomeType(str, Enum):
    SALARY = "salary"
    ASSET = "asset"


@dataclass(frozen=True)
class Income:
    id: int
    type: IncomeType
    amount: float
    year: int
    month: int
    timestamp: int
    asset_type: Optional[str] = None
    description: Optional[str] = None

    @staticmethod
    def create(
        *,
        id: int,
        type: object,
        amount: object,
        year: int,
        month: int,
        timestamp: int,
        asset_type: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "Income":
        try:
            kind = IncomeType(type)
        except ValueError as exc:
            raise ValidationError(f"invalid income type {type!r}") from exc

        period = Period(year=year, month=month)

        # assetType : requis pour un revenu d'actif, ignoré sinon
        if kind == IncomeType.ASSET:
            norm_asset_type = require_type(asset_type, field="assetType")
        else:
            norm_asset_type = None

        return Income(
            id=id,
            type=kind,
            amount=parse_amount(amount),
            year=period.year,
            month=period.month,
            timestamp=timestamp,
            asset_type=norm_asset_type,
            description=optional_text(description, field="description"),
        )

    @property
    def period(self) -> Period:
        return Period(year=self.year, month=self.month)

    @property
    def linked_asset_type(self) -> Optional[str]:
        if self.type == IncomeType.ASSET and self.asset_type:
            return self.asset_type
        return None
