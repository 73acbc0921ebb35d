from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol, TypeVar

from pocketledger.domain.asset import Asset
from pocketledger.domain.expenditure import Expenditure, ExpenditureNature, Severity
from pocketledger.domain.income import Income
from pocketledger.domain.liability import Liability


class _Dated(Protocol):
    year: int
    month: int
    amount: float


D = TypeVar("D", bound=_Dated)


def filter_period(events: Iterable[D], year: int, month: int) -> list[D]:
    # égalité stricte sur (year, month), ordre d'insertion conservé
    return [e for e in events if e.year == year and e.month == month]


def total_amount(events: Iterable[_Dated]) -> float:
    return sum((e.amount for e in events), 0.0)


@dataclass(frozen=True)
class TieredTotals:
    """
    Totaux de dépenses emboîtés :
    - essential : dépenses statiques
    - tight     : essential + dynamiques "high"
    - light     : essential + dynamiques "high" et "low"
    Les dynamiques "medium" ne comptent dans aucun palier (choix conservé tel quel).
    """
    essential: float
    tight: float
    light: float


def tiered_totals(expenditures: Iterable[Expenditure]) -> TieredTotals:
    essential = high = low = 0.0

    for e in expenditures:
        if e.type == ExpenditureNature.STATIC:
            essential += e.amount
        elif e.state == Severity.HIGH:
            high += e.amount
        elif e.state == Severity.LOW:
            low += e.amount

    return TieredTotals(
        essential=essential,
        tight=essential + high,
        light=essential + high + low,
    )


def compute_balance(
    incomes: Iterable[Income],
    expenditures: Iterable[Expenditure],
    *,
    year: int,
    month: int,
) -> float:
    """Revenus - dépenses de la période."""
    return total_amount(filter_period(incomes, year, month)) - total_amount(
        filter_period(expenditures, year, month)
    )


@dataclass(frozen=True)
class NetWorth:
    total_assets: float
    total_liabilities: float

    @property
    def net(self) -> float:
        return self.total_assets - self.total_liabilities


def compute_net_worth(assets: Iterable[Asset], liabilities: Iterable[Liability]) -> NetWorth:
    """
    Somme des actifs - somme des dettes, à l'instant présent.
    Pas de notion de période ici.
    """
    return NetWorth(
        total_assets=sum((a.value for a in assets), 0.0),
        total_liabilities=sum((li.amount for li in liabilities), 0.0),
    )


class BalanceTrend(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    EVEN = "even"


def classify_balance(balance: float) -> BalanceTrend:
    if balance > 0:
        return BalanceTrend.POSITIVE
    if balance < 0:
        return BalanceTrend.NEGATIVE
    return BalanceTrend.EVEN


@dataclass(frozen=True)
class DashboardSummary:
    year: int
    month: int
    total_income: float
    total_expenditure: float
    total_assets: float
    total_liabilities: float

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenditure

    @property
    def net_worth(self) -> float:
        return self.total_assets - self.total_liabilities

    @property
    def trend(self) -> BalanceTrend:
        return classify_balance(self.balance)
