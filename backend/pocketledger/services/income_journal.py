from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from pocketledger.domain.errors import ValidationError
from pocketledger.domain.ids import IdGenerator, local_now, to_epoch_ms
from pocketledger.domain.income import Income
from pocketledger.engine.cashflow import filter_period, total_amount
from pocketledger.repositories.income_repository import IncomeRepository
from pocketledger.services.asset_ledger import AssetLedger

logger = logging.getLogger(__name__)

DEFAULT_ASSET_TYPES = ["Real Estate", "Stocks", "Bonds", "Other"]


@dataclass(frozen=True)
class IncomeSuggestion:
    """Pré-remplissage du formulaire quand un type d'actif est choisi."""
    asset_type: str
    amount: float
    description: str


class IncomeJournal:
    """
    Journal des revenus datés.
    Un revenu `asset` déduit son montant de l'actif lié ; sa suppression le restitue.
    """

    def __init__(
        self,
        *,
        repo: IncomeRepository,
        assets: AssetLedger,
        ids: IdGenerator,
        clock: Callable[[], dt.datetime] = local_now,
    ) -> None:
        self._repo = repo
        self._assets = assets
        self._ids = ids
        self._clock = clock
        self._repo.migrate_legacy()

    def list(self) -> list[Income]:
        return self._repo.list()

    def get(self, income_id: int) -> Income | None:
        return next((i for i in self.list() if i.id == income_id), None)

    def record(
        self,
        type: str,
        amount: object,
        year: int,
        month: int,
        asset_type: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Income | None:
        incomes = self.list()
        for i in incomes:
            self._ids.observe(i.id)

        try:
            income = Income.create(
                id=self._ids.next_id(),
                type=type,
                amount=amount,
                asset_type=asset_type,
                description=description,
                year=year,
                month=month,
                timestamp=to_epoch_ms(self._clock()),
            )
        except ValidationError as e:
            logger.info("Income rejected: %s", e)
            return None

        incomes.append(income)
        self._repo.save_all(incomes)

        # lien absent => l'événement reste enregistré (incohérence acceptée)
        if income.linked_asset_type:
            self._assets.deduct(income.linked_asset_type, income.amount)
        return income

    def delete(self, income_id: int) -> bool:
        incomes = self.list()
        target = next((i for i in incomes if i.id == income_id), None)
        if target is None:
            return False

        # restitution AVANT d'oublier l'événement : montant d'origine exact
        if target.linked_asset_type:
            self._assets.restore(target.linked_asset_type, target.amount)

        self._repo.save_all([i for i in incomes if i is not target])
        return True

    def list_for_period(self, year: int, month: int) -> list[Income]:
        return filter_period(self.list(), year, month)

    def total_for_period(self, year: int, month: int) -> float:
        return total_amount(self.list_for_period(year, month))

    def asset_type_options(self) -> list[str]:
        types = self._assets.published_types()
        return types if types else list(DEFAULT_ASSET_TYPES)

    def suggest(self, asset_type: str) -> IncomeSuggestion | None:
        asset = self._assets.find_by_type(asset_type)
        if asset is None:
            return None

        if asset.is_monthly_income and asset.monthly_income_amount:
            amount = asset.monthly_income_amount
        else:
            amount = asset.value
        return IncomeSuggestion(asset_type=asset.type, amount=amount, description=asset.description or "")
