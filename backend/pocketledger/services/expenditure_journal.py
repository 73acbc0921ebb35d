from __future__ import annotations

import datetime as dt
import logging
from typing import Callable, Optional

from pocketledger.domain.errors import ValidationError
from pocketledger.domain.expenditure import Expenditure
from pocketledger.domain.ids import IdGenerator, local_now, to_epoch_ms
from pocketledger.domain.liability import LiabilityPayment
from pocketledger.engine.cashflow import TieredTotals, filter_period, tiered_totals, total_amount
from pocketledger.repositories.expenditure_repository import ExpenditureRepository
from pocketledger.services.liability_ledger import LiabilityLedger

logger = logging.getLogger(__name__)


class ExpenditureJournal:
    """
    Journal des dépenses datées.
    Une dépense `other` rembourse la dette liée (deduct) ; sa suppression la restitue.
    """

    def __init__(
        self,
        *,
        repo: ExpenditureRepository,
        liabilities: LiabilityLedger,
        ids: IdGenerator,
        clock: Callable[[], dt.datetime] = local_now,
    ) -> None:
        self._repo = repo
        self._liabilities = liabilities
        self._ids = ids
        self._clock = clock
        self._repo.migrate_legacy()

    def list(self) -> list[Expenditure]:
        return self._repo.list()

    def get(self, expenditure_id: int) -> Expenditure | None:
        return next((e for e in self.list() if e.id == expenditure_id), None)

    def record(
        self,
        expenditure_type: str,
        amount: object,
        type: str,
        year: int,
        month: int,
        name: Optional[str] = None,
        liability_type: Optional[str] = None,
        state: Optional[str] = None,
    ) -> Expenditure | None:
        expenditures = self.list()
        for e in expenditures:
            self._ids.observe(e.id)

        try:
            exp = Expenditure.create(
                id=self._ids.next_id(),
                expenditure_type=expenditure_type,
                name=name,
                liability_type=liability_type,
                amount=amount,
                type=type,
                state=state,
                year=year,
                month=month,
                timestamp=to_epoch_ms(self._clock()),
            )
        except ValidationError as e:
            logger.info("Expenditure rejected: %s", e)
            return None

        expenditures.append(exp)
        self._repo.save_all(expenditures)

        if exp.linked_liability_type:
            self._liabilities.deduct(exp.linked_liability_type, exp.amount)
        return exp

    def delete(self, expenditure_id: int) -> bool:
        expenditures = self.list()
        target = next((e for e in expenditures if e.id == expenditure_id), None)
        if target is None:
            return False

        if target.linked_liability_type:
            self._liabilities.restore(target.linked_liability_type, target.amount)

        self._repo.save_all([e for e in expenditures if e is not target])
        return True

    def list_for_period(self, year: int, month: int) -> list[Expenditure]:
        return filter_period(self.list(), year, month)

    def total_for_period(self, year: int, month: int) -> float:
        return total_amount(self.list_for_period(year, month))

    def tiered_totals(self, year: int, month: int) -> TieredTotals:
        return tiered_totals(self.list_for_period(year, month))

    def liability_options(self) -> list[LiabilityPayment]:
        # seul canal de découverte des dettes côté dépenses
        return self._liabilities.published_payments()

    def suggest_amount(self, liability_type: str) -> float | None:
        for p in self.liability_options():
            if p.type == liability_type:
                return p.amount
        return None
