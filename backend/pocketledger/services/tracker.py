from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Callable

from pocketledger.domain.ids import IdGenerator, local_now
from pocketledger.repositories.asset_repository import AssetRepository
from pocketledger.repositories.expenditure_repository import ExpenditureRepository
from pocketledger.repositories.income_repository import IncomeRepository
from pocketledger.repositories.liability_repository import LiabilityRepository
from pocketledger.repositories.store import KeyValueStore
from pocketledger.services.aggregator import FinanceAggregator
from pocketledger.services.asset_ledger import AssetLedger
from pocketledger.services.expenditure_journal import ExpenditureJournal
from pocketledger.services.income_journal import IncomeJournal
from pocketledger.services.liability_ledger import LiabilityLedger


@dataclass(frozen=True)
class FinanceTracker:
    assets: AssetLedger
    liabilities: LiabilityLedger
    incomes: IncomeJournal
    expenditures: ExpenditureJournal
    aggregator: FinanceAggregator


def build_tracker(
    store: KeyValueStore,
    *,
    clock: Callable[[], dt.datetime] = local_now,
    ids: IdGenerator | None = None,
) -> FinanceTracker:
    """Câblage des composants sur un store partagé (un seul générateur d'ids)."""
    ids = ids or IdGenerator()

    assets = AssetLedger(repo=AssetRepository(store=store), ids=ids)
    liabilities = LiabilityLedger(repo=LiabilityRepository(store=store), ids=ids)
    incomes = IncomeJournal(
        repo=IncomeRepository(store=store, clock=clock),
        assets=assets,
        ids=ids,
        clock=clock,
    )
    expenditures = ExpenditureJournal(
        repo=ExpenditureRepository(store=store, clock=clock),
        liabilities=liabilities,
        ids=ids,
        clock=clock,
    )

    return FinanceTracker(
        assets=assets,
        liabilities=liabilities,
        incomes=incomes,
        expenditures=expenditures,
        aggregator=FinanceAggregator(
            assets=assets,
            liabilities=liabilities,
            incomes=incomes,
            expenditures=expenditures,
        ),
    )
