from __future__ import annotations

from pocketledger.engine.cashflow import (
    DashboardSummary,
    NetWorth,
    TieredTotals,
    compute_balance,
    compute_net_worth,
    tiered_totals,
)
from pocketledger.services.asset_ledger import AssetLedger
from pocketledger.services.expenditure_journal import ExpenditureJournal
from pocketledger.services.income_journal import IncomeJournal
from pocketledger.services.liability_ledger import LiabilityLedger


class FinanceAggregator:
    """Lectures croisées sur les quatre collections (aucune mutation)."""

    def __init__(
        self,
        *,
        assets: AssetLedger,
        liabilities: LiabilityLedger,
        incomes: IncomeJournal,
        expenditures: ExpenditureJournal,
    ) -> None:
        self._assets = assets
        self._liabilities = liabilities
        self._incomes = incomes
        self._expenditures = expenditures

    def balance(self, year: int, month: int) -> float:
        return compute_balance(self._incomes.list(), self._expenditures.list(), year=year, month=month)

    def net_worth(self) -> float:
        return self.net_worth_breakdown().net

    def net_worth_breakdown(self) -> NetWorth:
        return compute_net_worth(self._assets.list(), self._liabilities.list())

    def tiered_totals(self, year: int, month: int) -> TieredTotals:
        return tiered_totals(self._expenditures.list_for_period(year, month))

    def dashboard(self, year: int, month: int) -> DashboardSummary:
        worth = self.net_worth_breakdown()
        return DashboardSummary(
            year=year,
            month=month,
            total_income=self._incomes.total_for_period(year, month),
            total_expenditure=self._expenditures.total_for_period(year, month),
            total_assets=worth.total_assets,
            total_liabilities=worth.total_liabilities,
        )
