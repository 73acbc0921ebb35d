from __future__ import annotations

from pocketledger.domain.income import Income, IncomeType
from pocketledger.domain.money import parse_amount
from pocketledger.domain.period import Period
from pocketledger.repositories.collection import js_number
from pocketledger.repositories.event_repository import EventRepository
from pocketledger.repositories.store import INCOMES_KEY


class IncomeRepository(EventRepository[Income]):
    key = INCOMES_KEY

    def _from_record(self, data: dict) -> Income:
        period = Period(year=self._req_int(data, "year"), month=self._req_int(data, "month"))

        return Income(
            id=self._req_int(data, "id"),
            type=IncomeType(self._req_str(data, "type")),
            amount=parse_amount(self._req_number(data, "amount")),
            year=period.year,
            month=period.month,
            timestamp=self._req_int(data, "timestamp"),
            asset_type=self._opt_str(data, "assetType"),
            description=self._opt_str(data, "description"),
        )

    def _to_record(self, income: Income) -> dict:
        rec = {
            "id": income.id,
            "type": income.type.value,
            "amount": js_number(income.amount),
        }
        self._put(rec, "assetType", income.asset_type)
        self._put(rec, "description", income.description)
        rec["year"] = income.year
        rec["month"] = income.month
        rec["timestamp"] = income.timestamp
        return rec
