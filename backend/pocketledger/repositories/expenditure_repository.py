from __future__ import annotations

from pocketledger.domain.expenditure import Expenditure, ExpenditureKind, ExpenditureNature, Severity
from pocketledger.domain.money import parse_amount
from pocketledger.domain.period import Period
from pocketledger.repositories.collection import js_number
from pocketledger.repositories.event_repository import EventRepository
from pocketledger.repositories.store import EXPENDITURES_KEY


class ExpenditureRepository(EventRepository[Expenditure]):
    key = EXPENDITURES_KEY

    def _from_record(self, data: dict) -> Expenditure:
        # lecture fidèle : pas de défaut "medium" ni de champ retiré
        period = Period(year=self._req_int(data, "year"), month=self._req_int(data, "month"))
        state = self._opt_str(data, "state")

        return Expenditure(
            id=self._req_int(data, "id"),
            expenditure_type=ExpenditureKind(self._req_str(data, "expenditureType")),
            name=self._opt_str(data, "name"),
            liability_type=self._opt_str(data, "liabilityType"),
            amount=parse_amount(self._req_number(data, "amount")),
            type=ExpenditureNature(self._req_str(data, "type")),
            state=Severity(state) if state is not None else None,
            year=period.year,
            month=period.month,
            timestamp=self._req_int(data, "timestamp"),
        )

    def _to_record(self, exp: Expenditure) -> dict:
        rec: dict = {
            "id": exp.id,
            "expenditureType": exp.expenditure_type.value,
        }
        self._put(rec, "name", exp.name)
        self._put(rec, "liabilityType", exp.liability_type)
        rec["amount"] = js_number(exp.amount)
        rec["type"] = exp.type.value
        self._put(rec, "state", exp.state.value if exp.state else None)
        rec["year"] = exp.year
        rec["month"] = exp.month
        rec["timestamp"] = exp.timestamp
        return rec
