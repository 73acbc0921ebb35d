from __future__ import annotations

import logging

from pocketledger.domain.liability import Liability, LiabilityPayment
from pocketledger.repositories.collection import StoreCollection, js_number, read_json, write_json
from pocketledger.repositories.store import EXPENDITURE_LIABILITIES_KEY, LIABILITIES_KEY

logger = logging.getLogger(__name__)


class LiabilityRepository(StoreCollection[Liability]):
    key = LIABILITIES_KEY

    def write_payments(self, payments: list[LiabilityPayment]) -> None:
        write_json(
            self._store,
            EXPENDITURE_LIABILITIES_KEY,
            [{"type": p.type, "amount": js_number(p.amount)} for p in payments],
        )

    def read_payments(self) -> list[LiabilityPayment]:
        payload = read_json(self._store, EXPENDITURE_LIABILITIES_KEY)
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning("%s: root must be a list, treated as empty", EXPENDITURE_LIABILITIES_KEY)
            return []

        out: list[LiabilityPayment] = []
        for i, rec in enumerate(payload):
            try:
                if not isinstance(rec, dict):
                    raise ValueError("record must be an object")
                out.append(
                    LiabilityPayment(type=self._req_str(rec, "type"), amount=self._req_number(rec, "amount"))
                )
            except ValueError as e:
                logger.warning("%s[%d]: invalid record skipped (%s)", EXPENDITURE_LIABILITIES_KEY, i, e)
        return out

    def _from_record(self, data: dict) -> Liability:
        has_monthly = data.get("hasMonthlyPayment", False)
        if not isinstance(has_monthly, bool):
            raise ValueError("field 'hasMonthlyPayment' must be a boolean")

        return Liability(
            id=self._req_int(data, "id"),
            type=self._req_str(data, "type"),
            amount=self._req_number(data, "amount"),
            interest_rate=self._req_number(data, "interestRate"),
            has_monthly_payment=has_monthly,
            description=self._opt_str(data, "description"),
        )

    def _to_record(self, liability: Liability) -> dict:
        rec = {
            "id": liability.id,
            "type": liability.type,
            "amount": js_number(liability.amount),
            "interestRate": js_number(liability.interest_rate),
            "hasMonthlyPayment": liability.has_monthly_payment,
        }
        self._put(rec, "description", liability.description)
        return rec
