from __future__ import annotations

import logging
from typing import Optional

from pocketledger.domain.errors import ValidationError
from pocketledger.domain.ids import IdGenerator
from pocketledger.domain.liability import Liability, LiabilityPayment
from pocketledger.repositories.liability_repository import LiabilityRepository
from pocketledger.services.asset_ledger import first_by_type

logger = logging.getLogger(__name__)


def payment_table(liabilities: list[Liability]) -> list[LiabilityPayment]:
    """Mensualités courantes des dettes à paiement mensuel (table `expenditureLiabilities`)."""
    return [
        LiabilityPayment(type=li.type, amount=li.monthly_payment)
        for li in liabilities
        if li.has_monthly_payment
    ]


class LiabilityLedger:
    """
    Propriétaire de la collection `liabilities`.
    Chaque mutation réécrit la collection et republie la table des mensualités.
    """

    def __init__(self, *, repo: LiabilityRepository, ids: IdGenerator) -> None:
        self._repo = repo
        self._ids = ids

    def list(self) -> list[Liability]:
        return self._repo.list()

    def get(self, liability_id: int) -> Liability | None:
        for li in self.list():
            if li.id == liability_id:
                return li
        return None

    def find_by_type(self, type_: str) -> Liability | None:
        liabilities = self.list()
        target = first_by_type(liabilities, type_)
        return next((li for li in liabilities if li.id == target), None)

    def add(
        self,
        type: str,
        amount: object,
        interest_rate: object,
        has_monthly_payment: bool = False,
        description: Optional[str] = None,
    ) -> Liability | None:
        liabilities = self.list()
        for li in liabilities:
            self._ids.observe(li.id)

        try:
            liability = Liability.create(
                id=self._ids.next_id(),
                type=type,
                amount=amount,
                interest_rate=interest_rate,
                has_monthly_payment=has_monthly_payment,
                description=description,
            )
        except ValidationError as e:
            logger.info("Liability rejected: %s", e)
            return None

        liabilities.append(liability)
        self._commit(liabilities)
        return liability

    def remove(self, liability_id: int) -> bool:
        liabilities = self.list()
        kept = [li for li in liabilities if li.id != liability_id]
        if len(kept) == len(liabilities):
            return False

        self._commit(kept)
        return True

    def deduct(self, type_: str, amount: float) -> Liability | None:
        return self._apply(type_, lambda current: max(0.0, current - amount))

    def restore(self, type_: str, amount: float) -> Liability | None:
        return self._apply(type_, lambda current: current + amount)

    def published_payments(self) -> list[LiabilityPayment]:
        return self._repo.read_payments()

    # ---------- summaries ----------
    def monthly_payments(self) -> list[LiabilityPayment]:
        return payment_table(self.list())

    def total_amount(self) -> float:
        return sum(li.amount for li in self.list())

    def total_monthly_payments(self) -> float:
        return sum(p.amount for p in self.monthly_payments())

    def monthly_payment_count(self) -> int:
        return sum(1 for li in self.list() if li.has_monthly_payment)

    # ---------- internals ----------
    def _apply(self, type_: str, change) -> Liability | None:
        liabilities = self.list()
        target = first_by_type(liabilities, type_)
        if target is None:
            logger.debug("No liability of type %r, amount left unchanged", type_)
            return None

        updated: Liability | None = None
        out: list[Liability] = []
        for li in liabilities:
            if updated is None and li.id == target:
                updated = li.with_amount(change(li.amount))
                out.append(updated)
            else:
                out.append(li)

        self._commit(out)
        return updated

    def _commit(self, liabilities: list[Liability]) -> None:
        # table calculée avant toute écriture
        payments = payment_table(liabilities)
        self._repo.save_all(liabilities)
        self._repo.write_payments(payments)
