from __future__ import annotations

import logging
from typing import Optional

from pocketledger.domain.asset import Asset
from pocketledger.domain.errors import ValidationError
from pocketledger.domain.ids import IdGenerator
from pocketledger.engine.amortization import monthly_income
from pocketledger.repositories.asset_repository import AssetRepository

logger = logging.getLogger(__name__)


def distinct_types(items) -> list[str]:
    # ordre de première apparition
    return list(dict.fromkeys(item.type for item in items))


def first_by_type(items, type_: str) -> Optional[int]:
    """
    Résout un lien par chaîne (assetType / liabilityType) vers un id.
    Premier trouvé : `type` n'est pas unique, c'est une limite connue.
    """
    index: dict[str, int] = {}
    for item in items:
        index.setdefault(item.type, item.id)
    return index.get(type_)


class AssetLedger:
    """
    Propriétaire de la collection `assets`.
    Chaque mutation réécrit la collection et republie `incomeAssetTypes`.
    """

    def __init__(self, *, repo: AssetRepository, ids: IdGenerator) -> None:
        self._repo = repo
        self._ids = ids

    def list(self) -> list[Asset]:
        return self._repo.list()

    def get(self, asset_id: int) -> Asset | None:
        for a in self.list():
            if a.id == asset_id:
                return a
        return None

    def find_by_type(self, type_: str) -> Asset | None:
        assets = self.list()
        target = first_by_type(assets, type_)
        return next((a for a in assets if a.id == target), None)

    def add(
        self,
        type: str,
        value: object,
        is_monthly_income: bool = False,
        interest_rate: object = None,
        description: Optional[str] = None,
    ) -> Asset | None:
        assets = self.list()
        for a in assets:
            self._ids.observe(a.id)

        try:
            asset = Asset.create(
                id=self._ids.next_id(),
                type=type,
                value=value,
                is_monthly_income=is_monthly_income,
                interest_rate=interest_rate,
                description=description,
            )
        except ValidationError as e:
            logger.info("Asset rejected: %s", e)
            return None

        assets.append(asset)
        self._commit(assets)
        return asset

    def remove(self, asset_id: int) -> bool:
        assets = self.list()
        kept = [a for a in assets if a.id != asset_id]
        if len(kept) == len(assets):
            return False

        # pas de cascade : les revenus existants gardent leur assetType
        self._commit(kept)
        return True

    def deduct(self, type_: str, amount: float) -> Asset | None:
        return self._apply(type_, lambda value: max(0.0, value - amount))

    def restore(self, type_: str, amount: float) -> Asset | None:
        return self._apply(type_, lambda value: value + amount)

    def published_types(self) -> list[str] | None:
        """Dernière valeur publiée de `incomeAssetTypes` (None si absente / illisible)."""
        return self._repo.read_asset_types()

    # ---------- summaries ----------
    def total_value(self) -> float:
        return sum(a.value for a in self.list())

    def total_monthly_income(self) -> float:
        return sum(
            a.monthly_income_amount
            for a in self.list()
            if a.is_monthly_income and a.monthly_income_amount
        )

    @staticmethod
    def preview_monthly_income(value: float, interest_rate: float) -> float:
        return monthly_income(value, interest_rate)

    # ---------- internals ----------
    def _apply(self, type_: str, change) -> Asset | None:
        assets = self.list()
        target = first_by_type(assets, type_)
        if target is None:
            logger.debug("No asset of type %r, value left unchanged", type_)
            return None

        updated: Asset | None = None
        out: list[Asset] = []
        for a in assets:
            if updated is None and a.id == target:
                updated = a.with_value(change(a.value))
                out.append(updated)
            else:
                out.append(a)

        self._commit(out)
        return updated

    def _commit(self, assets: list[Asset]) -> None:
        types = distinct_types(assets)
        self._repo.save_all(assets)
        self._repo.write_asset_types(types)
