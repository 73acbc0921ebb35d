from __future__ import annotations

import logging

from pocketledger.domain.asset import Asset
from pocketledger.repositories.collection import StoreCollection, js_number, read_json, write_json
from pocketledger.repositories.store import ASSETS_KEY, INCOME_ASSET_TYPES_KEY

logger = logging.getLogger(__name__)


class AssetRepository(StoreCollection[Asset]):
    key = ASSETS_KEY

    def write_asset_types(self, types: list[str]) -> None:
        write_json(self._store, INCOME_ASSET_TYPES_KEY, list(types))

    def read_asset_types(self) -> list[str] | None:
        """Types publiés pour la page revenus ; None si absents / illisibles."""
        payload = read_json(self._store, INCOME_ASSET_TYPES_KEY)
        if payload is None:
            return None
        if not isinstance(payload, list) or not all(isinstance(t, str) for t in payload):
            logger.warning("%s: must be a list of strings, ignored", INCOME_ASSET_TYPES_KEY)
            return None
        return payload

    def _from_record(self, data: dict) -> Asset:
        is_monthly = data.get("isMonthlyIncome", False)
        if not isinstance(is_monthly, bool):
            raise ValueError("field 'isMonthlyIncome' must be a boolean")

        return Asset(
            id=self._req_int(data, "id"),
            type=self._req_str(data, "type"),
            value=self._req_number(data, "value"),
            is_monthly_income=is_monthly,
            interest_rate=self._opt_number(data, "interestRate"),
            monthly_income_amount=self._opt_number(data, "monthlyIncomeAmount"),
            description=self._opt_str(data, "description"),
        )

    def _to_record(self, asset: Asset) -> dict:
        rec = {
            "id": asset.id,
            "type": asset.type,
            "value": js_number(asset.value),
            "isMonthlyIncome": asset.is_monthly_income,
        }
        self._put(rec, "interestRate", asset.interest_rate)
        self._put(rec, "monthlyIncomeAmount", asset.monthly_income_amount)
        self._put(rec, "description", asset.description)
        return rec
