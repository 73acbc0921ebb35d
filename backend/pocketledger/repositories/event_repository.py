from __future__ import annotations

import datetime as dt
import logging
from typing import Callable, TypeVar

from pocketledger.domain.ids import local_now, to_epoch_ms
from pocketledger.repositories.collection import StoreCollection
from pocketledger.repositories.store import KeyValueStore

logger = logging.getLogger(__name__)

E = TypeVar("E")

PERIOD_FIELDS = ("year", "month", "timestamp")


def needs_backfill(record: dict) -> bool:
    # enregistrements antérieurs au découpage par période
    return any(not record.get(f) for f in PERIOD_FIELDS)


class EventRepository(StoreCollection[E]):
    """
    Journal d'événements datés (revenus / dépenses).
    Les enregistrements sans year / month / timestamp reçoivent la date courante.
    """

    def __init__(self, *, store: KeyValueStore, clock: Callable[[], dt.datetime] = local_now) -> None:
        super().__init__(store=store)
        self._clock = clock

    def migrate_legacy(self) -> int:
        """Complète puis réécrit les enregistrements incomplets. Retourne le nombre migré."""
        records = self._read_records()
        count = sum(1 for r in records if isinstance(r, dict) and needs_backfill(r))
        if count == 0:
            return 0

        self.save_all(self.list())
        logger.info("%s: backfilled period on %d legacy record(s)", self.key, count)
        return count

    def _read_records(self) -> list:
        records = super()._read_records()
        if not any(isinstance(r, dict) and needs_backfill(r) for r in records):
            return records

        now = self._clock()
        stamp = {"year": now.year, "month": now.month, "timestamp": to_epoch_ms(now)}
        return [
            {**r, **stamp} if isinstance(r, dict) and needs_backfill(r) else r
            for r in records
        ]
