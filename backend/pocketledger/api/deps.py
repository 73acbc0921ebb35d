from __future__ import annotations

from functools import lru_cache

from pocketledger.db import get_engine
from pocketledger.domain.ids import local_now
from pocketledger.repositories.store import JsonFileStore, KeyValueStore
from pocketledger.repositories.sql_store import SqlStore
from pocketledger.services.tracker import FinanceTracker, build_tracker
from pocketledger.settings import get_settings


@lru_cache
def get_store() -> KeyValueStore:
    settings = get_settings()
    # If POCKETLEDGER_DATABASE_URL is set -> SQL store (Postgres/SQLite)
    if settings.use_sql_store:
        return SqlStore()
    return JsonFileStore(data_dir=settings.data_dir)


@lru_cache
def get_tracker() -> FinanceTracker:
    return build_tracker(get_store())


def reset_dependencies() -> None:
    # tests / rechargement de configuration
    get_tracker.cache_clear()
    get_store.cache_clear()
    get_engine.cache_clear()


def resolve_period(year: int | None, month: int | None) -> tuple[int, int]:
    # période par défaut : mois courant (comme la sélection initiale de l'UI)
    now = local_now()
    return (year if year is not None else now.year, month if month is not None else now.month)
