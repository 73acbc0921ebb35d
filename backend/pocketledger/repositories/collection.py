from __future__ import annotations

import json
import logging
from typing import Generic, Iterable, TypeVar

from pocketledger.repositories.store import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def js_number(value: float) -> int | float:
    # 12000.0 -> 12000 : même rendu que JSON.stringify côté navigateur
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def dumps(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def read_json(store: KeyValueStore, key: str) -> object | None:
    """Valeur JSON d'une clé ; None si absente ou illisible (jamais d'exception)."""
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("%s: invalid JSON, treated as empty (%s)", key, e)
        return None


def write_json(store: KeyValueStore, key: str, payload: object) -> None:
    store.set(key, dumps(payload))


class StoreCollection(Generic[T]):
    """
    Collection ordonnée persistée sous une clé du store.
    Lecture complète puis réécriture complète (pas d'écriture incrémentale).
    """

    key: str

    def __init__(self, *, store: KeyValueStore) -> None:
        self._store = store

    def list(self) -> list[T]:
        out: list[T] = []
        for i, rec in enumerate(self._read_records()):
            if not isinstance(rec, dict):
                logger.warning("%s[%d]: record must be an object, skipped", self.key, i)
                continue
            try:
                out.append(self._from_record(rec))
            except (ValueError, TypeError, KeyError) as e:
                logger.warning("%s[%d]: invalid record skipped (%s)", self.key, i, e)
        return out

    def save_all(self, items: Iterable[T]) -> None:
        write_json(self._store, self.key, [self._to_record(x) for x in items])

    def _read_records(self) -> list:
        payload = read_json(self._store, self.key)
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning("%s: root must be a list, treated as empty", self.key)
            return []
        return payload

    def _from_record(self, data: dict) -> T:
        raise NotImplementedError

    def _to_record(self, item: T) -> dict:
        raise NotImplementedError

    # ---------- helpers ----------
    @staticmethod
    def _req_int(d: dict, key: str) -> int:
        if key not in d:
            raise ValueError(f"missing field '{key}'")
        v = d[key]
        if isinstance(v, bool) or not isinstance(v, (int, float)) or int(v) != v:
            raise ValueError(f"field '{key}' must be an integer")
        return int(v)

    @staticmethod
    def _req_number(d: dict, key: str) -> float:
        if key not in d:
            raise ValueError(f"missing field '{key}'")
        v = d[key]
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"field '{key}' must be a number")
        return float(v)

    @classmethod
    def _opt_number(cls, d: dict, key: str) -> float | None:
        if d.get(key) is None:
            return None
        return cls._req_number(d, key)

    @staticmethod
    def _req_str(d: dict, key: str) -> str:
        if key not in d:
            raise ValueError(f"missing field '{key}'")
        v = d[key]
        if not isinstance(v, str):
            raise ValueError(f"field '{key}' must be a string")
        return v

    @classmethod
    def _opt_str(cls, d: dict, key: str) -> str | None:
        if d.get(key) is None:
            return None
        return cls._req_str(d, key)

    @staticmethod
    def _put(record: dict, key: str, value: object) -> None:
        # champ optionnel : omis plutôt que null (comme `undefined` en JSON)
        if value is None:
            return
        record[key] = js_number(value) if isinstance(value, float) else value
