from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


# Les six clés du contrat de stockage
ASSETS_KEY = "assets"
LIABILITIES_KEY = "liabilities"
INCOMES_KEY = "incomes"
EXPENDITURES_KEY = "expenditures"
INCOME_ASSET_TYPES_KEY = "incomeAssetTypes"
EXPENDITURE_LIABILITIES_KEY = "expenditureLiabilities"

STORE_KEYS = (
    ASSETS_KEY,
    LIABILITIES_KEY,
    INCOMES_KEY,
    EXPENDITURES_KEY,
    INCOME_ASSET_TYPES_KEY,
    EXPENDITURE_LIABILITIES_KEY,
)


class KeyValueStore(Protocol):
    """
    Stockage partagé clé -> texte JSON (équivalent d'un localStorage).
    Lecture / réécriture de la valeur entière, jamais incrémentale.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> bool:
        ...

    def keys(self) -> list[str]:
        ...


@dataclass
class InMemoryStore:
    """
    Store V0 en mémoire.
    - Déterministe
    - Facile à tester
    """
    _items: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("store values must be str")
        self._items[key] = value

    def delete(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._items)


class JsonFileStore:
    """Un fichier `<key>.json` par clé dans `data_dir`."""

    def __init__(self, *, data_dir: Path) -> None:
        self._dir = data_dir
        self._dir.mkdir(parents=True, exist_ok=True)

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("store values must be str")
        path = self._path(key)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, key: str) -> bool:
        path = self._path(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self._dir.glob("*.json"))

    def _path(self, key: str) -> Path:
        if not isinstance(key, str) or not key.strip() or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"invalid store key {key!r}")
        return self._dir / f"{key}.json"


def copy_store(src: KeyValueStore, dst: KeyValueStore, *, keys: tuple[str, ...] = STORE_KEYS) -> list[str]:
    """Recopie telles quelles les valeurs présentes dans `src`. Retourne les clés copiées."""
    copied: list[str] = []
    for key in keys:
        raw = src.get(key)
        if raw is None:
            continue
        dst.set(key, raw)
        copied.append(key)
    return copied
