from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, String, Text, delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pocketledger.db import init_db, session_factory


class Base(DeclarativeBase):
    pass


class StoreItemRow(Base):
    __tablename__ = "store_items"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class SqlStore:
    """KeyValueStore adossé à une table SQL (une ligne par clé)."""

    def __init__(self, engine: Engine | None = None) -> None:
        # table créée à la volée, pas de migrations
        self._sessions = session_factory(init_db(engine))

    def get(self, key: str) -> str | None:
        with self._sessions() as s:
            row = s.get(StoreItemRow, key)
            return None if row is None else row.value

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("store values must be str")
        now = dt.datetime.now(dt.timezone.utc)
        with self._sessions() as s:
            row = s.get(StoreItemRow, key)
            if row is None:
                s.add(StoreItemRow(key=key, value=value, updated_at=now))
            else:
                row.value = value
                row.updated_at = now
            s.commit()

    def delete(self, key: str) -> bool:
        with self._sessions() as s:
            result = s.execute(delete(StoreItemRow).where(StoreItemRow.key == key))
            s.commit()
            return result.rowcount > 0

    def keys(self) -> list[str]:
        stmt = select(StoreItemRow.key).order_by(StoreItemRow.key)
        with self._sessions() as s:
            return list(s.execute(stmt).scalars().all())
