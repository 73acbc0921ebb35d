from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from pocketledger.settings import Settings, get_settings


def database_url(settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    if settings.database_url:
        return settings.database_url
    # sans URL : base SQLite à côté des fichiers JSON
    return f"sqlite:///{(settings.data_dir / 'pocketledger.db').as_posix()}"


def build_engine(url: str) -> Engine:
    kwargs: dict = {}
    if url.startswith("sqlite"):
        # accès depuis les threads du serveur
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)


def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@lru_cache
def get_engine() -> Engine:
    return build_engine(database_url())


def init_db(engine: Engine | None = None) -> Engine:
    """Crée la table `store_items` si besoin et retourne le moteur utilisé."""
    # import here to avoid circular imports
    from pocketledger.repositories.sql_store import Base  # noqa

    engine = engine or get_engine()
    Base.metadata.create_all(engine)
    return engine
