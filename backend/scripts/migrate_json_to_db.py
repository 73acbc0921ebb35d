from __future__ import annotations

import os

from pocketledger.repositories.sql_store import SqlStore
from pocketledger.repositories.store import JsonFileStore, copy_store
from pocketledger.settings import get_settings


def main() -> int:
    if not os.getenv("POCKETLEDGER_DATABASE_URL"):
        raise SystemExit("POCKETLEDGER_DATABASE_URL is required (SQL store URL).")

    settings = get_settings()

    src = JsonFileStore(data_dir=settings.data_dir)
    dst = SqlStore()

    copied = copy_store(src, dst)

    print({"migrated": copied, "from": str(settings.data_dir)})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
