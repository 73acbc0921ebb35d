from __future__ import annotations

import datetime as dt
import time
from typing import Callable


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """
    Identifiants entiers dérivés de l'horloge (ms), strictement croissants
    dans le process. Suffisant en mono-utilisateur / mono-process.
    """

    def __init__(self, clock: Callable[[], int] = now_ms) -> None:
        self._clock = clock
        self._last = 0

    def observe(self, existing_id: int) -> None:
        # ids déjà persistés : on ne redescend jamais en dessous
        if existing_id > self._last:
            self._last = existing_id

    def next_id(self) -> int:
        candidate = self._clock()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate


def local_now() -> dt.datetime:
    # l'année / le mois courants s'entendent en heure locale
    return dt.datetime.now().astimezone()


def to_epoch_ms(moment: dt.datetime) -> int:
    return int(moment.timestamp() * 1000)
