from __future__ import annotations

from dataclasses import dataclass

from pocketledger.domain.errors import ValidationError


@dataclass(frozen=True)
class Period:
    year: int
    month: int  # 1..12

    def __post_init__(self) -> None:
        if not isinstance(self.year, int) or isinstance(self.year, bool) or self.year < 1:
            raise ValidationError("year must be a positive integer")
        if not isinstance(self.month, int) or isinstance(self.month, bool) or not (1 <= self.month <= 12):
            raise ValidationError("month must be an integer in 1..12")
