from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ExpenditureCreateRequest(BaseModel):
    expenditure_type: Literal["personal", "other"] = "personal"
    name: str | None = None
    liability_type: str | None = None
    amount: float = Field(ge=0)
    type: Literal["static", "dynamic"] = "static"
    state: Literal["high", "medium", "low"] | None = None
    year: int | None = Field(default=None, ge=1)
    month: int | None = Field(default=None, ge=1, le=12)


class ExpenditureResponse(BaseModel):
    id: int
    expenditure_type: str
    name: str | None
    liability_type: str | None
    amount: str
    type: str
    state: str | None
    year: int
    month: int
    timestamp: int


class TieredTotalsResponse(BaseModel):
    essential: str
    tight: str
    light: str


class ExpenditureListResponse(BaseModel):
    year: int
    month: int
    items: list[ExpenditureResponse]
    total: str
    tiers: TieredTotalsResponse
