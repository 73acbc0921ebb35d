from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class IncomeCreateRequest(BaseModel):
    type: Literal["salary", "asset"] = "salary"
    amount: float = Field(ge=0)
    asset_type: str | None = None
    description: str | None = None
    year: int | None = Field(default=None, ge=1)
    month: int | None = Field(default=None, ge=1, le=12)


class IncomeResponse(BaseModel):
    id: int
    type: str
    amount: str
    asset_type: str | None
    description: str | None
    year: int
    month: int
    timestamp: int


class IncomeListResponse(BaseModel):
    year: int
    month: int
    items: list[IncomeResponse]
    total: str


class IncomeSuggestionResponse(BaseModel):
    asset_type: str
    amount: str
    description: str
