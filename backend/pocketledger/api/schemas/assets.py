from __future__ import annotations

from pydantic import BaseModel, Field


class AssetCreateRequest(BaseModel):
    type: str = Field(min_length=1, examples=["Real Estate", "Stocks"])
    value: float = Field(ge=0)
    is_monthly_income: bool = False
    interest_rate: float | None = Field(default=None, ge=0, le=100)
    description: str | None = None


class AssetResponse(BaseModel):
    id: int
    type: str
    value: str
    is_monthly_income: bool
    interest_rate: float | None
    monthly_income_amount: str | None
    description: str | None


class AssetListResponse(BaseModel):
    items: list[AssetResponse]
    total_value: str
    total_monthly_income: str


class MonthlyIncomePreviewResponse(BaseModel):
    value: str
    interest_rate: float
    monthly_income: str
