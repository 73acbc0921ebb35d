from __future__ import annotations

from pydantic import BaseModel, Field


class LiabilityCreateRequest(BaseModel):
    type: str = Field(min_length=1, examples=["Mortgage", "Credit Card"])
    amount: float = Field(ge=0)
    interest_rate: float = Field(ge=0, le=100)
    has_monthly_payment: bool = False
    description: str | None = None


class LiabilityResponse(BaseModel):
    id: int
    type: str
    amount: str
    interest_rate: float
    has_monthly_payment: bool
    monthly_payment: str | None
    description: str | None


class LiabilityPaymentResponse(BaseModel):
    type: str
    amount: str


class LiabilityListResponse(BaseModel):
    items: list[LiabilityResponse]
    total_amount: str
    monthly_payment_count: int
    total_monthly_payments: str
