from __future__ import annotations

from pydantic import BaseModel


class DashboardResponse(BaseModel):
    year: int
    month: int
    total_income: str
    total_expenditure: str
    balance: str
    trend: str
    total_assets: str
    total_liabilities: str
    net_worth: str
