from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from pocketledger.api.deps import get_tracker, resolve_period
from pocketledger.api.schemas.dashboard import DashboardResponse
from pocketledger.domain.money import format_amount

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    year: int | None = Query(default=None, ge=1),
    month: int | None = Query(default=None, ge=1, le=12),
) -> DashboardResponse:
    y, m = resolve_period(year, month)
    try:
        summary = get_tracker().aggregator.dashboard(y, m)
    except Exception as e:
        logger.exception("Failed to compute dashboard: %s", e)
        raise HTTPException(status_code=500, detail="Internal error")

    return DashboardResponse(
        year=summary.year,
        month=summary.month,
        total_income=format_amount(summary.total_income),
        total_expenditure=format_amount(summary.total_expenditure),
        balance=format_amount(summary.balance),
        trend=summary.trend.value,
        total_assets=format_amount(summary.total_assets),
        total_liabilities=format_amount(summary.total_liabilities),
        net_worth=format_amount(summary.net_worth),
    )
