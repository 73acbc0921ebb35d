from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Response

from pocketledger.api.deps import get_tracker
from pocketledger.api.schemas.assets import (
    AssetCreateRequest,
    AssetListResponse,
    AssetResponse,
    MonthlyIncomePreviewResponse,
)
from pocketledger.domain.asset import Asset
from pocketledger.domain.money import format_amount

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/assets", tags=["assets"])


def _asset_to_response(a: Asset) -> AssetResponse:
    return AssetResponse(
        id=a.id,
        type=a.type,
        value=format_amount(a.value),
        is_monthly_income=a.is_monthly_income,
        interest_rate=a.interest_rate,
        monthly_income_amount=(
            format_amount(a.monthly_income_amount) if a.monthly_income_amount is not None else None
        ),
        description=a.description,
    )


@router.get("", response_model=AssetListResponse)
def list_assets() -> AssetListResponse:
    try:
        ledger = get_tracker().assets
        return AssetListResponse(
            items=[_asset_to_response(a) for a in ledger.list()],
            total_value=format_amount(ledger.total_value()),
            total_monthly_income=format_amount(ledger.total_monthly_income()),
        )
    except Exception as e:
        logger.exception("Failed to list assets: %s", e)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/monthly-income-preview", response_model=MonthlyIncomePreviewResponse)
def preview_monthly_income(
    value: float = Query(ge=0),
    interest_rate: float = Query(ge=0, le=100),
) -> MonthlyIncomePreviewResponse:
    ledger = get_tracker().assets
    return MonthlyIncomePreviewResponse(
        value=format_amount(value),
        interest_rate=interest_rate,
        monthly_income=format_amount(ledger.preview_monthly_income(value, interest_rate)),
    )


@router.post("", status_code=201, response_model=AssetResponse)
def create_asset(req: AssetCreateRequest) -> AssetResponse:
    asset = get_tracker().assets.add(
        type=req.type,
        value=req.value,
        is_monthly_income=req.is_monthly_income,
        interest_rate=req.interest_rate,
        description=req.description,
    )
    if asset is None:
        raise HTTPException(status_code=422, detail="Asset rejected")
    return _asset_to_response(asset)


@router.delete("/{asset_id}", status_code=204)
def delete_asset(asset_id: int) -> Response:
    if not get_tracker().assets.remove(asset_id):
        raise HTTPException(status_code=404, detail="Asset not found")
    return Response(status_code=204)
