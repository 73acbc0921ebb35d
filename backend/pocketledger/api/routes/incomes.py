from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Response

from pocketledger.api.deps import get_tracker, resolve_period
from pocketledger.api.schemas.incomes import (
    IncomeCreateRequest,
    IncomeListResponse,
    IncomeResponse,
    IncomeSuggestionResponse,
)
from pocketledger.domain.income import Income
from pocketledger.domain.money import format_amount

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/incomes", tags=["incomes"])


def _income_to_response(i: Income) -> IncomeResponse:
    return IncomeResponse(
        id=i.id,
        type=i.type.value,
        amount=format_amount(i.amount),
        asset_type=i.asset_type,
        description=i.description,
        year=i.year,
        month=i.month,
        timestamp=i.timestamp,
    )


@router.get("", response_model=IncomeListResponse)
def list_incomes(
    year: int | None = Query(default=None, ge=1),
    month: int | None = Query(default=None, ge=1, le=12),
) -> IncomeListResponse:
    y, m = resolve_period(year, month)
    try:
        journal = get_tracker().incomes
        items = journal.list_for_period(y, m)
        return IncomeListResponse(
            year=y,
            month=m,
            items=[_income_to_response(i) for i in items],
            total=format_amount(journal.total_for_period(y, m)),
        )
    except Exception as e:
        logger.exception("Failed to list incomes: %s", e)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/asset-types", response_model=list[str])
def list_asset_types() -> list[str]:
    return get_tracker().incomes.asset_type_options()


@router.get("/suggestion", response_model=IncomeSuggestionResponse)
def suggest_income(asset_type: str = Query(min_length=1)) -> IncomeSuggestionResponse:
    suggestion = get_tracker().incomes.suggest(asset_type)
    if suggestion is None:
        raise HTTPException(status_code=404, detail="Asset type not found")
    return IncomeSuggestionResponse(
        asset_type=suggestion.asset_type,
        amount=format_amount(suggestion.amount),
        description=suggestion.description,
    )


@router.post("", status_code=201, response_model=IncomeResponse)
def create_income(req: IncomeCreateRequest) -> IncomeResponse:
    y, m = resolve_period(req.year, req.month)
    income = get_tracker().incomes.record(
        type=req.type,
        amount=req.amount,
        asset_type=req.asset_type,
        description=req.description,
        year=y,
        month=m,
    )
    if income is None:
        raise HTTPException(status_code=422, detail="Income rejected")
    return _income_to_response(income)


@router.delete("/{income_id}", status_code=204)
def delete_income(income_id: int) -> Response:
    if not get_tracker().incomes.delete(income_id):
        raise HTTPException(status_code=404, detail="Income not found")
    return Response(status_code=204)
