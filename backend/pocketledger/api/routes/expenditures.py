from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Response

from pocketledger.api.deps import get_tracker, resolve_period
from pocketledger.api.schemas.expenditures import (
    ExpenditureCreateRequest,
    ExpenditureListResponse,
    ExpenditureResponse,
    TieredTotalsResponse,
)
from pocketledger.api.schemas.liabilities import LiabilityPaymentResponse
from pocketledger.domain.expenditure import Expenditure
from pocketledger.domain.money import format_amount

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/expenditures", tags=["expenditures"])


def _expenditure_to_response(e: Expenditure) -> ExpenditureResponse:
    return ExpenditureResponse(
        id=e.id,
        expenditure_type=e.expenditure_type.value,
        name=e.name,
        liability_type=e.liability_type,
        amount=format_amount(e.amount),
        type=e.type.value,
        state=e.state.value if e.state else None,
        year=e.year,
        month=e.month,
        timestamp=e.timestamp,
    )


@router.get("", response_model=ExpenditureListResponse)
def list_expenditures(
    year: int | None = Query(default=None, ge=1),
    month: int | None = Query(default=None, ge=1, le=12),
) -> ExpenditureListResponse:
    y, m = resolve_period(year, month)
    try:
        journal = get_tracker().expenditures
        tiers = journal.tiered_totals(y, m)
        return ExpenditureListResponse(
            year=y,
            month=m,
            items=[_expenditure_to_response(e) for e in journal.list_for_period(y, m)],
            total=format_amount(journal.total_for_period(y, m)),
            tiers=TieredTotalsResponse(
                essential=format_amount(tiers.essential),
                tight=format_amount(tiers.tight),
                light=format_amount(tiers.light),
            ),
        )
    except Exception as e:
        logger.exception("Failed to list expenditures: %s", e)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/liabilities", response_model=list[LiabilityPaymentResponse])
def list_liability_options() -> list[LiabilityPaymentResponse]:
    return [
        LiabilityPaymentResponse(type=p.type, amount=format_amount(p.amount))
        for p in get_tracker().expenditures.liability_options()
    ]


@router.get("/suggestion", response_model=LiabilityPaymentResponse)
def suggest_expenditure(liability_type: str = Query(min_length=1)) -> LiabilityPaymentResponse:
    amount = get_tracker().expenditures.suggest_amount(liability_type)
    if amount is None:
        raise HTTPException(status_code=404, detail="Liability type not found")
    return LiabilityPaymentResponse(type=liability_type, amount=format_amount(amount))


@router.post("", status_code=201, response_model=ExpenditureResponse)
def create_expenditure(req: ExpenditureCreateRequest) -> ExpenditureResponse:
    y, m = resolve_period(req.year, req.month)
    exp = get_tracker().expenditures.record(
        expenditure_type=req.expenditure_type,
        name=req.name,
        liability_type=req.liability_type,
        amount=req.amount,
        type=req.type,
        state=req.state,
        year=y,
        month=m,
    )
    if exp is None:
        raise HTTPException(status_code=422, detail="Expenditure rejected")
    return _expenditure_to_response(exp)


@router.delete("/{expenditure_id}", status_code=204)
def delete_expenditure(expenditure_id: int) -> Response:
    if not get_tracker().expenditures.delete(expenditure_id):
        raise HTTPException(status_code=404, detail="Expenditure not found")
    return Response(status_code=204)
