from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response

from pocketledger.api.deps import get_tracker
from pocketledger.api.schemas.liabilities import (
    LiabilityCreateRequest,
    LiabilityListResponse,
    LiabilityPaymentResponse,
    LiabilityResponse,
)
from pocketledger.domain.liability import Liability
from pocketledger.domain.money import format_amount

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/liabilities", tags=["liabilities"])


def _liability_to_response(li: Liability) -> LiabilityResponse:
    return LiabilityResponse(
        id=li.id,
        type=li.type,
        amount=format_amount(li.amount),
        interest_rate=li.interest_rate,
        has_monthly_payment=li.has_monthly_payment,
        monthly_payment=format_amount(li.monthly_payment) if li.has_monthly_payment else None,
        description=li.description,
    )


@router.get("", response_model=LiabilityListResponse)
def list_liabilities() -> LiabilityListResponse:
    try:
        ledger = get_tracker().liabilities
        return LiabilityListResponse(
            items=[_liability_to_response(li) for li in ledger.list()],
            total_amount=format_amount(ledger.total_amount()),
            monthly_payment_count=ledger.monthly_payment_count(),
            total_monthly_payments=format_amount(ledger.total_monthly_payments()),
        )
    except Exception as e:
        logger.exception("Failed to list liabilities: %s", e)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/monthly-payments", response_model=list[LiabilityPaymentResponse])
def list_monthly_payments() -> list[LiabilityPaymentResponse]:
    return [
        LiabilityPaymentResponse(type=p.type, amount=format_amount(p.amount))
        for p in get_tracker().liabilities.monthly_payments()
    ]


@router.post("", status_code=201, response_model=LiabilityResponse)
def create_liability(req: LiabilityCreateRequest) -> LiabilityResponse:
    liability = get_tracker().liabilities.add(
        type=req.type,
        amount=req.amount,
        interest_rate=req.interest_rate,
        has_monthly_payment=req.has_monthly_payment,
        description=req.description,
    )
    if liability is None:
        raise HTTPException(status_code=422, detail="Liability rejected")
    return _liability_to_response(liability)


@router.delete("/{liability_id}", status_code=204)
def delete_liability(liability_id: int) -> Response:
    if not get_tracker().liabilities.remove(liability_id):
        raise HTTPException(status_code=404, detail="Liability not found")
    return Response(status_code=204)
