"""
Payments API Endpoints.

Counted totals per payment method for an event day, and the day's
reconciliation against net sales.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from api.dependencies import get_aggregation_engine, get_payment_ledger
from api.models import PaymentResponse, PaymentSummaryResponse, SavePaymentRequest
from domain.enums import PaymentMethod
from services.payment_service import PaymentLedger
from services.summary_service import AggregationEngine

router = APIRouter()


def _parse_method(method: str) -> PaymentMethod:
    try:
        return PaymentMethod[method.upper()]
    except KeyError:
        valid = ", ".join(m.name for m in PaymentMethod)
        raise HTTPException(
            status_code=400,
            detail=f"Unknown payment method '{method}'. Expected one of: {valid}"
        )


@router.get(
    "/event-days/{event_day_id}/payments",
    response_model=List[PaymentResponse],
    summary="List Payments"
)
def list_payments(event_day_id: int, ledger: PaymentLedger = Depends(get_payment_ledger)):
    try:
        return [PaymentResponse.from_domain(p) for p in ledger.get_payments_by_event_day(event_day_id)]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to list payments: {str(e)}")


@router.put(
    "/event-days/{event_day_id}/payments/{method}",
    response_model=PaymentResponse,
    summary="Save Payment",
    description="Set the counted amount for one payment method, replacing any earlier amount."
)
def save_payment(
    event_day_id: int,
    method: str,
    request: SavePaymentRequest,
    ledger: PaymentLedger = Depends(get_payment_ledger),
):
    """
    Insert or overwrite the payment for (event day, method).

    **Example usage:**
    ```
    PUT /api/v1/event-days/5/payments/cash
    {"amount": "350.00"}
    ```
    Saving again for the same day and method replaces the amount.
    """
    payment_method = _parse_method(method)
    try:
        payment = ledger.save_payment(event_day_id, payment_method, request.amount)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to save payment: {str(e)}")
    return PaymentResponse.from_domain(payment)


@router.delete(
    "/payments/{payment_id}",
    status_code=204,
    response_class=Response,
    summary="Delete Payment",
    description="Remove a payment. Deleting an unknown payment is not an error."
)
def delete_payment(payment_id: int, ledger: PaymentLedger = Depends(get_payment_ledger)):
    try:
        ledger.delete_payment(payment_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to delete payment: {str(e)}")
    return Response(status_code=204)


@router.get(
    "/event-days/{event_day_id}/payments/summary",
    response_model=PaymentSummaryResponse,
    summary="Payment Summary",
    description="Counted payments against net sales; difference = payments - sales."
)
def payment_summary(event_day_id: int, engine: AggregationEngine = Depends(get_aggregation_engine)):
    result = engine.get_payment_summary(event_day_id)
    if not result.success or result.data is None:
        raise HTTPException(status_code=500, detail=result.error_message)
    return PaymentSummaryResponse.from_domain(result.data)
