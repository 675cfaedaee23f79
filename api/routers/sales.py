"""
Sales API Endpoints.

Endpoints for recording, correcting and removing sales of an event day, and
for the day's per-brand totals. Every committed change is pushed to the
day's WebSocket subscribers.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from api.dependencies import (
    get_aggregation_engine,
    get_event_service,
    get_price_rule_service,
    get_sale_recorder,
)
from api.models import (
    BrandSalesSummaryResponse,
    CreateSaleRequest,
    SaleResponse,
    UpdateSaleRequest,
)
from domain.errors import ValidationError
from services.event_service import EventService
from services.pricing_service import PriceRuleService
from services.sale_service import SaleRecorder
from services.summary_service import AggregationEngine

router = APIRouter()


@router.get(
    "/event-days/{event_day_id}/sales",
    response_model=List[SaleResponse],
    summary="List Sales",
    description="Sales of an event day with product attached, most recent first."
)
def list_sales(event_day_id: int, recorder: SaleRecorder = Depends(get_sale_recorder)):
    try:
        return [SaleResponse.from_domain(s) for s in recorder.get_sales_by_event_day(event_day_id)]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to list sales: {str(e)}")


@router.get(
    "/event-days/{event_day_id}/sales/summary",
    response_model=List[BrandSalesSummaryResponse],
    summary="Brand Sales Summary",
    description="Per-brand totals of an event day, brand descending."
)
def brand_sales_summary(event_day_id: int, engine: AggregationEngine = Depends(get_aggregation_engine)):
    try:
        summaries = engine.get_brand_sales_summaries(event_day_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to summarize sales: {str(e)}")
    return [BrandSalesSummaryResponse.from_domain(s) for s in summaries]


@router.post(
    "/event-days/{event_day_id}/sales",
    response_model=SaleResponse,
    status_code=201,
    summary="Record Sale"
)
def create_sale(
    event_day_id: int,
    request: CreateSaleRequest,
    recorder: SaleRecorder = Depends(get_sale_recorder),
    events: EventService = Depends(get_event_service),
    pricing: PriceRuleService = Depends(get_price_rule_service),
):
    """
    Record a sale for an event day.

    **Units resolution:**
    When `quantity_units` is omitted, units and `price_rule_id` are taken
    from the product's price rule matching `unit_price` on the event day's
    date. No matching rule means 1 unit.

    **Example request:**
    ```json
    {"product_id": 3, "unit_price": "38.00", "discount_value": "0"}
    ```
    With the seeded candle tiers this records 2 units.
    """
    try:
        price_rule_id = request.price_rule_id
        quantity_units = request.quantity_units

        if quantity_units is None:
            event_day = events.get_event_day(event_day_id)
            if event_day is None:
                raise HTTPException(
                    status_code=404,
                    detail=f"Event day not found: {event_day_id}"
                )
            units = pricing.get_units_for_product(request.product_id, request.unit_price, event_day.date)
            quantity_units = units.units
            if price_rule_id is None:
                price_rule_id = units.price_rule_id

        sale = recorder.create_sale(
            event_day_id=event_day_id,
            product_id=request.product_id,
            price_rule_id=price_rule_id,
            unit_price=request.unit_price,
            quantity_units=quantity_units,
            discount_value=request.discount_value,
            notes=request.notes,
        )
        return SaleResponse.from_domain(sale)

    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to create sale: {str(e)}")


@router.get(
    "/sales/{sale_id}",
    response_model=SaleResponse,
    summary="Get Sale"
)
def get_sale(sale_id: int, recorder: SaleRecorder = Depends(get_sale_recorder)):
    try:
        sale = recorder.get_sale(sale_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get sale: {str(e)}")

    if sale is None:
        raise HTTPException(status_code=404, detail=f"Sale not found: {sale_id}")
    return SaleResponse.from_domain(sale)


@router.put(
    "/sales/{sale_id}",
    response_model=SaleResponse,
    summary="Update Sale",
    description="Overwrite price, units, discount, notes and price rule of a sale."
)
def update_sale(
    sale_id: int,
    request: UpdateSaleRequest,
    recorder: SaleRecorder = Depends(get_sale_recorder),
):
    try:
        sale = recorder.update_sale(
            sale_id,
            unit_price=request.unit_price,
            quantity_units=request.quantity_units,
            discount_value=request.discount_value,
            notes=request.notes,
            price_rule_id=request.price_rule_id,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to update sale: {str(e)}")

    if sale is None:
        raise HTTPException(status_code=404, detail=f"Sale not found: {sale_id}")
    return SaleResponse.from_domain(sale)


@router.delete(
    "/sales/{sale_id}",
    status_code=204,
    response_class=Response,
    summary="Delete Sale"
)
def delete_sale(sale_id: int, recorder: SaleRecorder = Depends(get_sale_recorder)):
    try:
        deleted = recorder.delete_sale(sale_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to delete sale: {str(e)}")

    if not deleted:
        raise HTTPException(status_code=404, detail=f"Sale not found: {sale_id}")
    return Response(status_code=204)
