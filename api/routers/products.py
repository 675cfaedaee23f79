"""
Products API Endpoints.

Catalog reads and price-to-units lookups used during sale entry.
"""

from datetime import date
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_price_rule_service, get_product_service
from api.models import PriceRuleResponse, ProductResponse, UnitsPerSaleResponse
from services.pricing_service import PriceRuleService
from services.product_service import ProductService

router = APIRouter()


@router.get(
    "/products",
    response_model=List[ProductResponse],
    summary="List Active Products"
)
def list_products(service: ProductService = Depends(get_product_service)):
    try:
        return [ProductResponse.from_domain(p) for p in service.get_active_products()]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to list products: {str(e)}")


@router.get(
    "/products/{product_id}/price-rules",
    response_model=List[PriceRuleResponse],
    summary="List Price Rules",
    description="Every price tier of a product, in display order."
)
def list_price_rules(product_id: int, service: ProductService = Depends(get_product_service)):
    try:
        return [PriceRuleResponse.from_domain(r) for r in service.get_price_rules_for_product(product_id)]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to list price rules: {str(e)}")


@router.get(
    "/products/{product_id}/units",
    response_model=UnitsPerSaleResponse,
    summary="Resolve Units Per Sale",
    description="Units implied by charging `price` for the product on `on_date`."
)
def resolve_units(
    product_id: int,
    price: Decimal = Query(..., gt=0),
    on_date: date = Query(...),
    service: PriceRuleService = Depends(get_price_rule_service),
):
    """
    Resolve the price tier for a charged price.

    Falls back to 1 unit with no rule reference when no tier matches.

    **Example usage:**
    ```
    GET /api/v1/products/3/units?price=38.00&on_date=2025-06-01
    ```
    """
    try:
        units = service.get_units_for_product(product_id, price, on_date)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to resolve units: {str(e)}")
    return UnitsPerSaleResponse.from_domain(units)
