"""Live calculation preview for the print cost form."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.schemas.calculator import (
    CalculationResponse,
    CostBreakdownResponse,
    DiscountRowResponse,
    PricingResponse,
    PrintCalculationRequest,
    VatResponse,
)
from backend.app.services.calculator import CalculationResult, CostBasisNotFound, calculate
from backend.app.utils.currency import format_currency, format_percent
from backend.app.utils.time_format import ParseError, format_time

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculator", tags=["calculator"])


def calculation_error(exc: ParseError | CostBasisNotFound) -> HTTPException:
    """Map calculation input errors to HTTP errors."""
    if isinstance(exc, ParseError):
        # Field-level message; the form must not recalculate with a fallback time
        return HTTPException(422, {"field": "print_time", "message": str(exc)})
    return HTTPException(400, str(exc))


def to_response(result: CalculationResult) -> CalculationResponse:
    breakdown = result.breakdown
    pricing = result.pricing
    display = {
        "cost_per_unit": format_currency(breakdown.cost_per_unit),
        "total_cost": format_currency(breakdown.total_cost),
        "sell_price": format_currency(pricing.sell_price),
        "profit": format_currency(pricing.profit),
        "profit_margin": format_percent(pricing.profit_margin_percent),
    }
    if result.vat is not None:
        display["sell_price_with_vat"] = format_currency(result.vat.gross)

    return CalculationResponse(
        print_time_minutes=result.prepared.print_time_minutes,
        print_time_display=format_time(result.prepared.print_time_minutes),
        breakdown=CostBreakdownResponse.model_validate(breakdown),
        pricing=PricingResponse.model_validate(pricing),
        discount_table=[DiscountRowResponse.model_validate(row) for row in result.discount_table],
        vat=VatResponse.model_validate(result.vat) if result.vat is not None else None,
        display=display,
    )


@router.post("/preview", response_model=CalculationResponse)
async def preview(data: PrintCalculationRequest, db: AsyncSession = Depends(get_db)):
    """Calculate cost, pricing and discount table without saving anything."""
    try:
        result = await calculate(db, data)
    except (ParseError, CostBasisNotFound) as e:
        logger.debug("Preview rejected: %s", e)
        raise calculation_error(e)
    return to_response(result)
