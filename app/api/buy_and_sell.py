"""
Buy/sell spread endpoint backed by NBP table C.
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.shaping import shape_response
from app.core.validation import validate_currency_code, validate_quotation_count
from app.schemas.rate import TableKind, decode_table
from app.services.nbp_client import QuotationProvider, get_quotation_provider
from app.services.spread_service import compute_max_spread

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{currency}/difference")
async def get_major_difference(
    currency: str,
    quotations: str = Query(
        ..., description="Number of trailing quotations", examples=["10"],
    ),
    detailed: bool = Query(False, description="Include the winning quotation"),
    provider: QuotationProvider = Depends(get_quotation_provider),
):
    """
    Widest ask/bid spread among the last *quotations* quotations.

    Returns the spread, or ``{"difference": ..., "rate": {...}}`` with
    ``detailed=true``. On equal spreads the earliest quotation is reported.
    """
    validate_currency_code(currency)
    validate_quotation_count(quotations)

    payload = await provider.fetch_table(TableKind.BID_ASK.value, currency, last=quotations)
    result = compute_max_spread(decode_table(payload))

    logger.debug(
        "difference %s over %s quotations: %s on %s",
        currency, quotations, result.difference, result.rate.effective_date,
    )
    return shape_response(detailed, result, result.difference)
