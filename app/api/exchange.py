"""
Mid-rate endpoints backed by NBP table A.

Provides the mid rate for a single day and the highest/lowest mid rate
over the last N quotations. Input is checked before NBP is contacted.
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.shaping import shape_response
from app.core.validation import (
    validate_currency_code,
    validate_date,
    validate_quotation_count,
)
from app.schemas.rate import TableKind, decode_table
from app.services.exchange_service import compute_max_min, format_max_min, get_mid_rate
from app.services.nbp_client import QuotationProvider, get_quotation_provider

logger = logging.getLogger(__name__)

router = APIRouter()


# Registered before "/{currency}/{date}" so "max-min" is never taken for a date.
@router.get("/{currency}/max-min")
async def get_max_and_min(
    currency: str,
    quotations: str = Query(
        ..., description="Number of trailing quotations", examples=["10"],
    ),
    detailed: bool = Query(False, description="Return full quotation records"),
    provider: QuotationProvider = Depends(get_quotation_provider),
):
    """
    Highest and lowest mid rate among the last *quotations* quotations.

    Returns ``"Max rate: X, Min rate: Y"``, or ``{"maxRate": ..., "minRate": ...}``
    with ``detailed=true``. On equal rates the latest quotation is reported.
    """
    validate_currency_code(currency)
    validate_quotation_count(quotations)

    payload = await provider.fetch_table(TableKind.MID.value, currency, last=quotations)
    result = compute_max_min(decode_table(payload))

    logger.debug(
        "max-min %s over %s quotations: %s / %s",
        currency, quotations, result.max_rate.mid, result.min_rate.mid,
    )
    return shape_response(detailed, result, format_max_min(result))


@router.get("/{currency}/{date}")
async def get_exchange_rate(
    currency: str,
    date: str,
    detailed: bool = Query(False, description="Return the whole NBP table"),
    provider: QuotationProvider = Depends(get_quotation_provider),
):
    """
    Mid rate of *currency* on *date* (``YYYY-MM-DD``).

    Returns the bare rate, or the whole table A response with ``detailed=true``.
    """
    validate_currency_code(currency)
    validate_date(date)

    payload = await provider.fetch_table(TableKind.MID.value, currency, date=date)
    table = decode_table(payload)
    return shape_response(detailed, table, get_mid_rate(table))
