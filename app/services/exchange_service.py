"""
Mid-rate analytics over an NBP table A ("kursy średnie").
"""

from decimal import Decimal

from app.core.errors import InvalidStateError
from app.schemas.rate import Quotation, QuotationTable, RangeResult, TableKind


def _require_mid_table(table: QuotationTable) -> None:
    if table.table != TableKind.MID:
        raise InvalidStateError(f"Expected table A, got {table.table!r}")
    if not table.rates:
        raise InvalidStateError("Table A has no quotations")


def _mid_of(quotation: Quotation) -> Decimal:
    if quotation.mid is None:
        raise InvalidStateError(f"Quotation {quotation.no} has no mid rate")
    return quotation.mid


def get_mid_rate(table: QuotationTable) -> Decimal:
    """Mid rate of the first quotation, as served by the single-day endpoint."""
    _require_mid_table(table)
    return _mid_of(table.rates[0])


def compute_max_min(table: QuotationTable) -> RangeResult:
    """
    Find the quotations with the highest and the lowest mid rate.

    Ties go to the *latest* quotation in table order, for both the
    maximum and the minimum. Every quotation must carry a mid rate.
    """
    _require_mid_table(table)

    first = table.rates[0]
    max_quotation = min_quotation = first
    max_mid = min_mid = _mid_of(first)

    for quotation in table.rates[1:]:
        mid = _mid_of(quotation)
        if mid >= max_mid:
            max_mid, max_quotation = mid, quotation
        if mid <= min_mid:
            min_mid, min_quotation = mid, quotation

    return RangeResult(max_rate=max_quotation, min_rate=min_quotation)


def format_max_min(result: RangeResult) -> str:
    """One-line summary used when the caller did not ask for details."""
    return f"Max rate: {result.max_rate.mid}, Min rate: {result.min_rate.mid}"
