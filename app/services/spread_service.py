"""
Bid/ask spread analytics over an NBP table C ("kupno i sprzedaż").

The spread of one quotation is ``|ask - bid|``. All arithmetic stays in
``Decimal``; a few hundredths of a zloty must compare exactly.
"""

from decimal import Decimal

from app.core.errors import InvalidStateError
from app.schemas.rate import DifferenceResult, Quotation, QuotationTable, TableKind

# Below any real spread, which is never negative.
_NO_SPREAD = Decimal("-1")


def spread_of(quotation: Quotation) -> Decimal:
    """Return ``|ask - bid|``; a quotation missing either side is unusable."""
    if quotation.bid is None or quotation.ask is None:
        raise InvalidStateError(f"Quotation {quotation.no} has no bid/ask pair")
    return abs(quotation.ask - quotation.bid)


def compute_max_spread(table: QuotationTable) -> DifferenceResult:
    """
    Find the quotation with the widest bid/ask spread.

    Quotations are scanned in table order and the best is replaced only
    on a strictly larger spread, so on a tie the earliest quotation wins.
    One quotation without bid/ask fails the whole computation.
    """
    if table.table != TableKind.BID_ASK:
        raise InvalidStateError(f"Expected table C, got {table.table!r}")
    if not table.rates:
        raise InvalidStateError("Table C has no quotations")

    best_spread = _NO_SPREAD
    best_quotation: Quotation | None = None
    for quotation in table.rates:
        spread = spread_of(quotation)
        if spread > best_spread:
            best_spread = spread
            best_quotation = quotation

    return DifferenceResult(difference=best_spread, rate=best_quotation)
