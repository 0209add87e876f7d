"""
Pydantic schemas for NBP quotation tables and analytics results.

Field aliases follow the NBP wire format (``effectiveDate``) and the
public response shape (``maxRate`` / ``minRate``). All models are frozen:
a table is built once per request and never modified.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.core.errors import InvalidStateError


class TableKind(str, Enum):
    """NBP table letters served by this API."""
    MID = "A"
    BID_ASK = "C"


class Quotation(BaseModel):
    """One dated rate record. Table A fills ``mid``; table C fills ``bid``/``ask``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    no: str
    effective_date: date = Field(alias="effectiveDate")
    bid: Decimal | None = None
    ask: Decimal | None = None
    mid: Decimal | None = None


class QuotationTable(BaseModel):
    """NBP response envelope; ``rates`` keeps the upstream (chronological) order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    table: str
    currency: str
    code: str
    rates: tuple[Quotation, ...]


class DifferenceResult(BaseModel):
    """Widest bid/ask spread in a table and the quotation that produced it."""

    model_config = ConfigDict(frozen=True)

    difference: Decimal
    rate: Quotation


class RangeResult(BaseModel):
    """Quotations holding the highest and lowest mid rate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_rate: Quotation = Field(alias="maxRate")
    min_rate: Quotation = Field(alias="minRate")


def decode_table(payload: Any) -> QuotationTable:
    """
    Build a ``QuotationTable`` from a decoded NBP JSON body.

    A payload that does not fit the schema is unusable data, so the
    pydantic error is re-raised as ``InvalidStateError``.
    """
    try:
        return QuotationTable.model_validate(payload)
    except ValidationError as exc:
        raise InvalidStateError("Upstream payload is not a quotation table") from exc
