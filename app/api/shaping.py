"""
Response shaping for the ``detailed`` query flag.

Detailed models carry decimals as JSON strings; a bare decimal summary is
written as a JSON number from its decimal text. Neither passes through
float. Rate fields a table kind does not carry are left out.
"""

from decimal import Decimal

from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel


def shape_response(detailed: bool, full: BaseModel, summary: Decimal | str) -> Response:
    """Return *full* when ``detailed`` was requested, else the scalar *summary*."""
    if detailed:
        return JSONResponse(
            content=full.model_dump(mode="json", by_alias=True, exclude_none=True)
        )
    if isinstance(summary, Decimal):
        # fixed-point text is always a valid JSON number, unlike "1E+1"
        return Response(content=format(summary, "f"), media_type="application/json")
    return JSONResponse(content=summary)
