"""
Request syntax checks, run before any upstream request is made.

Only the shape of the input is checked here. Range limits (e.g. NBP's
255-quotation cap) and calendar validity of dates are left to the
upstream provider, which reports them as its own 400/404.
"""

import re

from app.core.errors import InvalidArgumentError

# Explicit ASCII classes: ``\d`` would also accept non-ASCII digits.
CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")
QUOTATION_COUNT_PATTERN = re.compile(r"[0-9]+")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_currency_code(code: str) -> str:
    """Require exactly three uppercase ASCII letters (ISO-4217 style)."""
    if not CURRENCY_CODE_PATTERN.fullmatch(code):
        raise InvalidArgumentError("Currency must be in ISO-4217 standard")
    return code


def validate_quotation_count(raw: str) -> str:
    """Require a non-empty run of ASCII digits; no sign, no whitespace."""
    if not QUOTATION_COUNT_PATTERN.fullmatch(raw):
        raise InvalidArgumentError("Quotations must be a positive integer")
    return raw


def validate_date(raw: str) -> str:
    """Require the ``YYYY-MM-DD`` shape. ``2022-13-40`` passes."""
    if not DATE_PATTERN.fullmatch(raw):
        raise InvalidArgumentError("Date must be in ISO-8601 standard")
    return raw
