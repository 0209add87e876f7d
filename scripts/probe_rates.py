"""
Manual NBP probe — fetches a table and prints the analytics summary.

Usage:
    python scripts/probe_rates.py GBP --last 10
    python scripts/probe_rates.py GBP --last 10 --spread
    python scripts/probe_rates.py GBP --date 2022-09-08

Uses the configured provider, so NBP_MOCK=true works offline.
"""

import argparse
import asyncio
import json

from app.core.errors import RatesError, status_for
from app.core.validation import (
    validate_currency_code,
    validate_date,
    validate_quotation_count,
)
from app.schemas.rate import TableKind, decode_table
from app.services.exchange_service import compute_max_min, format_max_min, get_mid_rate
from app.services.nbp_client import get_quotation_provider
from app.services.spread_service import compute_max_spread


async def probe(args: argparse.Namespace) -> None:
    """Run one query and print the result as the API would shape it."""
    provider = get_quotation_provider()
    validate_currency_code(args.currency)

    if args.date:
        validate_date(args.date)
        payload = await provider.fetch_table(TableKind.MID.value, args.currency, date=args.date)
        table = decode_table(payload)
        print(f"Mid rate {table.code} on {args.date}: {get_mid_rate(table)}")
        return

    validate_quotation_count(args.last)
    kind = TableKind.BID_ASK if args.spread else TableKind.MID
    payload = await provider.fetch_table(kind.value, args.currency, last=args.last)
    table = decode_table(payload)

    if args.spread:
        result = compute_max_spread(table)
        print(f"Widest spread: {result.difference}")
    else:
        result = compute_max_min(table)
        print(format_max_min(result))

    print(json.dumps(result.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))


def main():
    parser = argparse.ArgumentParser(description="Query NBP and print rate analytics.")
    parser.add_argument("currency", help="ISO-4217 code, e.g. GBP")
    window = parser.add_mutually_exclusive_group(required=True)
    window.add_argument("--date", help="Single day, YYYY-MM-DD")
    window.add_argument("--last", help="Number of trailing quotations")
    parser.add_argument("--spread", action="store_true", help="Use table C and report the widest bid/ask spread")
    args = parser.parse_args()

    try:
        asyncio.run(probe(args))
    except RatesError as exc:
        print(f"Failed ({status_for(exc)} {exc.kind.value}): {exc.message}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
