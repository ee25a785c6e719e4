"""Command line entry point: decode date strings.

Usage:
    python -m date_parsing 1960s "250 B.C." --precision year decade
    echo "2013-08-00" | python -m date_parsing --encoding w3cdtf --json
"""

import argparse
import json
import sys

from date_parsing.calendar_values import Precision
from date_parsing.config import load_date_parsing_config
from date_parsing.date_value import DateValue
from date_parsing.log import configure_logging, log_error, log_info
from date_parsing.qualifiers import qualify
from date_parsing.statement import DateStatement

_PRECISION_CHOICES = [p.value for p in Precision if p != Precision.UNKNOWN]


def describe(date: DateValue, allowed_precisions) -> dict:
    """Summary of one parsed date, as printed by the CLI."""
    earliest, latest = date.as_range() or (None, None)
    decoded = date.decoded_value(allowed_precisions=allowed_precisions, prefer_original_text=False)
    return {
        "value": date.value,
        "format": date.strategy.name,
        "normalized": date.normalized,
        "parsed": date.parsed,
        "precision": date.precision.value,
        "decoded": decoded,
        "qualified": qualify(decoded, date.qualifier),
        "sort_key": date.sort_key,
        "earliest": earliest.edtf() if earliest else None,
        "latest": latest.edtf() if latest else None,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Parse bibliographic date strings and show how they decode"
    )
    parser.add_argument(
        'values',
        nargs='*',
        help='Date strings to parse; read one per line from stdin when omitted'
    )
    parser.add_argument(
        '--encoding',
        help='Declared encoding code (iso8601, w3cdtf, marc, edtf)'
    )
    parser.add_argument(
        '--qualifier',
        choices=['approximate', 'questionable', 'inferred'],
        help='Qualifier to apply to every value'
    )
    parser.add_argument(
        '--precision',
        nargs='+',
        choices=_PRECISION_CHOICES,
        help='Allowed output precisions, most specific first'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print one JSON object per value'
    )

    args = parser.parse_args(argv)

    try:
        config = load_date_parsing_config()
    except ValueError as e:
        log_error(f"Invalid configuration: {e}")
        return 1
    configure_logging(config)

    allowed = [Precision(p) for p in args.precision] if args.precision else list(config.allowed_precisions)
    values = args.values or [line.strip() for line in sys.stdin if line.strip()]
    log_info(f"Decoding {len(values)} value(s)")

    for value in values:
        statement = DateStatement(
            value=value,
            encoding={"code": args.encoding} if args.encoding else None,
            qualifier=args.qualifier,
        )
        summary = describe(DateValue(statement, current_year=config.current_year), allowed)
        if args.json:
            print(json.dumps(summary, ensure_ascii=False))
        else:
            print(f"{summary['value']}\t{summary['qualified']}\t{summary['sort_key']}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
