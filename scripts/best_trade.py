import argparse
import json
import sys
from datetime import date, datetime, timezone

from besttrade.calculator import compute
from besttrade.errors import TradeInputError
from besttrade.formatting.pretty import to_pretty_string


def split_list(raw: str) -> list[str]:
    if not raw.strip():
        return []
    return [item.strip() for item in raw.split(",")]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Best single buy/sell trade over the last N trading days"
    )
    parser.add_argument("--low-prices", required=True, help="Comma-separated, e.g. 10,12,11")
    parser.add_argument("--low-times", required=True, help="Comma-separated HH:mm, e.g. 10:00,09:45")
    parser.add_argument("--high-prices", required=True, help="Comma-separated, e.g. 14,15,16")
    parser.add_argument("--high-times", required=True, help="Comma-separated HH:mm, e.g. 15:00,16:00")
    parser.add_argument(
        "--calculation-date",
        default=None,
        help="ISO date (YYYY-MM-DD); defaults to today (UTC)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args()

    if args.calculation_date:
        try:
            calc_date = date.fromisoformat(args.calculation_date)
        except ValueError:
            parser.error(f"invalid --calculation-date: {args.calculation_date}")
    else:
        calc_date = datetime.now(timezone.utc).date()

    try:
        result = compute(
            split_list(args.low_prices),
            split_list(args.low_times),
            split_list(args.high_prices),
            split_list(args.high_times),
            calc_date,
        )
    except TradeInputError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(to_pretty_string(result))


if __name__ == "__main__":
    main()
