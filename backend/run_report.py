"""
Print the indicator report for a price series.

Usage:
    python run_report.py                    # configured sample series
    python run_report.py 100 101.5 99 ...   # prices from the command line
"""

import os
import sys

backend_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, backend_dir)

from dotenv import load_dotenv
load_dotenv(os.path.join(backend_dir, ".env"))

from price_insight.core.logging import configure_logging
from price_insight.services.indicators import get_indicator_service
from price_insight.services.market_data import get_sample_prices
from price_insight.services.reporting import format_report


def main(argv: list[str]) -> int:
    configure_logging()

    try:
        prices = [float(arg) for arg in argv] if argv else get_sample_prices()
        # pydantic.ValidationError subclasses ValueError (non-finite prices)
        report = get_indicator_service().analyze(prices)
    except ValueError as e:
        print(f"Invalid price: {e}", file=sys.stderr)
        return 2

    print("=" * 40)
    print(f"PRICE INSIGHT - {report.prices_count} prices")
    print("=" * 40)
    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
