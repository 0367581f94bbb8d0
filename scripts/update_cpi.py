"""
update_cpi.py
-------------

Re-download the ONS consumer price indices release (MM23) and overwrite
static/data/cpi_components.csv with one row per CPI component and month.

Source: https://www.ons.gov.uk/economy/inflationandpriceindices/datasets/consumerpriceindices
"""

import argparse
import logging
import sys

from price_changes.config import DEFAULT_DATA_PATH, ONS_MM23_URL
from price_changes.refresh import fetch_mm23, reshape_mm23, write_components


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Refresh the UK CPI components CSV from ONS MM23.")
    parser.add_argument("--url", default=ONS_MM23_URL, help="MM23 CSV download URL")
    parser.add_argument("--output", default=str(DEFAULT_DATA_PATH), help="where to write the long-format CSV")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        components = reshape_mm23(fetch_mm23(args.url))
    except (RuntimeError, ValueError) as e:
        logging.error("%s", e)
        return 1

    path = write_components(components, args.output)
    logging.info("Wrote %d rows to %s", len(components), path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
