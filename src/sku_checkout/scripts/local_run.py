#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys

from sku_checkout.app.config.loader import load_checkout_config
from sku_checkout.app.models.config import DEFAULT_CHECKOUT_CONFIG
from sku_checkout.engine.canonical.models import parse_cart
from sku_checkout.engine.pipeline import price_cart
from sku_checkout.util.errors import UnknownSkuError
from sku_checkout.util.logging import get_logger, log_event

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price carts of single-character SKUs")
    parser.add_argument("carts", nargs="+", help="Cart contents, e.g. aaabbcd")
    parser.add_argument("--config", help="Path to checkout config YAML")
    parser.add_argument(
        "--receipt",
        action="store_true",
        help="Print the JSON receipt instead of the total",
    )
    args = parser.parse_args(argv)

    config = load_checkout_config(args.config) if args.config else DEFAULT_CHECKOUT_CONFIG
    for text in args.carts:
        try:
            receipt = price_cart(parse_cart(text), config)
        except UnknownSkuError as exc:
            log_event(logger, "cart_rejected", level=logging.WARNING, cart=text, error=str(exc))
            print(f"error: {exc}", file=sys.stderr)
            return 2
        if args.receipt:
            print(receipt.model_dump_json())
        else:
            print(receipt.total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
