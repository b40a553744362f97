"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

APP_TITLE = "Stock Tracker"

LOW_STOCK_THRESHOLD = 10
DEFAULT_HISTORY_COUNT = 10
SORT_CRITERIA: tuple[str, ...] = ("sku", "price", "value", "name")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
