from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from sku_checkout.app.models.config import CheckoutConfig
from sku_checkout.util.logging import get_logger, log_event

SUPPORTED_SCHEMA_VERSIONS = {1}

logger = get_logger(__name__)


def load_checkout_config(path: str | Path) -> CheckoutConfig:
    data: Dict[str, Any]
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    config = CheckoutConfig.model_validate(data)
    if config.schema_version not in SUPPORTED_SCHEMA_VERSIONS:
        raise ValueError(f"Unsupported schema_version {config.schema_version}")
    log_event(
        logger,
        "config_loaded",
        path=str(path),
        skus=sorted(config.catalog.unit_prices),
        promotions=len(config.promotions),
    )
    return config
