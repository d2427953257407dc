"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import DiscountRate

PREFIX = "STOREFRONT_"


@dataclass(frozen=True)
class Settings:
    database: Path
    fixed_date_discount_rate: DiscountRate
    weekly_discount_rate: DiscountRate
    host: str
    port: int
    log_level: str

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return env.get(PREFIX + name, default).strip()

        port = get("PORT", "8080")
        if not port.isdigit() or not 0 < int(port) < 65536:
            raise ValidationError(f"Invalid {PREFIX}PORT: {port!r}")

        log_level = get("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValidationError(f"Invalid {PREFIX}LOG_LEVEL: {log_level!r}")

        return Settings(
            database=Path(get("DATABASE", "data/products.db")),
            fixed_date_discount_rate=DiscountRate.of(get("FIXED_DATE_DISCOUNT_RATE", "0.10")),
            weekly_discount_rate=DiscountRate.of(get("WEEKLY_DISCOUNT_RATE", "0.05")),
            host=get("HOST", "127.0.0.1"),
            port=int(port),
            log_level=log_level,
        )
