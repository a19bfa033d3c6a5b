"""
Logging setup and developer diagnostics.
"""

from __future__ import annotations

import logging
from typing import Any

from .models import KitRules


def configure_logging(rules: KitRules) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, rules.diagnostics.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def dev_warn(rules: KitRules, logger: logging.Logger, message: str, *args: Any) -> None:
    """Log a developer warning unless warnings are switched off."""
    if rules.diagnostics.dev_warnings:
        logger.warning(message, *args)
