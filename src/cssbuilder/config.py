from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"


def configure_logging(config: CssBuilderConfig) -> None:
    """Send cssbuilder log records to stderr at the configured level."""
    logging.basicConfig(level=config.log_level.upper(), format=config.log_format)
    logging.getLogger("cssbuilder").setLevel(config.log_level.upper())
