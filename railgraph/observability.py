from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("railgraph")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger."""
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {config.level!r}, falling back to INFO")
        level = logging.INFO

    logging.basicConfig(level=level, format=config.format, force=True)
    logger.debug("Logging configured", extra={"level": logging.getLevelName(level)})
