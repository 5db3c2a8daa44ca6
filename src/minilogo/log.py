"""Package logger for MiniLogo."""

from __future__ import annotations

import logging

logger: logging.Logger = logging.getLogger("minilogo")
logger.addHandler(logging.StreamHandler())
# Silent unless the caller (e.g. ``minilogo --verbose``) lowers the level
logger.setLevel(logging.CRITICAL)
