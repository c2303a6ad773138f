"""
Configuration module for the vending machine.

Module-level constants read once at import time. Structured settings
live in ``infrastructure.settings``.
"""

import logging
import os
from typing import Final, Optional


# =============================================================================
# System Configuration
# =============================================================================

APP_NAME: Final[str] = "vending_machine"
LOGGER_NAME: Final[str] = "VENDING_MACHINE"


# =============================================================================
# Logging Configuration
# =============================================================================

LOKI_URL: Final[Optional[str]] = os.environ.get("VENDING_LOKI_URL") or None
LOG_FILE: Final[Optional[str]] = os.environ.get("VENDING_LOG_FILE") or None

_level_name = os.environ.get("VENDING_LOG_LEVEL", "DEBUG").upper()
LOG_LEVEL: Final[int] = getattr(logging, _level_name, logging.DEBUG)
