#!/usr/bin/env python3
"""
Package configuration and constants.
Centralizes names, logging format and encoding defaults.
"""

import logging
from typing import Dict

# ─── Version ───────────────────────────────────────────────
APP_NAME = "xmlutil"
APP_VERSION = "1.0.0"

# ─── Logging ───────────────────────────────────────────────
LOGGER_NAME = "xmlutil"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL = logging.INFO

# ─── Parsing ───────────────────────────────────────────────
DEFAULT_ENCODING = "utf-8"

# ─── Failure Metadata ─────────────────────────────────────
# Format: failure reason name -> short description
FAILURE_META: Dict[str, str] = {
    "PARSE_ERROR": "Malformed XML",
    "ENCODING_ERROR": "Unsupported or undecodable encoding",
    "TRANSFORM_ERROR": "Cannot serialize node",
    "IO_ERROR": "Cannot read input",
}
