"""
Central configuration for the cart parser.

This module defines:
- The fixed cart CSV schema (header names and per-column value types).
- File reading defaults (encoding) and the upload size limit used by the UI.
- Identifier formatting for the sequential id generator.
- Logging level and log directory (overridable through the environment / .env).

All values are constants and should be imported where needed (no runtime logic here
beyond reading a couple of environment overrides).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Column value types understood by the validator.
STRING = "string"
NUMBER_NON_NEGATIVE = "number_non_negative"
INTEGER_NON_NEGATIVE = "integer_non_negative"

CART_COLUMNS = (
    ("Product name", STRING),
    ("Price", NUMBER_NON_NEGATIVE),
    ("Quantity", INTEGER_NON_NEGATIVE),
)
CART_HEADERS = tuple(name for name, _ in CART_COLUMNS)

CELL_SEPARATOR = ","
# utf-8-sig also accepts the byte order mark Excel writes into "CSV UTF-8" exports
FILE_ENCODING = "utf-8-sig"

MAX_FILE_SIZE_MB = 10

ID_PREFIX = "CI"
ID_WIDTH = 8
ID_START = 1

LOG_LEVEL = os.getenv("CART_PARSER_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("CART_PARSER_LOG_DIR", str(PROJECT_ROOT / "data" / "logs")))
LOG_FILE_NAME = "cart_parser.log"
