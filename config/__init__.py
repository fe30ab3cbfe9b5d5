from .settings import (
    CART_COLUMNS,
    CART_HEADERS,
    CELL_SEPARATOR,
    FILE_ENCODING,
    ID_PREFIX,
    ID_START,
    ID_WIDTH,
    INTEGER_NON_NEGATIVE,
    LOG_DIR,
    LOG_FILE_NAME,
    LOG_LEVEL,
    MAX_FILE_SIZE_MB,
    NUMBER_NON_NEGATIVE,
    PROJECT_ROOT,
    STRING,
)

__all__ = [
    "CART_COLUMNS",
    "CART_HEADERS",
    "CELL_SEPARATOR",
    "FILE_ENCODING",
    "ID_PREFIX",
    "ID_START",
    "ID_WIDTH",
    "INTEGER_NON_NEGATIVE",
    "LOG_DIR",
    "LOG_FILE_NAME",
    "LOG_LEVEL",
    "MAX_FILE_SIZE_MB",
    "NUMBER_NON_NEGATIVE",
    "PROJECT_ROOT",
    "STRING",
]
