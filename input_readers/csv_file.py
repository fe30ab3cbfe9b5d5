"""
CSV READER
----------
Reads a cart CSV file as text with NO transformation.
Validation and parsing happen later on the returned string.
"""

from __future__ import annotations

import logging
from pathlib import Path

from config import FILE_ENCODING

logger = logging.getLogger(__name__)


def read_file(path: Path | str) -> str:
    """
    Read the whole file as UTF-8 text (a leading byte order mark is dropped).

    Args:
        path: Path to the CSV file

    Returns:
        File content as a string

    Raises:
        OSError: If the file cannot be read (FileNotFoundError, PermissionError, ...),
            propagated as-is
    """
    path = Path(path).expanduser()
    logger.debug("Reading cart file %s", path)
    return path.read_text(encoding=FILE_ENCODING)
