from __future__ import annotations

from pathlib import Path
from typing import Callable

from .csv_file import read_file
from .excel import EXCEL_SUFFIXES, read_excel_as_text

Reader = Callable[[Path | str], str]


def reader_for(path: Path | str) -> Reader:
    """Pick the content reader for a file based on its suffix (CSV is the default)."""
    if Path(path).suffix.lower() in EXCEL_SUFFIXES:
        return read_excel_as_text
    return read_file


__all__ = ["EXCEL_SUFFIXES", "Reader", "read_excel_as_text", "read_file", "reader_for"]
