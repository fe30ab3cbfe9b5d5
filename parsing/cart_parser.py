"""
Cart CSV parsing.

CartParser turns a cart CSV file into a Cart:

    Product name,Price,Quantity
    Apple,1.00,2
    Banana,0.5,3

Pipeline (single pass, all-or-nothing):
- read the raw text through the injected reader (UTF-8 file by default)
- validate header, row shapes and cell values, collecting every error
- refuse to build anything if a single error was found
- parse each data row into an Item with a fresh id and sum price * quantity

Validation never raises; it returns the error list. `parse` raises
CartValidationError carrying that list when it is non-empty. Reader errors
(missing file, permissions, ...) propagate untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List

from config import (
    CART_COLUMNS,
    CELL_SEPARATOR,
    INTEGER_NON_NEGATIVE,
    STRING,
)
from domain.cart import Cart, ErrorType, Item, ValidationError, make_error
from fields.normalization import is_non_negative, to_float, to_int
from identifiers import uuid_id
from input_readers import Reader
from input_readers import read_file as read_text_file

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed!"


class CartValidationError(ValueError):
    """Raised by CartParser.parse when the content has validation errors."""

    def __init__(self, errors: List[ValidationError], message: str = VALIDATION_FAILED_MESSAGE):
        super().__init__(message)
        self.errors = errors

    def describe(self) -> List[str]:
        """One readable line per error, e.g. 'cell error at row 2, column 1: Expected cell ...'."""
        lines = []
        for error in self.errors:
            where = f"row {error['row']}"
            if error["column"] >= 0:
                where += f", column {error['column']}"
            lines.append(f"{error['type'].value} error at {where}: {error['message']}")
        return lines


def _split_rows(content: str) -> List[str]:
    """Split raw content into trimmed, non-blank lines (CRLF safe)."""
    return [line.strip() for line in content.split("\n") if line.strip()]


def _split_cells(line: str) -> List[str]:
    return [cell.strip() for cell in line.split(CELL_SEPARATOR)]


def _data_cells(line: str) -> List[str]:
    """Trimmed non-empty cells of a data row; empty cells are not part of the row shape."""
    return [cell for cell in _split_cells(line) if cell]


def _check_cell(cell: str, column_type: str) -> str | None:
    """Return the error message for an invalid cell, or None when the cell is fine."""
    # empty cells never reach here, so any name is acceptable
    if column_type == STRING:
        return None

    value = to_float(cell)
    if not is_non_negative(value):
        return f'Expected cell to be a positive number but received "{cell}".'
    if column_type == INTEGER_NON_NEGATIVE and not value.is_integer():
        return f'Expected cell to be a whole number but received "{cell}".'
    return None


class CartParser:
    """
    Validate and parse cart CSV files.

    Args:
        reader: callable returning the text content of a path (UTF-8 file reader by default)
        id_generator: zero-argument callable returning a fresh item id (UUID4 by default)
    """

    def __init__(
        self,
        reader: Reader | None = None,
        id_generator: Callable[[], str] | None = None,
    ):
        self.reader = reader or read_text_file
        self.id_generator = id_generator or uuid_id

    def read_file(self, path: Path | str) -> str:
        return self.reader(path)

    def validate(self, content: str) -> List[ValidationError]:
        """
        Check header names, row cell counts and cell values.

        Errors are returned in scan order: header positions first, then data rows
        top to bottom. A row with the wrong number of cells gets exactly one row
        error and its cells are not inspected. Empty cells do not count towards
        the row shape, so "Apple,,2" is a two-cell row.
        """
        errors: List[ValidationError] = []
        rows = _split_rows(content)

        header_cells = _split_cells(rows[0]) if rows else []
        for column, (expected, _) in enumerate(CART_COLUMNS):
            actual = header_cells[column] if column < len(header_cells) else None
            if actual != expected:
                errors.append(make_error(
                    ErrorType.HEADER, 0, column,
                    f'Expected header to be named "{expected}" but received {actual}.',
                ))

        for row_index, line in enumerate(rows[1:], start=1):
            cells = _data_cells(line)
            if len(cells) != len(CART_COLUMNS):
                errors.append(make_error(
                    ErrorType.ROW, row_index, -1,
                    f"Expected row to have {len(CART_COLUMNS)} cells but received {len(cells)}.",
                ))
                continue

            for column, (cell, (_, column_type)) in enumerate(zip(cells, CART_COLUMNS)):
                message = _check_cell(cell, column_type)
                if message:
                    errors.append(make_error(ErrorType.CELL, row_index, column, message))

        return errors

    def parse_line(self, line: str) -> Item:
        """Build an Item from an already validated data line."""
        name, price, quantity = _data_cells(line)
        return Item(
            id=self.id_generator(),
            name=name,
            price=to_float(price),
            quantity=to_int(quantity),
        )

    @staticmethod
    def calc_total(items: Iterable[Item]) -> float:
        return sum(item["price"] * item["quantity"] for item in items)

    def parse(self, path: Path | str) -> Cart:
        """
        Read, validate and parse a cart file.

        Raises:
            CartValidationError: content has at least one validation error
            OSError: the reader could not read the file
        """
        content = self.read_file(path)

        errors = self.validate(content)
        if errors:
            logger.warning("Cart file %s failed validation with %d error(s)", path, len(errors))
            raise CartValidationError(errors)

        items = [self.parse_line(line) for line in _split_rows(content)[1:]]
        total = self.calc_total(items)
        logger.info("Parsed %d item(s) from %s, total %s", len(items), path, total)
        return Cart(items=items, total=total)
