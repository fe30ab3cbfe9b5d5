"""
Cart schema definitions.

These TypedDicts are the in-memory structures produced by the cart parser.
Being plain dicts, parsed items and carts compare equal to dict literals and
serialize to JSON without conversion.

- Item: one parsed CSV data row plus its generated identifier.
- Cart: the ordered items and their summed price * quantity.
- ValidationError: one problem found while validating raw CSV content.
"""

from __future__ import annotations

from enum import Enum
from typing import List, TypedDict


class ErrorType(str, Enum):
    HEADER = "header"
    ROW = "row"
    CELL = "cell"


class Item(TypedDict):
    id: str
    name: str
    price: float
    quantity: int


class Cart(TypedDict):
    items: List[Item]
    total: float


class ValidationError(TypedDict):
    type: ErrorType
    row: int
    column: int
    message: str


def make_error(error_type: ErrorType, row: int, column: int, message: str) -> ValidationError:
    """Build a ValidationError record (column is -1 when the error is not cell-specific)."""
    return ValidationError(type=error_type, row=row, column=column, message=message)
