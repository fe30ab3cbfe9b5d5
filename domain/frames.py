"""
DataFrame views of parse results for display and export.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from .cart import Cart, ValidationError

ITEM_COLUMNS = ["ID", "Product name", "Price", "Quantity", "Subtotal"]
ERROR_COLUMNS = ["Type", "Row", "Column", "Message"]


def cart_to_dataframe(cart: Cart) -> pd.DataFrame:
    """One row per item, in file order, with a computed Subtotal column."""
    rows = [
        {
            "ID": item["id"],
            "Product name": item["name"],
            "Price": item["price"],
            "Quantity": item["quantity"],
            "Subtotal": item["price"] * item["quantity"],
        }
        for item in cart["items"]
    ]
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def errors_to_dataframe(errors: List[ValidationError]) -> pd.DataFrame:
    rows = [
        {
            "Type": error["type"].value,
            "Row": error["row"],
            # -1 marks errors that concern a whole row or header
            "Column": error["column"] if error["column"] >= 0 else None,
            "Message": error["message"],
        }
        for error in errors
    ]
    df = pd.DataFrame(rows, columns=ERROR_COLUMNS)
    df["Column"] = df["Column"].astype("Int64")
    return df
