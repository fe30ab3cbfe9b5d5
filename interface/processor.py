"""
Upload processing for the Streamlit interface.

Bridges an uploaded file object (anything with `.name` and `.getvalue()`) to
CartParser and turns the outcome into DataFrames the page can render. Problems
the user can fix (validation errors, undecodable or oversized files) come back
as a failed result instead of an exception.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Callable, Optional, Tuple

import pandas as pd

from config import MAX_FILE_SIZE_MB
from domain import Cart, cart_to_dataframe, errors_to_dataframe
from input_readers import reader_for
from parsing import CartParser, CartValidationError

logger = logging.getLogger(__name__)

ProcessResult = Tuple[bool, Optional[Cart], Optional[pd.DataFrame], Optional[pd.DataFrame], Optional[str]]


def process_uploaded_file(
    uploaded_file,
    id_generator: Callable[[], str] | None = None,
) -> ProcessResult:
    """
    Parse an uploaded cart file.

    Returns:
        (success, cart, items_df, errors_df, error_message)
        errors_df is only set when the content failed validation.
    """
    data = uploaded_file.getvalue()
    size_mb = len(data) / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        return False, None, None, None, (
            f"File is {size_mb:.1f} MB, the limit is {MAX_FILE_SIZE_MB} MB."
        )

    suffix = Path(uploaded_file.name).suffix.lower() or ".csv"

    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / f"upload{suffix}"
        path.write_bytes(data)

        parser = CartParser(reader=reader_for(path), id_generator=id_generator)
        try:
            cart = parser.parse(path)
        except CartValidationError as e:
            return False, None, None, errors_to_dataframe(e.errors), str(e)
        except ValueError as e:
            # undecodable text or an unreadable workbook
            logger.warning("Could not read upload %s: %s", uploaded_file.name, e)
            return False, None, None, None, f"Could not read {uploaded_file.name}: {e}"

    return True, cart, cart_to_dataframe(cart), None, None
