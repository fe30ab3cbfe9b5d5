"""
Shared fixtures for the cart parser tests.
"""
import pytest

from identifiers import IdFormat, SequentialIdGenerator
from parsing import CartParser

FIXED_ID = "1234-5678-9101"

VALID_CSV = "Product name,Price,Quantity\nApple,1.00,2"


@pytest.fixture
def fixed_id():
    """Id generator that always returns the same id and counts its calls."""
    class FixedId:
        def __init__(self):
            self.calls = 0

        def __call__(self):
            self.calls += 1
            return FIXED_ID

    return FixedId()


@pytest.fixture
def parser(fixed_id) -> CartParser:
    return CartParser(id_generator=fixed_id)


@pytest.fixture
def sequential_ids() -> SequentialIdGenerator:
    return SequentialIdGenerator(IdFormat(prefix="T", width=3, start=1))


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""
    def _write(content: str, name: str = "cart.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
