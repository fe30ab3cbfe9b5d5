from .cart import Cart, ErrorType, Item, ValidationError, make_error
from .frames import cart_to_dataframe, errors_to_dataframe

__all__ = [
    "Cart",
    "ErrorType",
    "Item",
    "ValidationError",
    "cart_to_dataframe",
    "errors_to_dataframe",
    "make_error",
]
