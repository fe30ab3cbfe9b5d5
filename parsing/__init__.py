from .cart_parser import VALIDATION_FAILED_MESSAGE, CartParser, CartValidationError

__all__ = ["VALIDATION_FAILED_MESSAGE", "CartParser", "CartValidationError"]
