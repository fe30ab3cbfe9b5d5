from .normalization import is_non_negative, to_float, to_int

__all__ = ["is_non_negative", "to_float", "to_int"]
