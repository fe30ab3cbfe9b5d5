"""
Item identifier generators.

The cart parser attaches a fresh identifier to every parsed item. Any
zero-argument callable returning a string can be used; two are provided:

- uuid_id(): random UUID4 strings (the default).
- SequentialIdGenerator: in-memory sequential ids such as "CI00000001", useful
  when ids must be predictable (tests, demo data). Nothing is persisted, so a
  new generator always starts from its configured start value.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from config import ID_PREFIX, ID_START, ID_WIDTH


def uuid_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class IdFormat:
    prefix: str = ID_PREFIX
    width: int = ID_WIDTH
    start: int = ID_START


class IdGeneratorError(RuntimeError):
    """Raised when an identifier cannot be formatted or the generator is misconfigured."""
    pass


def format_id(n: int, fmt: IdFormat = IdFormat()) -> str:
    """Format an integer as an identifier string like 'CI00000001'."""
    if n < 0:
        raise IdGeneratorError(f"Cannot format negative identifier: {n}")
    return f"{fmt.prefix}{n:0{fmt.width}d}"


class SequentialIdGenerator:
    """Callable that hands out sequential identifiers, one per call."""

    def __init__(self, fmt: IdFormat = IdFormat()):
        if not isinstance(fmt.start, int) or fmt.start < 0:
            raise IdGeneratorError(f"start must be a non-negative integer, got: {fmt.start}")
        self.fmt = fmt
        self._next = fmt.start

    def __call__(self) -> str:
        value = format_id(self._next, self.fmt)
        self._next += 1
        return value

    def peek_next(self) -> str:
        """Return the next identifier that would be handed out, without consuming it."""
        return format_id(self._next, self.fmt)

    def reset(self, start_value: int | None = None) -> None:
        """Restart the sequence (from the configured start unless another value is given)."""
        value = self.fmt.start if start_value is None else start_value
        if value < 0:
            raise IdGeneratorError(f"start_value must be non-negative, got: {value}")
        self._next = value
