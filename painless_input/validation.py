"""Validator chain and stock validators.

A validator is any callable taking the parsed value and returning None to
accept it or a message string to reject it. Predicates work too: True
accepts and False rejects with DEFAULT_REJECTION, as does an empty
message. Raising ValidationError is treated the same as returning its
message.

Usage:
    chain = ValidatorChain.of([in_range(1, 10), lambda v: None if v % 2 else "odd only"])
    chain.check(4)   # "odd only"
    chain.validate(3)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Sequence, Sized, TypeVar, Union

from .errors import ValidationError

T = TypeVar("T")

Validator = Callable[[T], Union[str, bool, None]]

DEFAULT_REJECTION = "Invalid value"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatorChain(Generic[T]):
    """Ordered validators; the first rejection wins."""

    validators: tuple[Validator[T], ...] = ()

    @classmethod
    def of(
        cls, validators: Validator[T] | Iterable[Validator[T]] | None
    ) -> ValidatorChain[T]:
        """Build a chain from None, a single callable or an iterable."""
        if validators is None:
            return cls()
        if isinstance(validators, ValidatorChain):
            return validators
        if callable(validators):
            return cls((validators,))
        return cls(tuple(validators))

    def check(self, value: T) -> str | None:
        """Return the first rejection message, or None if every validator accepts."""
        for validator in self.validators:
            try:
                message = validator(value)
            except ValidationError as exc:
                message = str(exc)
            if message is None or message is True:
                continue
            if message is False or message == "":
                message = DEFAULT_REJECTION
            elif not isinstance(message, str):
                raise TypeError(
                    f"validator {validator!r} returned {type(message).__name__}; "
                    "expected str, bool or None"
                )
            logger.debug("value %r rejected: %s", value, message)
            return message
        return None

    def validate(self, value: T) -> T:
        """Return value unchanged or raise ValidationError."""
        message = self.check(value)
        if message is not None:
            raise ValidationError(message, value)
        return value

    def __len__(self) -> int:
        return len(self.validators)


def in_range(low: Any = None, high: Any = None, message: str | None = None) -> Validator[Any]:
    """Accept values with low <= value <= high; either bound may be None."""
    if message is None:
        if low is not None and high is not None:
            message = f"Value must be between {low} and {high}"
        elif low is not None:
            message = f"Value must be at least {low}"
        else:
            message = f"Value must be at most {high}"

    def check(value: Any) -> str | None:
        if low is not None and value < low:
            return message
        if high is not None and value > high:
            return message
        return None

    return check


def min_length(count: int, message: str | None = None) -> Validator[Sized]:
    """Accept strings or sequences with at least `count` elements."""
    text = message or (
        "Select at least one item" if count == 1 else f"Enter at least {count} items"
    )

    def check(value: Sized) -> str | None:
        return text if len(value) < count else None

    return check


def max_length(count: int, message: str | None = None) -> Validator[Sized]:
    """Accept strings or sequences with at most `count` elements."""
    text = message or f"Enter at most {count} items"

    def check(value: Sized) -> str | None:
        return text if len(value) > count else None

    return check


def exact_length(count: int, message: str | None = None) -> Validator[Sized]:
    """Accept strings or sequences with exactly `count` elements."""
    text = message or f"Enter exactly {count} items"

    def check(value: Sized) -> str | None:
        return text if len(value) != count else None

    return check


def not_empty(message: str = "Input cannot be empty") -> Validator[Sized]:
    return min_length(1, message)


def one_of(choices: Sequence[Any], message: str | None = None) -> Validator[Any]:
    """Accept only values contained in `choices`."""
    text = message or "Value must be one of: " + ", ".join(str(c) for c in choices)

    def check(value: Any) -> str | None:
        return None if value in choices else text

    return check


def matches(pattern: str | re.Pattern[str], message: str | None = None) -> Validator[str]:
    """Accept strings fully matching a regular expression."""
    compiled = re.compile(pattern)
    text = message or f"Input must match {compiled.pattern}"

    def check(value: str) -> str | None:
        return None if compiled.fullmatch(value) else text

    return check
