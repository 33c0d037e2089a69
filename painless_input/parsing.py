"""Conversion of raw terminal text into typed values.

A ValueType pairs a display name with a conversion function. The built-in
types follow a strict grammar: surrounding whitespace is trimmed, everything
else must match exactly (no underscores, no trailing garbage, bounded
integers reject out-of-range magnitudes).

Usage:
    from painless_input.parsing import U8, resolve_value_type

    U8.parse(" 42 ")        # 42
    U8.parse("300")         # raises ParseError
    resolve_value_type(float).parse("1.5e3")
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .errors import ParseError

T = TypeVar("T")

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DEFAULT_DELIMITER_RE = re.compile(r"[,\s]+")

# Errors a foreign converter may raise for bad text
_CONVERSION_ERRORS = (ValueError, TypeError, ArithmeticError, KeyError)


@dataclass(frozen=True)
class ValueType(Generic[T]):
    """A named target type for parsing.

    Attributes:
        name: Shown in parse error messages ("expected <name>")
        convert: Turns trimmed text into a value; raises ValueError on bad input
        show_reason: Include the converter's error text in the message
    """

    name: str
    convert: Callable[[str], T]
    show_reason: bool = True

    def parse(self, raw: str) -> T:
        """Parse raw text, raising ParseError on malformed input."""
        text = raw.strip()
        try:
            return self.convert(text)
        except _CONVERSION_ERRORS as exc:
            reason = str(exc) if self.show_reason else ""
            logger.debug("parse failed: %r as %s (%s)", text, self.name, exc)
            raise ParseError(text, self.name, reason or None) from exc


def _integer(name: str, bits: int | None = None, signed: bool = True) -> ValueType[int]:
    if bits is None:
        low = high = None
    elif signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    pattern = _INT_RE if signed else _UINT_RE

    def convert(text: str) -> int:
        if not pattern.fullmatch(text):
            raise ValueError("")
        value = int(text)
        if low is not None and not low <= value <= high:
            raise ValueError(f"must be between {low} and {high}")
        return value

    return ValueType(name, convert)


def _to_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError("")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError("out of range")
    return value


_TRUE = frozenset({"true", "yes", "y", "1"})
_FALSE = frozenset({"false", "no", "n", "0"})


def _to_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError("")


def _to_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError("")
    return text


INT: ValueType[int] = _integer("integer")
I8 = _integer("i8", 8)
I16 = _integer("i16", 16)
I32 = _integer("i32", 32)
I64 = _integer("i64", 64)
U8 = _integer("u8", 8, signed=False)
U16 = _integer("u16", 16, signed=False)
U32 = _integer("u32", 32, signed=False)
U64 = _integer("u64", 64, signed=False)
FLOAT: ValueType[float] = ValueType("float", _to_float)
STR: ValueType[str] = ValueType("string", lambda text: text)
BOOL: ValueType[bool] = ValueType("yes/no", _to_bool)
CHAR: ValueType[str] = ValueType("single character", _to_char)

_BUILTIN_TYPES: dict[type, ValueType[Any]] = {
    int: INT,
    float: FLOAT,
    str: STR,
    bool: BOOL,
}


def resolve_value_type(target: Any) -> ValueType[Any]:
    """Map a ValueType, a builtin type or any converter callable to a ValueType.

    Callables such as ``decimal.Decimal``, ``pathlib.Path`` or an Enum class
    are wrapped; their ValueError/TypeError/ArithmeticError/KeyError become
    ParseErrors.
    """
    if isinstance(target, ValueType):
        return target
    if isinstance(target, type) and target in _BUILTIN_TYPES:
        return _BUILTIN_TYPES[target]
    if callable(target):
        name = getattr(target, "__name__", None) or repr(target)
        return ValueType(name, target, show_reason=False)
    raise TypeError(f"cannot parse input into {target!r}")


def split_tokens(raw: str, delimiter: str | None = None) -> list[str]:
    """Split one line into trimmed, non-empty tokens.

    With no delimiter, any run of commas and/or whitespace separates tokens.
    """
    if delimiter is None:
        parts = _DEFAULT_DELIMITER_RE.split(raw)
    else:
        parts = raw.split(delimiter)
    return [part.strip() for part in parts if part.strip()]


def parse_array(
    raw: str, value_type: ValueType[T], delimiter: str | None = None
) -> list[T]:
    """Parse every token of a line; the first bad token fails the whole line."""
    values: list[T] = []
    for position, token in enumerate(split_tokens(raw, delimiter), start=1):
        try:
            values.append(value_type.parse(token))
        except ParseError as exc:
            raise ParseError(exc.raw, exc.type_name, exc.reason, position) from exc
    return values
