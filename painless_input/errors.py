"""Exception types raised by the prompt machinery.

ParseError and ValidationError are recoverable: the prompt elements catch
them, show the message and ask again. They never reach the caller of the
public prompt functions. TerminalError is fatal and propagates.
"""

from __future__ import annotations

DEFAULT_PARSE_TEMPLATE = "Invalid input: '{raw}'; expected {type_name}"


class PainlessInputError(Exception):
    """Base class for all painless_input errors."""


class InputError(PainlessInputError):
    """Recoverable input failure; its message is displayed to the user."""

    def format(self, template: str | None = None) -> str:
        return str(self)


class ParseError(InputError):
    """Raw text could not be converted to the target type.

    Attributes:
        raw: The (trimmed) text that failed to parse
        type_name: Name of the target value type
        reason: Optional detail, e.g. "out of range"
        position: 1-based item number when parsing a list
    """

    def __init__(
        self,
        raw: str,
        type_name: str,
        reason: str | None = None,
        position: int | None = None,
    ) -> None:
        self.raw = raw
        self.type_name = type_name
        self.reason = reason
        self.position = position
        super().__init__(self.format())

    def format(self, template: str | None = None) -> str:
        """Render the message with a `{raw}`/`{type_name}` template."""
        text = (template or DEFAULT_PARSE_TEMPLATE).format(
            raw=self.raw, type_name=self.type_name
        )
        if self.reason:
            text += f" ({self.reason})"
        if self.position is not None:
            text = f"Item {self.position}: {text}"
        return text


class ValidationError(InputError):
    """A parsed value was rejected by a validator."""

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)


class TerminalError(PainlessInputError):
    """The terminal device cannot be used for interactive input."""
