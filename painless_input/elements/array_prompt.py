"""Array input element.

The whole list is typed on one line between brackets:

    Enter numbers: [1, 2, 3█]

On Enter the line is split into tokens, every token is parsed and checked
by the item validators, then the list validators run on the result. Any
failure rejects the entire line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from rich.text import Text

from ..errors import ValidationError
from ..parsing import STR, ValueType, parse_array
from ..validation import ValidatorChain
from .text_prompt import LinePrompt

T = TypeVar("T")


@dataclass
class ArrayPrompt(LinePrompt[list[T]]):
    """Prompt for a delimited list of values.

    Attributes:
        value_type: Type of every item
        item_validators: Run on each parsed item, in input order
        validators: Run on the complete list (e.g. exact_length(3))
        delimiter: Overrides config.delimiter; None splits on commas/whitespace
    """

    value_type: ValueType[Any] = STR
    item_validators: ValidatorChain[T] = field(default_factory=ValidatorChain)
    delimiter: str | None = None

    def _effective_delimiter(self) -> str | None:
        if self.delimiter is not None:
            return self.delimiter
        return self.config.delimiter

    def _parse(self, raw: str) -> list[T]:
        values = parse_array(raw, self.value_type, self._effective_delimiter())
        for position, value in enumerate(values, start=1):
            message = self.item_validators.check(value)
            if message is not None:
                raise ValidationError(f"Item {position}: {message}", value)
        return values

    def _render_accepted(self, value: list[T]) -> str:
        return ", ".join(str(item) for item in value)

    def _bracketed(self, inner: Text) -> Text:
        line = self._prompt_text()
        line.append("[")
        line.append_text(inner)
        line.append("]")
        return line

    def get_lines(self) -> list[Text]:
        if self.error is not None:
            line = self._bracketed(Text(self.config.cursor_char, style="prompt.cursor"))
            line.append(" ")
            line.append_text(self._error_text())
            return [line]
        return [self._bracketed(self.editor.render_buffer(self.config.cursor_char))]

    def get_final_lines(self) -> list[Text]:
        return [self._bracketed(Text(self.accepted_text, style="prompt.answer"))]
