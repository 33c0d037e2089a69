"""Single-line text prompt element.

TextPrompt reads one line, parses it with a ValueType, runs the validator
chain and either completes or shows the error in place and starts over
with an empty buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

from rich.text import Text

from ..config import DEFAULT_CONFIG, PromptConfig
from ..errors import InputError
from ..parsing import STR, ValueType
from ..validation import ValidatorChain
from .base import ActiveElement, InputEvent, PromptState

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class LineEditor:
    """Line buffer with basic emacs-style editing keys."""

    buffer: str = ""
    cursor_pos: int = 0
    kill_buffer: str = ""

    def _insert_text(self, text: str) -> None:
        self.buffer = (
            self.buffer[: self.cursor_pos] + text + self.buffer[self.cursor_pos :]
        )
        self.cursor_pos += len(text)

    def _normalize_paste(self, text: str) -> str:
        return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", " ")

    def _delete_before_cursor(self) -> None:
        if self.cursor_pos > 0:
            self.buffer = (
                self.buffer[: self.cursor_pos - 1] + self.buffer[self.cursor_pos :]
            )
            self.cursor_pos -= 1

    def _delete_at_cursor(self) -> None:
        if self.cursor_pos < len(self.buffer):
            self.buffer = (
                self.buffer[: self.cursor_pos] + self.buffer[self.cursor_pos + 1 :]
            )

    def _delete_prev_word(self) -> None:
        if self.cursor_pos == 0:
            return
        i = self.cursor_pos
        while i > 0 and self.buffer[i - 1].isspace():
            i -= 1
        while i > 0 and not self.buffer[i - 1].isspace():
            i -= 1
        self.kill_buffer = self.buffer[i : self.cursor_pos]
        self.buffer = self.buffer[:i] + self.buffer[self.cursor_pos :]
        self.cursor_pos = i

    def clear(self) -> None:
        self.buffer = ""
        self.cursor_pos = 0

    def edit(self, event: InputEvent) -> bool:
        """Apply an editing key. Returns True if the event was consumed."""
        if event.key == "Paste" and event.char:
            self._insert_text(self._normalize_paste(event.char))
        elif event.ctrl and event.char == "a":
            self.cursor_pos = 0
        elif event.ctrl and event.char == "e":
            self.cursor_pos = len(self.buffer)
        elif event.ctrl and event.char == "b":
            if self.cursor_pos > 0:
                self.cursor_pos -= 1
        elif event.ctrl and event.char == "f":
            if self.cursor_pos < len(self.buffer):
                self.cursor_pos += 1
        elif event.ctrl and event.char == "w":
            self._delete_prev_word()
        elif event.ctrl and event.char == "k":
            self.kill_buffer = self.buffer[self.cursor_pos :]
            self.buffer = self.buffer[: self.cursor_pos]
        elif event.ctrl and event.char == "u":
            self.kill_buffer = self.buffer[: self.cursor_pos]
            self.buffer = self.buffer[self.cursor_pos :]
            self.cursor_pos = 0
        elif event.ctrl and event.char == "y":
            if self.kill_buffer:
                self._insert_text(self.kill_buffer)
        elif event.key == "Escape" or (event.ctrl and event.char == "l"):
            self.clear()
        elif event.key == "Backspace":
            self._delete_before_cursor()
        elif event.key == "Delete":
            self._delete_at_cursor()
        elif event.key == "Left":
            if self.cursor_pos > 0:
                self.cursor_pos -= 1
        elif event.key == "Right":
            if self.cursor_pos < len(self.buffer):
                self.cursor_pos += 1
        elif event.key == "Home":
            self.cursor_pos = 0
        elif event.key == "End":
            self.cursor_pos = len(self.buffer)
        elif not event.ctrl and event.char and event.char.isprintable():
            self._insert_text(event.char)
        else:
            return False
        return True

    def render_buffer(self, cursor_char: str) -> Text:
        text = Text(style="prompt.input")
        text.append(self.buffer[: self.cursor_pos])
        text.append(cursor_char, style="prompt.cursor")
        text.append(self.buffer[self.cursor_pos :])
        return text


@dataclass
class LinePrompt(ActiveElement[T]):
    """Shared parse/validate/show-error cycle for line based prompts.

    Subclasses implement _parse() and the rendering of the buffer.
    """

    prompt: str = "> "
    validators: ValidatorChain[T] = field(default_factory=ValidatorChain)
    config: PromptConfig = DEFAULT_CONFIG
    editor: LineEditor = field(default_factory=LineEditor)
    state: PromptState = PromptState.PROMPTING
    error: str | None = None
    accepted_text: str = ""

    @property
    def buffer(self) -> str:
        return self.editor.buffer

    def _parse(self, raw: str) -> T:
        raise NotImplementedError

    def _render_accepted(self, value: T) -> str:
        return self.editor.buffer.strip()

    def _show_error(self, exc: InputError) -> None:
        self.error = exc.format(self.config.parse_error_template)
        self.state = PromptState.SHOW_ERROR
        self.editor.clear()

    def _submit(self) -> tuple[bool, T | None]:
        raw = self.editor.buffer
        try:
            self.state = PromptState.PARSING
            value = self._parse(raw)
            self.state = PromptState.VALIDATING
            self.validators.validate(value)
        except InputError as exc:
            logger.debug("rejected %r: %s", raw, exc)
            self._show_error(exc)
            return (False, None)
        self.state = PromptState.DONE
        self.accepted_text = self._render_accepted(value)
        return (True, value)

    def handle_input(self, event: InputEvent) -> tuple[bool, T | None]:
        if event.key == "Enter":
            return self._submit()
        if event.ctrl and event.char == "d" and not self.editor.buffer:
            raise EOFError("input closed with Ctrl+D")
        if self.state is PromptState.SHOW_ERROR:
            self.error = None
            self.state = PromptState.PROMPTING
        self.editor.edit(event)
        return (False, None)

    def _prompt_text(self) -> Text:
        return Text.assemble((self.prompt, "prompt"))

    def _error_text(self) -> Text:
        return Text(self.error or "", style="prompt.error")


@dataclass
class TextPrompt(LinePrompt[T]):
    """Prompt for one value of a given type.

    While an error is shown the line reads ``<prompt><cursor><error>``;
    typing anything removes the error.
    """

    value_type: ValueType[Any] = STR

    def _parse(self, raw: str) -> T:
        return self.value_type.parse(raw)

    def get_lines(self) -> list[Text]:
        line = self._prompt_text()
        if self.error is not None:
            line.append(self.config.cursor_char, style="prompt.cursor")
            line.append_text(self._error_text())
        else:
            line.append_text(self.editor.render_buffer(self.config.cursor_char))
        return [line]

    def get_final_lines(self) -> list[Text]:
        line = self._prompt_text()
        line.append(self.accepted_text, style="prompt.answer")
        return [line]
