"""Base classes for interactive prompt elements.

This module provides the core abstractions:
- InputEvent: Keyboard input event
- PromptState: Where a text prompt is in its parse/validate cycle
- ActiveElement: Protocol for interactive elements with exclusive I/O control
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from rich.text import Text

T = TypeVar("T")


@dataclass(frozen=True)
class InputEvent:
    """A keyboard input event."""

    key: str  # 'Enter', 'Escape', 'Backspace', 'Up', 'Down', 'c-a', or the character
    char: str | None = None  # Printable character, pasted text, or ctrl letter
    ctrl: bool = False


class PromptState(Enum):
    """States of the text prompt loop.

    PROMPTING -> PARSING -> VALIDATING -> DONE, with SHOW_ERROR reachable
    from PARSING and VALIDATING. The next keystroke after SHOW_ERROR goes
    back to PROMPTING.
    """

    PROMPTING = "prompting"
    PARSING = "parsing"
    VALIDATING = "validating"
    SHOW_ERROR = "show_error"
    DONE = "done"


class ActiveElement(ABC, Generic[T]):
    """An interactive element with exclusive output/input control.

    Lifecycle:
        1. on_activate() - setup
        2. get_lines() -> render
        3. handle_input() -> process key, return (done, result)
        4. get_final_lines() -> what stays on screen after completion
        5. on_deactivate() - cleanup
    """

    @abstractmethod
    def get_lines(self) -> list[Text]:
        """Return lines to render in the region."""
        ...

    @abstractmethod
    def handle_input(self, event: InputEvent) -> tuple[bool, T | None]:
        """Handle input event.

        Returns:
            (done, result) - if done=True, element completes with result
        """
        ...

    def get_final_lines(self) -> list[Text]:
        """Lines left on screen once the element has completed."""
        return self.get_lines()

    def on_activate(self) -> None:
        """Called when element becomes active."""
        pass

    def on_deactivate(self) -> None:
        """Called when element completes."""
        pass
