"""Prompt configuration.

All knobs live on one frozen dataclass. Calls that receive no config use
DEFAULT_CONFIG; derive variants with ``DEFAULT_CONFIG.replace(...)``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from rich.theme import Theme

from .errors import DEFAULT_PARSE_TEMPLATE

DEFAULT_THEME = Theme(
    {
        "prompt": "bold",
        "prompt.input": "",
        "prompt.cursor": "",
        "prompt.error": "bold white on red",
        "prompt.answer": "cyan",
        "select.cursor": "bold underline",
        "select.checked": "green",
        "select.hint": "dim",
        "select.submit": "bold",
    }
)


@dataclass(frozen=True)
class PromptConfig:
    """Appearance and behaviour shared by all prompt elements.

    Attributes:
        theme: rich Theme providing the style names used by the elements
        cursor_char: Glyph drawn at the edit position (real cursor is hidden)
        cursor_marker: Prefix of the highlighted selection row
        checked_marker: Multiselect marker for a checked row
        unchecked_marker: Multiselect marker for an unchecked row
        show_hints: Show the key help line under selection lists
        select_hint: Help line under a single-select list
        multiselect_hint: Help line under a multiselect list
        confirm_marker: Prefix of the multiselect confirm row
        wrap: Selection cursor wraps around instead of clamping at the ends
        parse_error_template: Format with {raw} and {type_name}
        delimiter: Array separator; None splits on commas and/or whitespace
    """

    theme: Theme = field(default=DEFAULT_THEME, compare=False)
    cursor_char: str = "█"
    cursor_marker: str = "→ "
    checked_marker: str = "☑"
    unchecked_marker: str = "☐"
    show_hints: bool = True
    select_hint: str = "[↑/↓] move  [Enter] select"
    multiselect_hint: str = "[↑/↓] move  [Space] toggle  [Enter] confirm"
    confirm_marker: str = "✓"
    wrap: bool = False
    parse_error_template: str = DEFAULT_PARSE_TEMPLATE
    delimiter: str | None = None

    def __post_init__(self) -> None:
        if len(self.checked_marker) != len(self.unchecked_marker):
            raise ValueError("checked_marker and unchecked_marker must be the same width")
        if self.delimiter == "":
            raise ValueError("delimiter must not be empty")

    def replace(self, **changes: Any) -> PromptConfig:
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = PromptConfig()
