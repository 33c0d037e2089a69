"""Menu selection element.

Allows user to select from a list of options using arrow keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from rich.text import Text

from ..config import DEFAULT_CONFIG, PromptConfig
from ..validation import ValidatorChain
from .base import ActiveElement, InputEvent

logger = logging.getLogger(__name__)


@dataclass
class MenuSelect(ActiveElement[int | list[int]]):
    """Menu selection with arrow keys.

    Navigate with j/k or up/down arrows, or jump with 1-9.
    - Single-select: Enter selects the highlighted item, returns its index.
    - Multi-select: Space toggles, Enter confirms; returns the checked
      indices in ascending order (possibly empty). `validators` run on the
      list of checked options and can keep the menu open. With
      `submit_label` a confirm row follows the options; the cursor can
      rest on it and Space there confirms too.

    The cursor clamps at both ends unless config.wrap is set.
    """

    title: str = "Select:"
    options: Sequence[Any] = field(default_factory=list)
    selected: int = 0
    multi_select: bool = False
    selected_indices: set[int] = field(default_factory=set)
    validators: ValidatorChain[list[Any]] = field(default_factory=ValidatorChain)
    submit_label: str | None = None
    config: PromptConfig = DEFAULT_CONFIG
    error: str | None = None
    _result: list[int] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.multi_select and not self.options:
            raise ValueError("select needs at least one option")
        rows = self._row_count()
        if rows:
            self.selected = min(max(self.selected, 0), rows - 1)

    def _has_submit_row(self) -> bool:
        return self.multi_select and self.submit_label is not None

    def _row_count(self) -> int:
        return len(self.options) + (1 if self._has_submit_row() else 0)

    def _on_submit_row(self) -> bool:
        return self._has_submit_row() and self.selected == len(self.options)

    def _move(self, step: int) -> None:
        count = self._row_count()
        if not count:
            return
        target = self.selected + step
        if self.config.wrap:
            self.selected = target % count
        else:
            self.selected = min(max(target, 0), count - 1)

    def _toggle(self) -> None:
        if self.selected >= len(self.options):
            return
        if self.selected in self.selected_indices:
            self.selected_indices.remove(self.selected)
        else:
            self.selected_indices.add(self.selected)

    def checked_options(self) -> list[Any]:
        return [self.options[i] for i in sorted(self.selected_indices)]

    def _confirm(self) -> tuple[bool, int | list[int] | None]:
        if not self.multi_select:
            self._result = [self.selected]
            logger.debug("selected option %d", self.selected)
            return (True, self.selected)
        message = self.validators.check(self.checked_options())
        if message is not None:
            self.error = message
            return (False, None)
        self._result = sorted(self.selected_indices)
        logger.debug("selected options %s", self._result)
        return (True, list(self._result))

    def get_lines(self) -> list[Text]:
        lines = [Text.assemble((self.title, "prompt"))]
        indent = " " * len(self.config.cursor_marker)
        for i, opt in enumerate(self.options):
            is_cursor = i == self.selected
            line = Text(self.config.cursor_marker if is_cursor else indent)
            if self.multi_select:
                if i in self.selected_indices:
                    line.append(self.config.checked_marker, style="select.checked")
                else:
                    line.append(self.config.unchecked_marker)
                line.append(" ")
            line.append(str(opt), style="select.cursor" if is_cursor else "")
            lines.append(line)
        if self._has_submit_row():
            is_cursor = self._on_submit_row()
            line = Text(self.config.cursor_marker if is_cursor else indent)
            start = len(line)
            line.append(
                f"{self.config.confirm_marker} {self.submit_label}",
                style="select.submit",
            )
            if is_cursor:
                line.stylize("underline", start)
            lines.append(line)
        if self.error is not None:
            lines.append(Text(self.error, style="prompt.error"))
        if self.config.show_hints:
            if self.multi_select:
                hint = self.config.multiselect_hint
            else:
                hint = self.config.select_hint
            lines.append(Text(hint, style="select.hint"))
        return lines

    def get_final_lines(self) -> list[Text]:
        chosen = [str(self.options[i]) for i in self._result or []]
        line = Text.assemble((self.title.rstrip(), "prompt"), " ")
        line.append(", ".join(chosen), style="prompt.answer")
        return [line]

    def handle_input(self, event: InputEvent) -> tuple[bool, int | list[int] | None]:
        if event.key == "Enter":
            return self._confirm()
        self.error = None
        if event.ctrl:
            return (False, None)
        if self.multi_select and event.char == " ":
            if self._on_submit_row():
                return self._confirm()
            self._toggle()
        elif event.char == "j" or event.key == "Down":
            self._move(1)
        elif event.char == "k" or event.key == "Up":
            self._move(-1)
        elif event.key == "Home":
            self._move(-self.selected)
        elif event.key == "End":
            self._move(self._row_count() - 1 - self.selected)
        elif event.char and event.char.isdigit() and event.char != "0":
            index = int(event.char) - 1
            if index < len(self.options):
                self.selected = index
        return (False, None)
