"""Terminal glue: raw keyboard input and in-place redrawing.

Input goes through prompt_toolkit, which handles raw mode, escape sequence
parsing and platform differences. Output goes through a rich Console, whose
Control codes move the cursor back over the previous render.

Example:
    reader = RawInputReader()
    region = TerminalRegion(Console())

    reader.start()          # raw mode on, callback attached to the loop
    try:
        region.render([Text("Pick: ")])
        event = await reader.read()
    finally:
        reader.stop()       # terminal restored
"""

from __future__ import annotations

import asyncio
import io
import logging
from contextlib import ExitStack
from typing import TYPE_CHECKING

from prompt_toolkit.input import create_input
from prompt_toolkit.keys import Keys
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from ..errors import TerminalError
from .base import InputEvent

if TYPE_CHECKING:
    from prompt_toolkit.input import Input
    from prompt_toolkit.key_binding import KeyPress

logger = logging.getLogger(__name__)

_NAMED_KEYS: dict[Keys, str] = {
    Keys.ControlM: "Enter",
    Keys.ControlJ: "Enter",
    Keys.Escape: "Escape",
    Keys.ControlH: "Backspace",
    Keys.Delete: "Delete",
    Keys.Up: "Up",
    Keys.Down: "Down",
    Keys.Left: "Left",
    Keys.Right: "Right",
    Keys.Home: "Home",
    Keys.End: "End",
    Keys.ControlI: "Tab",
    Keys.BackTab: "BackTab",
}


def translate_key_press(key_press: KeyPress) -> InputEvent | None:
    """Convert a prompt_toolkit KeyPress into an InputEvent.

    Returns None for keys the elements never act on (function keys,
    mouse events, terminal responses).
    """
    key = key_press.key
    if isinstance(key, Keys):
        if key in _NAMED_KEYS:
            return InputEvent(key=_NAMED_KEYS[key])
        if key == Keys.BracketedPaste:
            return InputEvent(key="Paste", char=key_press.data)
        value = key.value
        # Ctrl+letter: "c-a" .. "c-z"
        if len(value) == 3 and value.startswith("c-") and value[2].isalpha():
            return InputEvent(key=value, char=value[2], ctrl=True)
        return None
    if len(key) == 1 and key.isprintable():
        return InputEvent(key=key, char=key)
    return None


class RawInputReader:
    """Queues key events from a prompt_toolkit Input.

    While started, the terminal is in raw mode and the input is attached to
    the running asyncio loop. A closed input stream is reported by read()
    returning None.
    """

    def __init__(self, pt_input: Input | None = None) -> None:
        self._input = pt_input
        self._owns_input = pt_input is None
        self._queue: asyncio.Queue[InputEvent | None] = asyncio.Queue()
        self._stack: ExitStack | None = None

    def start(self) -> None:
        """Enter raw mode and start listening. Must run inside an event loop."""
        if self._stack is not None:
            return
        if self._input is None:
            try:
                self._input = create_input()
            except (io.UnsupportedOperation, OSError) as exc:
                raise TerminalError(f"cannot read keys from stdin: {exc}") from exc

        stack = ExitStack()
        try:
            stack.enter_context(self._input.raw_mode())
            stack.enter_context(self._input.attach(self._on_input_ready))
        except BaseException:
            stack.close()
            raise
        self._stack = stack
        logger.debug("raw mode entered")

    def stop(self) -> None:
        """Detach and restore the terminal mode."""
        if self._stack is None:
            return
        try:
            self._stack.close()
        finally:
            self._stack = None
            if self._owns_input and self._input is not None:
                self._input.close()
                self._input = None
            logger.debug("raw mode left")

    def _on_input_ready(self) -> None:
        """Called by prompt_toolkit when input is available."""
        if self._input is None:
            return
        # Flush right away so a lone Escape is not held back by the parser
        key_presses = self._input.read_keys() + self._input.flush_keys()
        for key_press in key_presses:
            event = translate_key_press(key_press)
            if event is not None:
                self._queue.put_nowait(event)
        if self._input.closed:
            self._queue.put_nowait(None)

    async def read(self) -> InputEvent | None:
        """Wait for the next key event; None once the input is closed."""
        return await self._queue.get()


class TerminalRegion:
    """A block of lines that is redrawn in place.

    The region starts at the cursor position of the first render. Each
    further render moves back to the region's first line, erases it and
    draws the new lines.
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self._height = 0

    @property
    def height(self) -> int:
        return self._height

    def _line_height(self, line: Text) -> int:
        """Rows taken by line, counting embedded newlines and soft wraps."""
        width = max(self.console.width, 1)
        return sum(
            max(1, -(-row.cell_len // width))
            for row in line.split("\n", allow_blank=True)
        )

    def _position_cursor(self) -> Control:
        return Control(
            ControlType.CARRIAGE_RETURN,
            (ControlType.ERASE_IN_LINE, 2),
            *(
                (
                    (ControlType.CURSOR_UP, 1),
                    (ControlType.ERASE_IN_LINE, 2),
                )
                * (self._height - 1)
            ),
        )

    def render(self, lines: list[Text]) -> None:
        """Replace the region's content with lines."""
        with self.console:
            if self._height:
                self.console.control(self._position_cursor())
            self.console.print(
                Text("\n").join(lines), end="", soft_wrap=True, highlight=False
            )
        self._height = max(1, sum(self._line_height(line) for line in lines))

    def finish(self, lines: list[Text] | None = None) -> None:
        """Draw the final lines (if given) and move below the region."""
        if lines is not None:
            self.render(lines)
        self.console.print()
        self._height = 0

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)
