"""Element manager: runs one active element against the terminal.

This module provides ElementManager which:
- Acquires raw mode for the duration of an element and always restores it
- Renders element.get_lines() in place after every handled key
- Turns Ctrl+C into KeyboardInterrupt and a closed input into EOFError
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from rich.console import Console

from ..config import DEFAULT_CONFIG, PromptConfig
from .base import ActiveElement
from .terminal import RawInputReader, TerminalRegion

if TYPE_CHECKING:
    from prompt_toolkit.input import Input

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ElementManager:
    """Coordinates one active element with terminal input and output.

    Usage:
        manager = ElementManager()
        value = await manager.run(TextPrompt(prompt="Age: ", value_type=U8))

        # or from synchronous code
        value = manager.run_sync(TextPrompt(prompt="Age: ", value_type=U8))

    Attributes:
        console: rich Console used for output (defaults to stdout)
        pt_input: prompt_toolkit Input to read keys from (defaults to stdin)
        config: Supplies the theme pushed onto the console while running
    """

    def __init__(
        self,
        console: Console | None = None,
        pt_input: Input | None = None,
        config: PromptConfig | None = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.pt_input = pt_input
        self.config = config or DEFAULT_CONFIG
        self._active: ActiveElement[Any] | None = None

    def is_active(self) -> bool:
        return self._active is not None

    async def run(
        self, element: ActiveElement[T], config: PromptConfig | None = None
    ) -> T:
        """Run an element until it returns a result.

        Blocks (cooperatively) for as long as the user keeps entering
        invalid input; there is no retry limit. The theme comes from config
        when given, otherwise from the manager's own config.
        """
        theme = (config or self.config).theme
        if self._active:
            raise RuntimeError("Another element is already active")

        self._active = element
        element.on_activate()

        reader = RawInputReader(self.pt_input)
        region = TerminalRegion(self.console)
        finished = False
        try:
            with self.console.use_theme(theme):
                reader.start()
                region.hide_cursor()
                region.render(element.get_lines())

                # Input loop
                while True:
                    event = await reader.read()
                    if event is None:
                        raise EOFError("input stream closed")
                    if event.ctrl and event.char == "c":
                        raise KeyboardInterrupt

                    done, result = element.handle_input(event)
                    if done:
                        region.finish(element.get_final_lines())
                        finished = True
                        return result  # type: ignore[return-value]

                    region.render(element.get_lines())
        finally:
            reader.stop()
            if not finished and region.height:
                region.finish()
            region.show_cursor()
            element.on_deactivate()
            self._active = None

    def run_sync(
        self, element: ActiveElement[T], config: PromptConfig | None = None
    ) -> T:
        """Run an element from synchronous code in a fresh event loop."""
        return asyncio.run(self.run(element, config))
