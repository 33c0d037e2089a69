"""Interactive prompt elements.

This module provides an abstraction for interactive terminal elements
that control output and capture input while they are active.

Usage:
    from painless_input.elements import ElementManager, MenuSelect, TextPrompt
    from painless_input.parsing import U8

    manager = ElementManager()

    # Typed input, re-prompted in place until it parses
    age = await manager.run(TextPrompt(prompt="Age: ", value_type=U8))

    # Arrow-key menu
    index = await manager.run(MenuSelect(title="Pick one:", options=["a", "b"]))
"""

from .array_prompt import ArrayPrompt
from .base import ActiveElement, InputEvent, PromptState
from .manager import ElementManager
from .menu_select import MenuSelect
from .terminal import RawInputReader, TerminalRegion, translate_key_press
from .text_prompt import LineEditor, LinePrompt, TextPrompt

__all__ = [
    # Base
    "ActiveElement",
    "InputEvent",
    "PromptState",
    # Manager
    "ElementManager",
    # Terminal
    "TerminalRegion",
    "RawInputReader",
    "translate_key_press",
    # Elements
    "LineEditor",
    "LinePrompt",
    "TextPrompt",
    "ArrayPrompt",
    "MenuSelect",
]
