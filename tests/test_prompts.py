"""End-to-end tests for the public prompt functions.

Keys are fed through a prompt_toolkit pipe input; output goes to a rich
Console writing into a StringIO.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from rich.theme import Theme

from painless_input import (
    U8,
    ElementManager,
    PromptConfig,
    input,
    input_array,
    input_array_with_validation,
    input_with_validation,
    min_length,
    multiselect,
    multiselect_indices,
    select,
    select_index,
)
from painless_input.elements import TextPrompt

DOWN = "\x1b[B"
CURSOR_UP = "\x1b[1A"


def output_of(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestScalarInput:
    """Tests for input() and input_with_validation()."""

    def test_out_of_range_then_valid(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("300\r10\r")
        assert input("Enter a number: ", U8, manager=manager) == 10
        output = output_of(console)
        assert "Invalid input: '300'; expected u8" in output
        assert "Enter a number: 10\n" in output

    def test_validator_rejects_then_accepts(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text("15\r7\r")
        result = input_with_validation(
            "Enter a number: ",
            lambda n: "Please enter a number less than 10" if n > 10 else None,
            U8,
            manager=manager,
        )
        assert result == 7

    def test_several_validators(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("3\r12\r")
        result = input_with_validation(
            "Even: ",
            [
                lambda n: "too small" if n < 10 else None,
                lambda n: "odd" if n % 2 else None,
            ],
            int,
            manager=manager,
        )
        assert result == 12
        assert "too small" in output_of(console)

    def test_string_with_editing(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text("helo\x1b[Dl\r")
        assert input("Word: ", manager=manager) == "hello"

    def test_cursor_hidden_then_restored(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("x\r")
        input("Key: ", manager=manager)
        output = output_of(console)
        assert output.index("\x1b[?25l") < output.index("\x1b[?25h")

    def test_ctrl_c_interrupts(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("12\x03")
        with pytest.raises(KeyboardInterrupt):
            input("Number: ", int, manager=manager)
        assert not manager.is_active()
        assert output_of(console).endswith("\x1b[?25h")

    def test_closed_input_raises_eof(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text("abc")
        pipe_input.close()
        with pytest.raises(EOFError):
            input("Number: ", int, manager=manager)
        assert not manager.is_active()


class TestArrayInput:
    """Tests for input_array() and input_array_with_validation()."""

    def test_partial_line_never_returned(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("1,2,abc\r1,2,3\r")
        assert input_array("Numbers: ", int, manager=manager) == [1, 2, 3]
        assert "Item 3: Invalid input: 'abc'" in output_of(console)

    def test_list_validator(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text("1 2\r4 5 6\r")
        result = input_array_with_validation(
            "Enter 3 numbers: ",
            lambda items: "Please enter 3 numbers" if len(items) != 3 else None,
            U8,
            manager=manager,
        )
        assert result == [4, 5, 6]


class TestSelection:
    """Tests for select() and multiselect()."""

    def test_select_returns_item(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text(DOWN + DOWN + "\r")
        assert select("Pick:", ["red", "green", "blue"], manager=manager) == "blue"
        assert "Pick: blue\n" in output_of(console)

    def test_select_index_clamps(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text("jjjjj\r")
        assert select_index("Pick:", ["a", "b"], manager=manager) == 1

    def test_multiselect_first_and_last(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text(" jj \r")
        assert multiselect("Pick:", ["A", "B", "C"], manager=manager) == ["A", "C"]

    def test_multiselect_require_one(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("\rj \r")
        result = multiselect_indices(
            "Pick:", ["A", "B"], validators=min_length(1), manager=manager
        )
        assert result == [1]
        assert "Select at least one item" in output_of(console)

    def test_select_from_empty_list(self, manager: ElementManager) -> None:
        with pytest.raises(ValueError):
            select("Pick:", [], manager=manager)

    def test_multiselect_submit_row(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text(" jj ")
        result = multiselect("Pick:", ["A", "B"], submit_label="Done", manager=manager)
        assert result == ["A"]
        assert "✓ Done" in output_of(console)


class TestElementManager:
    """Tests for ElementManager.run()."""

    @pytest.mark.asyncio
    async def test_async_run(self, manager: ElementManager, pipe_input) -> None:
        pipe_input.send_text("42\r")
        assert await manager.run(TextPrompt(prompt="> ", value_type=U8)) == 42

    @pytest.mark.asyncio
    async def test_nested_run_rejected(self, manager: ElementManager) -> None:
        manager._active = TextPrompt()
        with pytest.raises(RuntimeError):
            await manager.run(TextPrompt())


class TestRedraw:
    """Tests for in-place redraws of text spanning several lines."""

    def test_multiline_prompt_overwritten_on_error(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("300\r10\r")
        assert input("Age?\n> ", U8, manager=manager) == 10
        output = output_of(console)
        renders = output.count("Age?")
        assert renders > 1
        assert output.count(CURSOR_UP) == renders - 1

    def test_multiline_title_overwritten(self, manager: ElementManager, pipe_input, console: Console) -> None:
        pipe_input.send_text("j\r")
        assert select("Pick\na colour:", ["red", "blue"], manager=manager) == "blue"
        output = output_of(console)
        # title (2 rows) + 2 options + hint
        assert output.count(CURSOR_UP) == 2 * 4


class TestTheme:
    """Tests for which theme styles the output."""

    def colour_manager(self, pipe_input) -> tuple[ElementManager, Console]:
        console = Console(
            file=io.StringIO(), force_terminal=True, color_system="standard", width=80
        )
        return ElementManager(console=console, pt_input=pipe_input), console

    def test_call_config_theme_used_with_given_manager(self, pipe_input) -> None:
        manager, console = self.colour_manager(pipe_input)
        config = PromptConfig(theme=Theme({"prompt.answer": "red"}))
        pipe_input.send_text("10\r")
        assert input("N: ", int, config=config, manager=manager) == 10
        assert "\x1b[31m10\x1b[0m" in output_of(console)

    def test_manager_theme_used_without_call_config(self, pipe_input) -> None:
        manager, console = self.colour_manager(pipe_input)
        manager.config = PromptConfig(theme=Theme({"prompt.answer": "green"}))
        pipe_input.send_text("10\r")
        assert input("N: ", int, manager=manager) == 10
        assert "\x1b[32m10\x1b[0m" in output_of(console)
