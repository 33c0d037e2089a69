"""Tests for ArrayPrompt in painless_input/elements/array_prompt.py."""

from __future__ import annotations

from painless_input.config import PromptConfig
from painless_input.elements.array_prompt import ArrayPrompt
from painless_input.elements.base import InputEvent, PromptState
from painless_input.parsing import INT, U8
from painless_input.validation import ValidatorChain, exact_length, in_range

ENTER = InputEvent(key="Enter")
CONFIG = PromptConfig(cursor_char="_")


def submit(element: ArrayPrompt, text: str) -> tuple[bool, object]:
    for ch in text:
        element.handle_input(InputEvent(key=ch, char=ch))
    return element.handle_input(ENTER)


class TestArrayPrompt:
    """Tests for whole-line parsing and validation."""

    def test_comma_separated(self) -> None:
        ap = ArrayPrompt(value_type=INT)
        assert submit(ap, "1, 2, 3") == (True, [1, 2, 3])

    def test_whitespace_separated(self) -> None:
        ap = ArrayPrompt(value_type=INT)
        assert submit(ap, "4 5  6") == (True, [4, 5, 6])

    def test_bad_token_rejects_whole_line(self) -> None:
        ap = ArrayPrompt(value_type=INT)
        assert submit(ap, "1,2,abc") == (False, None)
        assert ap.state is PromptState.SHOW_ERROR
        assert ap.buffer == ""
        assert ap.error == "Item 3: Invalid input: 'abc'; expected integer"

        assert submit(ap, "1,2") == (True, [1, 2])

    def test_item_validators(self) -> None:
        ap = ArrayPrompt(
            value_type=U8, item_validators=ValidatorChain.of(in_range(1, 5))
        )
        assert submit(ap, "1 9 2") == (False, None)
        assert ap.error == "Item 2: Value must be between 1 and 5"
        assert submit(ap, "1 2") == (True, [1, 2])

    def test_list_validators(self) -> None:
        ap = ArrayPrompt(
            value_type=U8,
            validators=ValidatorChain.of(exact_length(3, "Please enter 3 numbers")),
        )
        assert submit(ap, "1 2") == (False, None)
        assert ap.error == "Please enter 3 numbers"
        assert submit(ap, "1 2 3") == (True, [1, 2, 3])

    def test_empty_line_gives_empty_list(self) -> None:
        ap = ArrayPrompt(value_type=INT)
        assert submit(ap, "") == (True, [])

    def test_explicit_delimiter(self) -> None:
        ap = ArrayPrompt(delimiter=";")
        assert submit(ap, "New York; Paris") == (True, ["New York", "Paris"])

    def test_config_delimiter(self) -> None:
        ap = ArrayPrompt(config=PromptConfig(delimiter="|"))
        assert submit(ap, "a b|c") == (True, ["a b", "c"])

    def test_rendering(self) -> None:
        ap = ArrayPrompt(prompt="Numbers: ", value_type=INT, config=CONFIG)
        for ch in "1,2":
            ap.handle_input(InputEvent(key=ch, char=ch))
        assert ap.get_lines()[0].plain == "Numbers: [1,2_]"

    def test_error_rendering(self) -> None:
        ap = ArrayPrompt(prompt="Numbers: ", value_type=INT, config=CONFIG)
        submit(ap, "x")
        assert ap.get_lines()[0].plain == (
            "Numbers: [_] Item 1: Invalid input: 'x'; expected integer"
        )

    def test_final_rendering_is_normalized(self) -> None:
        ap = ArrayPrompt(prompt="Numbers: ", value_type=INT, config=CONFIG)
        submit(ap, " 1   2,3 ")
        assert ap.get_final_lines()[0].plain == "Numbers: [1, 2, 3]"

    def test_empty_item_rejection_names_position(self) -> None:
        ap = ArrayPrompt(
            value_type=INT,
            item_validators=ValidatorChain.of(lambda n: "" if n < 0 else None),
            config=CONFIG,
        )
        assert submit(ap, "1 -2") == (False, None)
        assert ap.error == "Item 2: Invalid value"
        assert ap.get_lines()[0].plain == "> [_] Item 2: Invalid value"
