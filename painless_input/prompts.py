"""Blocking prompt functions.

Each function builds an element, runs it with an ElementManager in a fresh
event loop and returns once the input is valid. Parse and validation
errors are handled inside the prompt; only fatal conditions escape
(KeyboardInterrupt, EOFError, TerminalError).

These functions call asyncio.run(); from async code, await
ElementManager.run() with the element instead.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, TypeVar, Union

from .config import PromptConfig
from .elements import ArrayPrompt, ElementManager, MenuSelect, TextPrompt
from .parsing import resolve_value_type
from .validation import Validator, ValidatorChain

T = TypeVar("T")

Validators = Union[Validator[Any], Iterable[Validator[Any]], None]


def _manager(
    manager: ElementManager | None, config: PromptConfig | None
) -> tuple[ElementManager, PromptConfig]:
    """Pick the manager and the config the element runs with.

    An explicit config wins over the manager's, theme included.
    """
    if manager is None:
        manager = ElementManager(config=config)
    return manager, config or manager.config


def input(
    prompt: str,
    value_type: Any = str,
    *,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> Any:
    """Read one value of `value_type`, re-prompting until it parses.

    Example:
        age = input("Age: ", U8)
    """
    return input_with_validation(
        prompt, None, value_type, config=config, manager=manager
    )


def input_with_validation(
    prompt: str,
    validators: Validators,
    value_type: Any = str,
    *,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> Any:
    """Read one value and check it with one or more validators.

    A validator returns None to accept the value or a message to reject it.

    Example:
        small = input_with_validation(
            "Number: ",
            lambda n: "Please enter a number up to 10" if n > 10 else None,
            U8,
        )
    """
    manager, config = _manager(manager, config)
    element: TextPrompt[Any] = TextPrompt(
        prompt=prompt,
        value_type=resolve_value_type(value_type),
        validators=ValidatorChain.of(validators),
        config=config,
    )
    return manager.run_sync(element, config)


def input_array(
    prompt: str,
    value_type: Any = str,
    *,
    delimiter: str | None = None,
    item_validators: Validators = None,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> list[Any]:
    """Read a list of values typed on one line, e.g. ``1, 2, 3`` or ``1 2 3``.

    If any item fails to parse or validate, the whole line is rejected.
    """
    return input_array_with_validation(
        prompt,
        None,
        value_type,
        delimiter=delimiter,
        item_validators=item_validators,
        config=config,
        manager=manager,
    )


def input_array_with_validation(
    prompt: str,
    validators: Validators,
    value_type: Any = str,
    *,
    delimiter: str | None = None,
    item_validators: Validators = None,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> list[Any]:
    """Read a list of values; `validators` check the complete list.

    Example:
        three = input_array_with_validation("Enter 3 numbers: ", exact_length(3), int)
    """
    manager, config = _manager(manager, config)
    element: ArrayPrompt[Any] = ArrayPrompt(
        prompt=prompt,
        value_type=resolve_value_type(value_type),
        validators=ValidatorChain.of(validators),
        item_validators=ValidatorChain.of(item_validators),
        delimiter=delimiter,
        config=config,
    )
    return manager.run_sync(element, config)


def select_index(
    prompt: str,
    items: Sequence[Any],
    *,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> int:
    """Choose one item with the arrow keys; returns its index."""
    manager, config = _manager(manager, config)
    element = MenuSelect(title=prompt, options=list(items), config=config)
    return manager.run_sync(element, config)  # type: ignore[return-value]


def select(
    prompt: str,
    items: Sequence[T],
    *,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> T:
    """Choose one item with the arrow keys; returns the item."""
    return items[select_index(prompt, items, config=config, manager=manager)]


def multiselect_indices(
    prompt: str,
    items: Sequence[Any],
    *,
    validators: Validators = None,
    submit_label: str | None = None,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> list[int]:
    """Check any number of items; returns their indices in ascending order.

    `validators` receive the list of checked items, e.g. min_length(1) to
    require at least one. With `submit_label` a confirm row such as
    "✓ Done" follows the items; Enter confirms from any row.
    """
    manager, config = _manager(manager, config)
    element = MenuSelect(
        title=prompt,
        options=list(items),
        multi_select=True,
        validators=ValidatorChain.of(validators),
        submit_label=submit_label,
        config=config,
    )
    return manager.run_sync(element, config)  # type: ignore[return-value]


def multiselect(
    prompt: str,
    items: Sequence[T],
    *,
    validators: Validators = None,
    submit_label: str | None = None,
    config: PromptConfig | None = None,
    manager: ElementManager | None = None,
) -> list[T]:
    """Check any number of items; returns the checked items in list order."""
    indices = multiselect_indices(
        prompt,
        items,
        validators=validators,
        submit_label=submit_label,
        config=config,
        manager=manager,
    )
    return [items[i] for i in indices]
