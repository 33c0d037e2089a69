"""painless-input: typed, validated terminal input.

Read a line, parse it into a typed value, check it with validators and
re-prompt in place until it is valid:
- Scalar input: input(), input_with_validation()
- Lists typed on one line: input_array(), input_array_with_validation()
- Arrow-key menus: select(), select_index(), multiselect(), multiselect_indices()

Usage:
    from painless_input import U8, input, input_with_validation, multiselect

    age = input("Age: ", U8)
    small = input_with_validation(
        "Number: ", lambda n: "Please enter a number up to 10" if n > 10 else None, int
    )
    toppings = multiselect("Toppings:", ["cheese", "ham", "olives"])

Features:
    - prompt_toolkit for raw-mode key input
    - rich for styled, in-place redrawing
    - Ctrl+C raises KeyboardInterrupt with the terminal restored
"""

import logging

from .config import DEFAULT_CONFIG, DEFAULT_THEME, PromptConfig
from .elements import ElementManager
from .errors import (
    InputError,
    PainlessInputError,
    ParseError,
    TerminalError,
    ValidationError,
)
from .parsing import (
    BOOL,
    CHAR,
    FLOAT,
    I8,
    I16,
    I32,
    I64,
    INT,
    STR,
    U8,
    U16,
    U32,
    U64,
    ValueType,
    resolve_value_type,
)
from .prompts import (
    input,
    input_array,
    input_array_with_validation,
    input_with_validation,
    multiselect,
    multiselect_indices,
    select,
    select_index,
)
from .validation import (
    DEFAULT_REJECTION,
    Validator,
    ValidatorChain,
    exact_length,
    in_range,
    matches,
    max_length,
    min_length,
    not_empty,
    one_of,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Prompts
    "input",
    "input_with_validation",
    "input_array",
    "input_array_with_validation",
    "select",
    "select_index",
    "multiselect",
    "multiselect_indices",
    "ElementManager",
    # Configuration
    "PromptConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_THEME",
    # Value types
    "ValueType",
    "resolve_value_type",
    "INT",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "FLOAT",
    "STR",
    "BOOL",
    "CHAR",
    # Validation
    "Validator",
    "ValidatorChain",
    "DEFAULT_REJECTION",
    "in_range",
    "min_length",
    "max_length",
    "exact_length",
    "not_empty",
    "one_of",
    "matches",
    # Errors
    "PainlessInputError",
    "InputError",
    "ParseError",
    "ValidationError",
    "TerminalError",
]
