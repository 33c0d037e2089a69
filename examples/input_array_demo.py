"""Array input: a line of numbers, then exactly three of them."""

from __future__ import annotations

from painless_input import U8, exact_length, input_array, input_array_with_validation


def main() -> None:
    arr = input_array("Enter 3 numbers: ", U8)
    print(arr)

    validated_arr = input_array_with_validation(
        "Enter 3 numbers: ",
        exact_length(3, "Please enter 3 numbers"),
        U8,
    )
    print(validated_arr)


if __name__ == "__main__":
    main()
