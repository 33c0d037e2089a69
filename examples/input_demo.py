"""Scalar input: parse into u8, then the same with a validator."""

from __future__ import annotations

from painless_input import U8, input, input_with_validation


def main() -> None:
    num = input("Enter a number: ", U8)
    print(num)

    validated_num = input_with_validation(
        "Enter a number: ",
        lambda n: "Please enter a number less than 10" if n > 10 else None,
        U8,
    )
    print(validated_num)


if __name__ == "__main__":
    main()
