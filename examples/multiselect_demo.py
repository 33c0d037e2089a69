"""Multiple choice; at least one option must be checked."""

from __future__ import annotations

from painless_input import min_length, multiselect

OPTIONS = [f"Option {i}" for i in range(1, 11)]


def main() -> None:
    selected = multiselect(
        "Select options: ", OPTIONS, validators=min_length(1), submit_label="Done"
    )
    print(f"You selected: {selected}")


if __name__ == "__main__":
    main()
