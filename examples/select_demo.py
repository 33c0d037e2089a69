"""Single choice with the arrow keys."""

from __future__ import annotations

from painless_input import select_index

OPTIONS = [f"Option {i}" for i in range(1, 11)]


def main() -> None:
    selected = select_index("Select an option: ", OPTIONS)
    print(f"You selected: {selected}")


if __name__ == "__main__":
    main()
