"""Pytest configuration for local test runs."""

from __future__ import annotations

import asyncio
import inspect
import io
import sys
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console


def _add_repo_root_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_add_repo_root_to_path()

from painless_input.elements import ElementManager  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "asyncio: mark async tests to run in an event loop"
    )


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    test_func = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_func):
        funcargs = {
            name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
        }
        asyncio.run(test_func(**funcargs))
        return True
    return None


@pytest.fixture
def console() -> Console:
    """Terminal-like console writing plain text (no colors) to a buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system=None,
        width=80,
        highlight=False,
    )


@pytest.fixture
def pipe_input() -> Iterator[object]:
    """prompt_toolkit pipe input; tests feed keys with send_text()."""
    from prompt_toolkit.input import create_pipe_input

    with create_pipe_input() as pipe:
        yield pipe


@pytest.fixture
def manager(console: Console, pipe_input: object) -> ElementManager:
    return ElementManager(console=console, pt_input=pipe_input)  # type: ignore[arg-type]
