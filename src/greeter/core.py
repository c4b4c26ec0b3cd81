"""Core functionality for greeter."""

from __future__ import annotations

from typing import Final

GREETING_PREFIX: Final[str] = "Hello, "
DEFAULT_USER: Final[str] = "Riyaz"


def greet(name: str) -> str:
    """Return a greeting for the given name.

    The name is interpolated as-is, so ``greet("")`` is just the prefix.
    Non-``str`` arguments are a type error and are reported by mypy, not at
    runtime.
    """

    return f"{GREETING_PREFIX}{name}"
