"""Small string helpers for inline LaTeX."""

from __future__ import annotations

from typing import Any


def ref(label: str) -> str:
    r"""Return ``\ref{label}``."""
    return f"\\ref{{{label}}}"


def math(text: str) -> str:
    """Wrap *text* in inline math delimiters."""
    return f"${text}$"


def tex(value: Any, fmt: str | None = None) -> str:
    """Render *value* as inline math, optionally through a format spec.

    >>> tex(3)
    '$3$'
    >>> tex(0.5, ".3f")
    '$0.500$'
    """
    if fmt is None:
        return math(str(value))
    return math(format(value, fmt))
