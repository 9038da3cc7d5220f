"""Scope handles: a closing action that fires exactly once.

Every scoped construct on :class:`~texscope.document.LatexDocument`
(sections, environments, tables, lists) returns a :class:`ScopeHandle`.
Use it as a context manager::

    with doc.section("Introduction"):
        doc.write_line("Hello.")

or keep it and call :meth:`ScopeHandle.close` yourself.
"""

from __future__ import annotations

from typing import Callable


class ScopeHandle:
    """Wraps a zero-argument closing action.

    ``close()`` is idempotent: the action runs on the first call only.
    ``on_close`` is notified after the action has run, and is how the
    document writer drops the handle from its safety-net stack.
    """

    __slots__ = ("_action", "_on_close", "_closed")

    def __init__(
        self,
        close_action: Callable[[], None],
        on_close: Callable[["ScopeHandle"], None] | None = None,
    ) -> None:
        self._action = close_action
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._action()
        finally:
            if self._on_close is not None:
                self._on_close(self)

    def __enter__(self) -> ScopeHandle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<ScopeHandle {state}>"


def open_scope(close_action: Callable[[], None]) -> ScopeHandle:
    """Return a handle bound to *close_action*."""
    return ScopeHandle(close_action)
