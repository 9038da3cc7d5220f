"""Sectioning depth tracking.

The tracker counts how many sections are open relative to the document's
starting level. The reported level and the emitted command saturate at
``\\subparagraph``, so arbitrarily deep nesting still produces valid markup,
while the raw counter keeps going so that every ``end_section`` undoes
exactly one ``begin_section``. Closing has no floor.
"""

from __future__ import annotations

import logging

from .exceptions import LevelError
from .models import NestingLevel

logger = logging.getLogger(__name__)

# Indexed by NestingLevel.
SECTION_COMMANDS: tuple[str, ...] = (
    "chapter",
    "section",
    "subsection",
    "subsubsection",
    "paragraph",
    "subparagraph",
)

_DEEPEST = NestingLevel.SUBPARAGRAPH


def command_for(depth: int) -> str:
    """Return the sectioning command for *depth*, reusing the deepest one past the end."""
    if depth < NestingLevel.CHAPTER:
        raise LevelError(f"No sectioning command above \\chapter (depth {depth})")
    return SECTION_COMMANDS[min(depth, _DEEPEST)]


class LevelTracker:
    """Current sectioning depth for one document."""

    def __init__(self, start: NestingLevel | int = NestingLevel.SECTION) -> None:
        self._depth = int(start)

    @property
    def depth(self) -> int:
        """Raw counter; may exceed SUBPARAGRAPH or drop below CHAPTER."""
        return self._depth

    @property
    def level(self) -> NestingLevel | int:
        """The current level, clamped at SUBPARAGRAPH.

        Below CHAPTER there is no level to report and the bare counter is
        returned instead.
        """
        if self._depth < NestingLevel.CHAPTER:
            return self._depth
        return NestingLevel(min(self._depth, _DEEPEST))

    def begin_section(self) -> str:
        cmd = command_for(self._depth)
        self._depth += 1
        return cmd

    def end_section(self) -> None:
        self._depth -= 1
        if self._depth < NestingLevel.CHAPTER:
            logger.warning("Section level underflow: more sections ended than begun (depth %d)", self._depth)
