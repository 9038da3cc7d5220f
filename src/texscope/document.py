"""The LaTeX document writer.

:class:`LatexDocument` is the single emitter for a document body. It owns a
:class:`~texscope.sink.TextSink` and a :class:`~texscope.levels.LevelTracker`
and pairs every "begin" with an "end"::

    doc = DocumentBuilder.article().with_title("Notes").build()
    with doc.section("Introduction"):
        doc.write_line("Hello.")
        with doc.itemize():
            doc.item("First")
            doc.new_line()
    doc.write_to_file("notes.tex")

Scoped constructs return a :class:`~texscope.scope.ScopeHandle`. Handles are
also kept on a stack so that :meth:`LatexDocument.render` can close anything
the caller forgot, innermost first. The manual ``begin_*``/``end_*`` pairs are
not tracked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from .levels import LevelTracker
from .models import NestingLevel
from .scope import ScopeHandle
from .sink import TextSink

logger = logging.getLogger(__name__)

END_DOCUMENT = "\\end{document}"

# Section commands that are followed by \hfill and a blank line.
_RUN_IN_COMMANDS = frozenset({"paragraph", "subparagraph"})


class LatexDocument:
    """Stateful LaTeX writer with tracked section depth and scoped regions."""

    def __init__(self, level: NestingLevel | int = NestingLevel.SECTION) -> None:
        self._sink = TextSink()
        self._levels = LevelTracker(level)
        self._open: list[ScopeHandle] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def level(self) -> NestingLevel | int:
        return self._levels.level

    @property
    def index(self) -> int:
        """Bookmark for the current end of the document body."""
        return self._sink.bookmark()

    @property
    def open_scopes(self) -> int:
        return len(self._open)

    # ------------------------------------------------------------------
    # Raw writing
    # ------------------------------------------------------------------

    def write(self, text: str | None) -> None:
        self._sink.append(text)

    def write_char(self, c: str, count: int = 1) -> None:
        self._sink.append_char(c, count)

    def write_line(self, text: str | None = "") -> None:
        self._sink.append_line(text)

    def write_line2(self, text: str | None) -> None:
        """Write *text* followed by a blank line."""
        self._sink.append_line(text)
        self._sink.append_line()

    def para(self, text: str) -> None:
        """Write a paragraph: the text and a paragraph break."""
        self._sink.append(text)
        self._sink.append("\n\n")

    def write_join(self, separator: str, items: Iterable[str]) -> None:
        self._sink.append(separator.join(items))

    def new_line(self) -> None:
        self._sink.append_line()

    def insert(self, index: int, text: str) -> None:
        """Insert *text* at a bookmark taken earlier with :attr:`index`."""
        self._sink.insert_at(index, text)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def command(
        self,
        name: str,
        arg: str | None = None,
        opt: str | None = None,
        arg2: str | None = None,
    ) -> None:
        r"""Emit ``\name{arg}[opt]{arg2}`` on its own line.

        ``opt`` and ``arg2`` are only written when ``arg`` is given.
        """
        self._sink.append("\\")
        self._sink.append(name)
        if arg is not None:
            self._sink.append(f"{{{arg}}}")
            if opt is not None:
                self._sink.append(f"[{opt}]")
            if arg2 is not None:
                self._sink.append(f"{{{arg2}}}")
        self.new_line()

    def command2(self, name: str, arg1: str, arg2: str) -> None:
        self.command(name, arg=arg1, arg2=arg2)

    def new_page(self) -> None:
        self.command("newpage")

    def clear_page(self) -> None:
        self.command("clearpage")

    def label(self, name: str) -> None:
        self.command("label", name)

    # ------------------------------------------------------------------
    # Scopes
    # ------------------------------------------------------------------

    def _scope(self, close_action: Callable[[], None]) -> ScopeHandle:
        handle = ScopeHandle(close_action, on_close=self._untrack)
        self._open.append(handle)
        return handle

    def _untrack(self, handle: ScopeHandle) -> None:
        for i in range(len(self._open) - 1, -1, -1):
            if self._open[i] is handle:
                del self._open[i]
                return

    def close_open_scopes(self) -> int:
        """Close every tracked scope that is still open, most recent first."""
        closed = 0
        while self._open:
            self._open[-1].close()
            closed += 1
        if closed:
            logger.debug("Force-closed %d open scope(s)", closed)
        return closed

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def begin_section(self, title: str) -> None:
        """Open a section one level below the current one.

        Must be matched by :meth:`end_section`; :meth:`section` does both.
        """
        cmd = self._levels.begin_section()
        if cmd in _RUN_IN_COMMANDS:
            self._sink.append(f"\\{cmd}{{{title}}} \\hfill")
            self.new_line()
            self.new_line()
        else:
            self.command(cmd, title)

    def end_section(self) -> None:
        self._levels.end_section()

    def section(self, title: str) -> ScopeHandle:
        """Open a section and return a handle that ends it.

        Example::

            with doc.section("Results"):
                doc.write_line("...")
        """
        self.begin_section(title)
        return self._scope(self.end_section)

    # ------------------------------------------------------------------
    # Environments
    # ------------------------------------------------------------------

    def begin_environment(self, name: str, args: str | None = None) -> None:
        self._sink.append(f"\\begin{{{name}}}")
        if args is not None:
            self._sink.append(args)
        self.new_line()

    def end_environment(self, name: str) -> None:
        last = self._sink.last_char()
        if last is not None and last != "\n":
            self.new_line()
        self.command("end", name)

    def environment(self, name: str, args: str | None = None) -> ScopeHandle:
        self.begin_environment(name, args)
        return self._scope(lambda: self.end_environment(name))

    def itemize(self) -> ScopeHandle:
        return self.environment("itemize")

    def enumerate(self) -> ScopeHandle:
        return self.environment("enumerate")

    def align(self) -> ScopeHandle:
        return self.environment("align*")

    def landscape(self) -> ScopeHandle:
        return self.environment("landscape")

    def item(self, text: str) -> None:
        """Write ``\\item text``. No newline is added."""
        self._sink.append("\\item ")
        self._sink.append(text)

    # ------------------------------------------------------------------
    # Tables (booktabs)
    # ------------------------------------------------------------------

    def begin_table(self, columns: str, layout: str | None = "h", centered: bool = True) -> None:
        if layout is None:
            self.begin_environment("table")
        else:
            self.begin_environment("table", f"[{layout}]")
        if centered:
            self.command("centering")
        self.begin_environment("tabular", f"{{{columns}}}")

    def end_table(self, caption: str | None = None, label: str | None = None) -> None:
        self.end_environment("tabular")
        if caption is not None:
            self.command("caption*", caption)
        if label is not None:
            self.label(label)
        self.end_environment("table")

    def table(
        self,
        columns: str,
        layout: str | None = "h",
        caption: str | None = None,
        label: str | None = None,
        centered: bool = True,
    ) -> ScopeHandle:
        """Open a ``table``/``tabular`` pair; caption and label are written on close."""
        self.begin_table(columns, layout, centered)
        return self._scope(lambda: self.end_table(caption, label))

    def write_row(self, *values: str) -> None:
        self._sink.append(" & ".join(values))
        self._sink.append_line(" \\\\")

    def top_rule(self) -> None:
        self.command("toprule")

    def mid_rule(self) -> None:
        self.command("midrule")

    def bottom_rule(self) -> None:
        self.command("bottomrule")

    def hline(self) -> None:
        self.command("hline")

    def row_colour(self, colour: str) -> None:
        self.command("rowcolor", colour)

    # ------------------------------------------------------------------
    # Delimiters
    # ------------------------------------------------------------------

    def begin_parens(self) -> None:
        self.command("left(")

    def end_parens(self) -> None:
        self.command("right)")

    def begin_brackets(self) -> None:
        self.command("left[")

    def end_brackets(self) -> None:
        self.command("right]")

    def parens(self) -> ScopeHandle:
        self.begin_parens()
        return self._scope(self.end_parens)

    def brackets(self) -> ScopeHandle:
        self.begin_brackets()
        return self._scope(self.end_brackets)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Close leftover scopes and return the full source with ``\\end{document}``."""
        self.close_open_scopes()
        return f"{self._sink.render()}\n{END_DOCUMENT}"

    def write_to_file(self, path: str | Path) -> Path:
        """Render and write the document. ``OSError`` propagates unchanged."""
        out = Path(path)
        out.write_text(self.render(), encoding="utf-8")
        logger.info("Wrote %s", out)
        return out

    def __str__(self) -> str:
        return self.render()
