"""Fluent document metadata builder.

Collects the document class, title block, packages, lengths and custom
commands, then :meth:`DocumentBuilder.build` emits the preamble into a fresh
:class:`~texscope.document.LatexDocument` in a fixed order:

1. ``\\documentclass``
2. ``\\usepackage`` for each package, in insertion order
3. ``\\setlength`` for each length
4. a blank line, then ``\\title`` / ``\\author`` / ``\\date`` (each only if set)
5. ``\\begin{document}``
6. ``\\newcommand`` for each custom command
7. ``\\maketitle`` when a title page was requested, then a blank line

Custom commands are defined inside the document environment so they are
available to the first line of body content.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from .document import LatexDocument
from .exceptions import ConfigurationError
from .models import CustomCommand, DocumentClass, DocumentConfig, Length, Package

logger = logging.getLogger(__name__)

TODAY = "\\today"


def long_date(value: date | datetime) -> str:
    """Format *value* as a long calendar date, e.g. ``Monday, October 19, 2026``."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


class DocumentBuilder:
    """Mutable, chainable configuration for a new :class:`LatexDocument`."""

    def __init__(self) -> None:
        self.document_class: DocumentClass | str = DocumentClass.ARTICLE
        self.title: str | None = None
        self.author: str | None = None
        self.date: str | None = None
        self.title_page = False
        self.packages: list[Package] = []
        self.commands: list[CustomCommand] = []
        self.lengths: list[Length] = []

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> DocumentBuilder:
        return cls()

    @classmethod
    def article(cls) -> DocumentBuilder:
        return cls().with_class(DocumentClass.ARTICLE)

    @classmethod
    def report(cls) -> DocumentBuilder:
        return cls().with_class(DocumentClass.REPORT)

    @classmethod
    def book(cls) -> DocumentBuilder:
        return cls().with_class(DocumentClass.BOOK)

    @classmethod
    def from_config(cls, config: DocumentConfig) -> DocumentBuilder:
        """Seed a builder from a validated :class:`DocumentConfig`."""
        builder = cls().with_class(config.document_class)
        builder.with_title(config.title).with_author(config.author)
        if config.today:
            builder.with_todays_date()
        elif config.date is not None:
            builder.with_date(config.date)
        builder.with_title_page(config.title_page)
        builder.packages.extend(p.model_copy() for p in config.packages)
        builder.commands.extend(c.model_copy() for c in config.commands)
        builder.lengths.extend(length.model_copy() for length in config.lengths)
        return builder

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def with_class(self, document_class: DocumentClass | str) -> DocumentBuilder:
        """Set the document class. Validated when :meth:`build` runs."""
        self.document_class = document_class
        return self

    def with_title(self, title: str | None) -> DocumentBuilder:
        self.title = title
        return self

    def with_author(self, author: str | None) -> DocumentBuilder:
        self.author = author
        return self

    def with_date(self, value: str | date | datetime) -> DocumentBuilder:
        if isinstance(value, (date, datetime)):
            value = long_date(value)
        self.date = value
        return self

    def with_todays_date(self) -> DocumentBuilder:
        return self.with_date(TODAY)

    def with_title_page(self, ok: bool | None = True) -> DocumentBuilder:
        self.title_page = bool(ok)
        return self

    def with_package(self, name: str, option: str | None = None) -> DocumentBuilder:
        """Use the given package, e.g. ``siunitx``."""
        self.packages.append(Package(name=name, option=option))
        return self

    def with_packages(self, *names: str) -> DocumentBuilder:
        for name in names:
            self.with_package(name)
        return self

    def with_command(self, name: str, arity: int, body: str) -> DocumentBuilder:
        try:
            self.commands.append(CustomCommand(name=name, arity=arity, body=body))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid command \\{name}: {exc}") from exc
        return self

    def with_alias(self, name: str, body: str) -> DocumentBuilder:
        """Define a command that takes no arguments."""
        return self.with_command(name, 0, body)

    def with_length(self, name: str, value: str) -> DocumentBuilder:
        self.lengths.append(Length(name=name, value=value))
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def _resolve_class(self) -> DocumentClass:
        value = self.document_class
        if isinstance(value, str):
            value = value.lower()
        try:
            return DocumentClass(value)
        except ValueError:
            choices = ", ".join(c.value for c in DocumentClass)
            raise ConfigurationError(
                f"Unknown document class {self.document_class!r}. Choose from: {choices}"
            ) from None

    def build(self) -> LatexDocument:
        doc_class = self._resolve_class()
        doc = LatexDocument(doc_class.starting_level)

        doc.command("documentclass", doc_class.value)
        for package in self.packages:
            doc.command("usepackage", package.name, package.option)
        for length in self.lengths:
            doc.command2("setlength", f"\\{length.name}", length.value)

        doc.new_line()
        if self.title is not None:
            doc.command("title", self.title)
        if self.author is not None:
            doc.command("author", self.author)
        if self.date is not None:
            doc.command("date", self.date)
        doc.begin_environment("document")

        for cmd in self.commands:
            doc.write_line(cmd.render())

        if self.title_page:
            doc.command("maketitle")

        doc.new_line()
        logger.debug(
            "Built %s document: %d package(s), %d command(s), %d length(s)",
            doc_class.value,
            len(self.packages),
            len(self.commands),
            len(self.lengths),
        )
        return doc

    def __str__(self) -> str:
        cls = self.document_class.value if isinstance(self.document_class, DocumentClass) else self.document_class
        return f"Latex {cls} - {self.title}"
