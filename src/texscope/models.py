"""Enums and Pydantic models describing a LaTeX document's shape and metadata."""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class NestingLevel(IntEnum):
    """Structural depth, ordered from the outermost sectioning command."""
    CHAPTER = 0
    SECTION = 1
    SUBSECTION = 2
    SUBSUBSECTION = 3
    PARAGRAPH = 4
    SUBPARAGRAPH = 5


class DocumentClass(str, Enum):
    REPORT = "report"
    ARTICLE = "article"
    BOOK = "book"

    @property
    def starting_level(self) -> NestingLevel:
        """Books open at ``\\chapter``; everything else at ``\\section``."""
        if self is DocumentClass.BOOK:
            return NestingLevel.CHAPTER
        return NestingLevel.SECTION


# ---------------------------------------------------------------------------
# Preamble entries
# ---------------------------------------------------------------------------

class Package(BaseModel):
    """A ``\\usepackage`` entry."""
    name: str = Field(..., description="Package name, e.g. 'booktabs'")
    option: str | None = Field(default=None, description="Extra bracket group emitted after the name")


class CustomCommand(BaseModel):
    """A ``\\newcommand`` definition emitted right after ``\\begin{document}``."""
    name: str = Field(..., description="Command name without the leading backslash")
    arity: int = Field(default=0, ge=0, description="Number of arguments; 0 defines an alias")
    body: str = Field(..., description="Replacement text")

    def render(self) -> str:
        if self.arity == 0:
            return f"\\newcommand{{\\{self.name}}}{{{self.body}}}"
        return f"\\newcommand{{\\{self.name}}}[{self.arity}]{{{self.body}}}"


class Length(BaseModel):
    """A ``\\setlength`` directive."""
    name: str = Field(..., description="Length register without the leading backslash")
    value: str = Field(..., description="Value, e.g. '0pt' or '1em'")


# ---------------------------------------------------------------------------
# Document configuration (loaded from YAML)
# ---------------------------------------------------------------------------

class DocumentConfig(BaseModel):
    """Every option the document builder understands, in one validated object."""
    document_class: str = Field(default="article", description="article, report, or book")
    title: str | None = Field(default=None)
    author: str | None = Field(default=None)
    date: str | None = Field(default=None, description="Literal date text")
    today: bool = Field(default=False, description="Use \\today instead of a literal date")
    title_page: bool = Field(default=False, description="Emit \\maketitle after the definitions")

    packages: list[Package] = Field(default_factory=list)
    commands: list[CustomCommand] = Field(default_factory=list)
    lengths: list[Length] = Field(default_factory=list)
