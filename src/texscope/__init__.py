"""Fluent LaTeX source writer with tracked section levels and scoped environments."""

from .builder import DocumentBuilder, long_date
from .config import load_config
from .document import LatexDocument
from .exceptions import ConfigurationError, LevelError, TexscopeError
from .formatting import math, ref, tex
from .levels import SECTION_COMMANDS, LevelTracker, command_for
from .models import CustomCommand, DocumentClass, DocumentConfig, Length, NestingLevel, Package
from .scope import ScopeHandle, open_scope
from .sink import TextSink

__all__ = [
    "ConfigurationError",
    "CustomCommand",
    "DocumentBuilder",
    "DocumentClass",
    "DocumentConfig",
    "LatexDocument",
    "Length",
    "LevelError",
    "LevelTracker",
    "NestingLevel",
    "Package",
    "SECTION_COMMANDS",
    "ScopeHandle",
    "TextSink",
    "TexscopeError",
    "command_for",
    "load_config",
    "long_date",
    "math",
    "open_scope",
    "ref",
    "tex",
]
