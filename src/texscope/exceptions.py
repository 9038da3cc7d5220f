"""Exception hierarchy for texscope."""

from __future__ import annotations


class TexscopeError(Exception):
    """Base class for errors raised by texscope."""


class ConfigurationError(TexscopeError, ValueError):
    """Invalid document configuration (unknown class, bad config file values)."""


class LevelError(TexscopeError):
    """A section was requested at a depth that has no sectioning command."""
