"""Tests for levels.py."""

from __future__ import annotations

import logging

import pytest

from texscope.exceptions import LevelError
from texscope.levels import SECTION_COMMANDS, LevelTracker, command_for
from texscope.models import NestingLevel


class TestCommandFor:
    def test_table_matches_levels(self):
        assert len(SECTION_COMMANDS) == len(NestingLevel)
        assert command_for(NestingLevel.CHAPTER) == "chapter"
        assert command_for(NestingLevel.SUBSUBSECTION) == "subsubsection"
        assert command_for(NestingLevel.SUBPARAGRAPH) == "subparagraph"

    def test_saturates_past_deepest(self):
        assert command_for(6) == "subparagraph"
        assert command_for(42) == "subparagraph"

    def test_below_chapter_raises(self):
        with pytest.raises(LevelError):
            command_for(-1)


class TestLevelTracker:
    def test_begin_returns_command_then_descends(self):
        tracker = LevelTracker(NestingLevel.SECTION)
        assert tracker.begin_section() == "section"
        assert tracker.level is NestingLevel.SUBSECTION
        assert tracker.begin_section() == "subsection"

    def test_book_starts_at_chapter(self):
        tracker = LevelTracker(NestingLevel.CHAPTER)
        assert tracker.begin_section() == "chapter"

    def test_deep_nesting_clamps(self):
        tracker = LevelTracker(NestingLevel.SECTION)
        commands = [tracker.begin_section() for _ in range(10)]
        assert commands[:5] == ["section", "subsection", "subsubsection", "paragraph", "subparagraph"]
        assert commands[5:] == ["subparagraph"] * 5
        assert tracker.level is NestingLevel.SUBPARAGRAPH

    @pytest.mark.parametrize("depth", [1, 3, 5, 10])
    def test_balanced_returns_to_start(self, depth):
        tracker = LevelTracker(NestingLevel.SECTION)
        for _ in range(depth):
            tracker.begin_section()
        for _ in range(depth):
            tracker.end_section()
        assert tracker.level is NestingLevel.SECTION
        assert tracker.depth == NestingLevel.SECTION

    def test_interleaved_balanced(self):
        tracker = LevelTracker(NestingLevel.CHAPTER)
        tracker.begin_section()
        tracker.begin_section()
        tracker.end_section()
        tracker.begin_section()
        tracker.end_section()
        tracker.end_section()
        assert tracker.level is NestingLevel.CHAPTER

    def test_underflow_is_bare_counter(self, caplog):
        tracker = LevelTracker(NestingLevel.CHAPTER)
        with caplog.at_level(logging.WARNING, logger="texscope.levels"):
            tracker.end_section()
        assert tracker.level == -1
        assert not isinstance(tracker.level, NestingLevel)
        assert "underflow" in caplog.text

    def test_begin_after_underflow_raises(self):
        tracker = LevelTracker(NestingLevel.CHAPTER)
        tracker.end_section()
        with pytest.raises(LevelError):
            tracker.begin_section()
