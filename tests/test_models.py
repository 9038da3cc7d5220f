"""Tests for models.py — enums and Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from texscope.models import CustomCommand, DocumentClass, DocumentConfig, Length, NestingLevel, Package


class TestNestingLevel:
    def test_ordering(self):
        assert NestingLevel.CHAPTER < NestingLevel.SECTION < NestingLevel.SUBPARAGRAPH
        assert len(NestingLevel) == 6


class TestDocumentClass:
    @pytest.mark.parametrize(
        ("cls", "level"),
        [
            (DocumentClass.BOOK, NestingLevel.CHAPTER),
            (DocumentClass.REPORT, NestingLevel.SECTION),
            (DocumentClass.ARTICLE, NestingLevel.SECTION),
        ],
    )
    def test_starting_level(self, cls, level):
        assert cls.starting_level is level


class TestCustomCommand:
    def test_alias(self):
        assert CustomCommand(name="R", body="\\mathbb{R}").render() == "\\newcommand{\\R}{\\mathbb{R}}"

    def test_with_arguments(self):
        cmd = CustomCommand(name="pair", arity=2, body="(#1, #2)")
        assert cmd.render() == "\\newcommand{\\pair}[2]{(#1, #2)}"

    def test_negative_arity(self):
        with pytest.raises(ValidationError):
            CustomCommand(name="x", arity=-1, body="y")


class TestDocumentConfig:
    def test_defaults(self):
        config = DocumentConfig()
        assert config.document_class == "article"
        assert config.title is None
        assert not config.title_page

    def test_roundtrip_json(self):
        config = DocumentConfig(
            title="T",
            packages=[Package(name="booktabs"), Package(name="geometry", option="a4paper")],
            lengths=[Length(name="parindent", value="0pt")],
        )
        restored = DocumentConfig.model_validate_json(config.model_dump_json())
        assert restored == config
