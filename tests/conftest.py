"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from texscope import LatexDocument, NestingLevel

SAMPLE_CONFIG = """\
document_class: report
title: Quarterly Report
author: ${TEXSCOPE_TEST_AUTHOR}
today: true
title_page: true
packages:
  - name: booktabs
  - name: geometry
    option: margin=1in
commands:
  - name: R
    body: "\\\\mathbb{R}"
  - name: norm
    arity: 1
    body: "\\\\lVert #1 \\\\rVert"
lengths:
  - name: parindent
    value: 0pt
"""


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def sample_config_path(tmp_path: Path) -> Path:
    path = tmp_path / "document.yaml"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def doc() -> LatexDocument:
    """An empty writer starting at section level."""
    return LatexDocument(NestingLevel.SECTION)
