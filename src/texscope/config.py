"""Document configuration loader.

Reads builder settings from a YAML file with ``${ENV_VAR}`` interpolation,
so titles and authors can come from the environment (or a ``.env`` file)::

    document_class: report
    title: Quarterly Report
    author: ${REPORT_AUTHOR}
    today: true
    title_page: true
    packages:
      - name: booktabs
      - name: geometry
        option: margin=1in
    commands:
      - {name: R, body: "\\mathbb{R}"}
    lengths:
      - {name: parindent, value: 0pt}
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import DocumentConfig

load_dotenv()

# ---------------------------------------------------------------------------
# YAML loading with ${ENV_VAR} interpolation
# ---------------------------------------------------------------------------

_ENV_RE = re.compile(r"\$\{([^}]+)\}")


def _resolve_env_vars(value: Any) -> Any:
    """Recursively resolve ``${ENV_VAR}`` references in strings."""
    if isinstance(value, str):
        def _replace(m: re.Match) -> str:
            return os.environ.get(m.group(1), "")
        return _ENV_RE.sub(_replace, value)
    if isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    return value


def load_config(config_path: str | Path) -> DocumentConfig:
    """Load a :class:`DocumentConfig` from a YAML file.

    Raises ``FileNotFoundError`` for a missing file and
    :class:`~texscope.exceptions.ConfigurationError` when the content does
    not validate.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    resolved = _resolve_env_vars(raw)
    try:
        return DocumentConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid document config {path}: {exc}") from exc
