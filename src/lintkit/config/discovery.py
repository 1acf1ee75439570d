"""Config file discovery and loading.

Walking up from the working directory, the first directory holding either
``lintkit.toml`` or a ``pyproject.toml`` with a ``[tool.lintkit]`` table wins.
``lintkit.toml`` beats ``pyproject.toml`` in the same directory. The
``LINTKIT_CONFIG`` env var and the ``--config`` flag bypass the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from lintkit.config.models import LintkitConfig

CONFIG_FILENAME = "lintkit.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "LINTKIT_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        # Unparseable pyproject.toml files are skipped.
        return False
    return isinstance(data.get("tool", {}).get("lintkit"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for *start* (default: cwd).

    Returns None when nothing is found, or when ``LINTKIT_CONFIG`` names a
    file that does not exist.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* and return the lintkit table.

    For ``pyproject.toml`` that is ``[tool.lintkit]``; any other file is
    lintkit's own and is returned whole.

    Raises:
        tomllib.TOMLDecodeError: the file is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("lintkit", {})
        return section if isinstance(section, dict) else {}
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> LintkitConfig:
    """Load and validate config, falling back to defaults when none is found."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return LintkitConfig()
    return LintkitConfig.model_validate(read_config_data(path))
