"""Shared pytest fixtures and test helpers for lintkit tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

WriteDoc = Callable[..., Path]


def frontmatter_doc(
    *,
    title: str | None = "A Note",
    date: str | None = "2024-05-01",
    tags: list[str] | None = None,
    body: str = "Body text.\n",
) -> str:
    """Render a markdown document with a well-formed frontmatter block."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if date is not None:
        lines.append(f"date: {date}")
    if tags is not None:
        lines.append("tags:")
        lines.extend(f"  - {tag}" for tag in tags)
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def fm_doc() -> Callable[..., str]:
    """Provide :func:`frontmatter_doc` to tests without importing conftest."""
    return frontmatter_doc


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def wiki_root(tmp_path: Path) -> Path:
    """Empty directory used as the single scan root."""
    root = tmp_path / "wiki"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(wiki_root: Path) -> WriteDoc:
    """Write a file under ``wiki_root`` and return its path.

    Usage::

        write_doc("notes/a.md", "---\\ntitle: A\\n---\\n")
    """

    def _write(rel_path: str, content: str) -> Path:
        path = wiki_root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a temp directory with no config env var set.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so config
    discovery never walks into the developer's own ``lintkit.toml``.
    """
    monkeypatch.delenv("LINTKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root-logger changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lintkit_logger = logging.getLogger("lintkit")
    lintkit_level = lintkit_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lintkit_logger.setLevel(lintkit_level)
