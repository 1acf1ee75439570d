"""Rich Console factory and theme for lintkit's human-readable output.

Consoles render into a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich leaves out color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LINTKIT_THEME = Theme(
    {
        "lk.ok": "bold green",
        "lk.error": "bold red",
        "lk.warning": "bold yellow",
        "lk.note": "cyan",
        "lk.path": "bold",
        "lk.line": "dim",
        "lk.rule": "dim",
    }
)

_LEVEL_STYLES: dict[str, str] = {
    "error": "lk.error",
    "warning": "lk.warning",
    "note": "lk.note",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=LINTKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_level(level: str | None) -> str:
    return _LEVEL_STYLES.get(level or "", "")
