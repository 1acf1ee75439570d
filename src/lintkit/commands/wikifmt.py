"""Command: wiki-style markdown frontmatter, link, and tag checks."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from lintkit.commands._base import LintCommand

if TYPE_CHECKING:
    from lintkit.commands._context import AppContext


@click.command(
    cls=LintCommand,
    examples="""\
  lintkit wikifmt docs/
  lintkit wikifmt wiki/ notes/ --output wikifmt.sarif
  lintkit wikifmt docs/ --format text
  lintkit -v --log-json wikifmt docs/""",
)
@click.argument("roots", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["sarif", "text"]),
    default=None,
    help="Report format (default: [output] format from config, else sarif).",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the report to a file instead of stdout.",
)
@click.pass_obj
def wikifmt(
    app: AppContext,
    roots: tuple[Path, ...],
    output_format: str | None,
    output_path: Path | None,
) -> None:
    """Check wiki-style markdown files under ROOT... and emit SARIF."""
    if not roots:
        raise click.ClickException("wikifmt requires at least one ROOT directory")

    from lintkit.services.wikifmt import WikifmtService

    svc = WikifmtService(app.settings.wikifmt)
    try:
        log = svc.run(roots)
    except OSError as exc:
        raise click.ClickException(str(exc)) from exc

    app.emit(log, output_format=output_format, output_path=output_path)
