"""AppContext — shared Click context for all tool commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging at startup and owns report
emission (format selection, stdout vs. file).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lintkit.config.logging import configure_logging

if TYPE_CHECKING:
    from pathlib import Path

    from lintkit.config.settings import LintkitSettings
    from lintkit.output.sarif import SarifLog


class AppContext:
    """Settings plus output routing for one invocation."""

    def __init__(self, settings: LintkitSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(
        self,
        log: SarifLog,
        *,
        output_format: str | None = None,
        output_path: Path | None = None,
    ) -> None:
        """Write *log* as SARIF JSON or as a human summary.

        A report is a successful outcome no matter how many findings it
        holds; this never exits non-zero.
        """
        fmt = output_format or self.settings.output.format
        if fmt == "text":
            from lintkit.output.renderers import render_log

            rendered = render_log(log) + "\n"
        else:
            from lintkit.output.sarif import encode_log

            rendered = encode_log(log)

        if output_path is None:
            click.echo(rendered, nl=False)
        else:
            try:
                output_path.write_text(rendered, encoding="utf-8")
            except OSError as exc:
                raise click.ClickException(str(exc)) from exc
