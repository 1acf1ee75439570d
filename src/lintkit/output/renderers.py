"""Human-readable rendering of SARIF logs via Rich.

Findings are grouped by file in report order. Messages are rendered as
plain :class:`~rich.text.Text`, never as markup, because they routinely
contain ``[[wikilinks]]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from lintkit.output.console import create_console, get_output, style_for_level

if TYPE_CHECKING:
    from rich.console import Console

    from lintkit.output.sarif import Result, SarifLog


def render_log(log: SarifLog, *, no_color: bool = False, width: int | None = None) -> str:
    """Render every run of *log* as grouped findings plus a summary line."""
    console = create_console(no_color=no_color, width=width)
    results = [result for run in log.runs for result in run.results]

    if not results:
        row = Text("OK", style="lk.ok")
        row.append("  No issues found.")
        console.print(row)
        return get_output(console).rstrip("\n")

    by_uri: dict[str, list[Result]] = {}
    for result in results:
        by_uri.setdefault(result.uri or "<unknown>", []).append(result)

    for uri, uri_results in by_uri.items():
        console.print(Text(uri, style="lk.path"))
        for result in uri_results:
            _render_result(console, result)
        console.print()

    counts = {level: 0 for level in ("error", "warning", "note")}
    for result in results:
        counts[result.level or "note"] = counts.get(result.level or "note", 0) + 1
    summary = f"{counts['error']} errors, {counts['warning']} warnings"
    if counts["note"]:
        summary += f", {counts['note']} notes"
    console.print(summary)
    return get_output(console).rstrip("\n")


def _render_result(console: Console, result: Result) -> None:
    line = str(result.line) if result.line is not None else "-"
    level = result.level or "note"
    row = Text("  ")
    row.append(f"{line:>5}", style="lk.line")
    row.append("  ")
    row.append(f"{level:<7}", style=style_for_level(level))
    row.append("  ")
    row.append(result.message.text)
    row.append(f"  ({result.rule_id})", style="lk.rule")
    console.print(row)
