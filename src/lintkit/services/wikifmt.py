"""WikifmtService — wiki-style markdown formatting checks.

Three checks over one loaded corpus: frontmatter (per document), tag
hygiene (whole corpus), and link resolution (per document, against an index
of every document). Findings are emitted in that order, documents in load
order; callers may rely on the ordering.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from lintkit import __version__
from lintkit.domain.frontmatter import is_valid_date
from lintkit.domain.links import LinkKind, link_reference
from lintkit.domain.resolver import Index, build_index, resolve_markdown_link, resolve_wikilink
from lintkit.domain.tags import group_tags
from lintkit.infrastructure.filesystem import load_documents
from lintkit.output.sarif import (
    LEVEL_ERROR,
    LEVEL_NOTE,
    LEVEL_WARNING,
    Result,
    SarifLog,
    new_log,
    new_result,
    new_run,
)

if TYPE_CHECKING:
    from lintkit.config.models import WikifmtConfig
    from lintkit.domain.document import Document

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Rule identifiers
# ---------------------------------------------------------------------------

RULE_FRONTMATTER_YAML = "wiki-frontmatter-yaml"
RULE_FRONTMATTER_REQUIRED = "wiki-frontmatter-required"
RULE_DATE_FORMAT = "wiki-date-format"
RULE_LINK_BROKEN = "wiki-link-broken"
RULE_TAG_ORPHAN = "wiki-tag-orphan"
RULE_TAG_CASE_VARIANT = "wiki-tag-case-variant"

_RULE_LEVELS: dict[str, str] = {
    RULE_FRONTMATTER_YAML: LEVEL_ERROR,
    RULE_FRONTMATTER_REQUIRED: LEVEL_ERROR,
    RULE_DATE_FORMAT: LEVEL_ERROR,
    RULE_LINK_BROKEN: LEVEL_ERROR,
    RULE_TAG_ORPHAN: LEVEL_WARNING,
    RULE_TAG_CASE_VARIANT: LEVEL_WARNING,
}

REQUIRED_KEYS = ("title", "date", "tags")


def level_for_rule(rule_id: str) -> str:
    return _RULE_LEVELS.get(rule_id, LEVEL_NOTE)


def _finding(rule_id: str, message: str, path: str, line: int) -> Result:
    return new_result(rule_id, level_for_rule(rule_id), message, path, line)


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_frontmatter(doc: Document) -> list[Result]:
    """Report grammar errors, missing required keys, and bad dates.

    A malformed block stops here; only a *missing* block still gets the
    required-key findings.
    """
    results: list[Result] = []
    parsed = doc.frontmatter

    for error in parsed.errors:
        message = f"invalid frontmatter YAML: {error.message}"
        results.append(_finding(RULE_FRONTMATTER_YAML, message, doc.path, error.line))
    if not parsed.ok and not parsed.missing:
        return results

    fm = parsed.frontmatter
    present = {"title": fm.title.present, "date": fm.date.present, "tags": fm.tags.present}
    for key in REQUIRED_KEYS:
        if not present[key]:
            message = f"missing required frontmatter key: {key}"
            results.append(_finding(RULE_FRONTMATTER_REQUIRED, message, doc.path, 1))
        elif key == "date" and not is_valid_date(fm.date.value):
            message = f'date must be YYYY-MM-DD, got "{fm.date.value}"'
            results.append(_finding(RULE_DATE_FORMAT, message, doc.path, fm.date.line))

    return results


def check_tags(documents: Iterable[Document]) -> list[Result]:
    """Report single-use tags and tags spelled with inconsistent casing."""
    occurrences = (occ for doc in documents for occ in doc.tags)
    results: list[Result] = []
    for group in group_tags(occurrences):
        if group.is_orphan:
            occ = group.occurrences[0]
            message = f'tag "{occ.raw}" is only used once'
            results.append(_finding(RULE_TAG_ORPHAN, message, occ.path, occ.line))
        if group.has_case_variants:
            for occ in group.occurrences:
                message = (
                    f'tag "{occ.raw}" has case variants; '
                    f'prefer consistent casing for "{group.normalized}"'
                )
                results.append(_finding(RULE_TAG_CASE_VARIANT, message, occ.path, occ.line))
    return results


def check_links(doc: Document, index: Index) -> list[Result]:
    """Report wikilinks and markdown links that resolve to no document."""
    results: list[Result] = []
    for link in doc.links:
        reference = link_reference(link)
        if reference is None:
            continue
        if link.kind is LinkKind.WIKILINK:
            if not resolve_wikilink(reference, index):
                message = f"broken wikilink [[{link.target}]]"
                results.append(_finding(RULE_LINK_BROKEN, message, doc.path, link.line))
        elif not resolve_markdown_link(doc.path, reference, index):
            message = f"broken markdown link {link.target}"
            results.append(_finding(RULE_LINK_BROKEN, message, doc.path, link.line))
    return results


def collect_results(documents: Sequence[Document]) -> list[Result]:
    """Run every check over an already-loaded corpus, in report order."""
    results: list[Result] = []
    for doc in documents:
        results.extend(check_frontmatter(doc))

    results.extend(check_tags(documents))

    index = build_index(documents)
    for doc in documents:
        results.extend(check_links(doc, index))
    return results


# ---------------------------------------------------------------------------
# WikifmtService
# ---------------------------------------------------------------------------


class WikifmtService:
    """Loads a markdown corpus and produces one SARIF run of findings."""

    def __init__(self, config: WikifmtConfig | None = None) -> None:
        if config is None:
            from lintkit.config.models import WikifmtConfig

            config = WikifmtConfig()
        self._config = config

    def run(self, roots: Iterable[str | Path]) -> SarifLog:
        """Check every markdown file under *roots*.

        Raises:
            OSError: a root is missing or a file/directory cannot be read.
                No partial log is produced.
        """
        documents = load_documents(roots, skip_dirs=self._config.skip_dirs)
        results = collect_results(documents)
        logger.debug("wikifmt checked %d documents, %d findings", len(documents), len(results))
        return new_log(new_run(self._config.driver_name, results, version=__version__))
