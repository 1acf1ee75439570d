"""Link extraction — wikilinks and markdown links from document text.

Pure functions, no filesystem access. Extraction keeps the target exactly as
written; :func:`link_reference` derives the part that is actually resolved
against the document index.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import unquote

# [[Target]], [[Target|Alias]], [[Target#Heading]]: everything between the brackets.
_WIKILINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]")
# [text](target); images share the syntax and are extracted too.
_MDLINK_PATTERN = re.compile(r"\[[^\]]*\]\(([^)]+)\)")

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_LINK_TITLE_PATTERN = re.compile(r"""\s+(?:"[^"]*"|'[^']*')$""")
_DASH_RUN = re.compile(r"-+")


class LinkKind(StrEnum):
    WIKILINK = "wikilink"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class Link:
    """A reference found in document text."""

    target: str  # raw text as written
    kind: LinkKind
    line: int  # 1-indexed


def extract_links(lines: list[str]) -> list[Link]:
    """Extract links line by line: wikilinks first, then markdown links.

    Returns an empty list if no links are found.
    """
    links: list[Link] = []
    for index, line in enumerate(lines):
        line_no = index + 1
        for match in _WIKILINK_PATTERN.finditer(line):
            links.append(Link(target=match.group(1), kind=LinkKind.WIKILINK, line=line_no))
        for match in _MDLINK_PATTERN.finditer(line):
            links.append(Link(target=match.group(1), kind=LinkKind.MARKDOWN, line=line_no))
    return links


def slugify(text: str) -> str:
    """Loose-matching key for document names.

    Examples:
        >>> slugify("Some Page")
        'some-page'
        >>> slugify("api_design  notes")
        'api-design-notes'
    """
    text = text.strip().lower().replace(" ", "-").replace("_", "-")
    return _DASH_RUN.sub("-", text)


def has_scheme(target: str) -> bool:
    """True for absolute URLs and other scheme-prefixed targets (``mailto:``)."""
    return bool(_SCHEME_PATTERN.match(target.strip()))


def link_reference(link: Link) -> str | None:
    """The part of *link* that names a document, or None if it should be skipped.

    Skipped: scheme-prefixed targets and pure in-page anchors. Aliases
    (``|``), anchors (``#``) and, for markdown links, titles, queries and
    percent-escapes are stripped.
    """
    target = link.target.strip()

    if link.kind is LinkKind.WIKILINK:
        # Page names may contain colons; only full URLs are skipped here.
        if "://" in target:
            return None
        target = target.split("|", 1)[0]
        if target.strip().startswith("#"):
            return None
        return target.split("#", 1)[0]

    if has_scheme(target) or target.startswith("#"):
        return None
    target = _LINK_TITLE_PATTERN.sub("", target)
    target = target.split("#", 1)[0].split("?", 1)[0]
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1]
    return unquote(target)
