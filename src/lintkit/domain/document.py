"""Document — one parsed markdown file."""

from __future__ import annotations

from dataclasses import dataclass

from lintkit.domain.frontmatter import FrontmatterParse, parse_frontmatter
from lintkit.domain.links import Link, extract_links
from lintkit.domain.tags import TagOccurrence


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of a markdown file for a single scan."""

    path: str
    content: str
    lines: tuple[str, ...]
    frontmatter: FrontmatterParse
    links: tuple[Link, ...]
    tags: tuple[TagOccurrence, ...]


def parse_document(path: str, content: str) -> Document:
    """Build a :class:`Document` from raw file *content*.

    Tags come from the best-effort frontmatter, so a block that fails to
    parse part-way still contributes the tags read before the error.
    """
    lines = content.split("\n")
    parsed = parse_frontmatter(content)
    tags = tuple(
        TagOccurrence(path=path, line=tag.line, raw=tag.value)
        for tag in parsed.frontmatter.tags.values
    )
    return Document(
        path=path,
        content=content,
        lines=tuple(lines),
        frontmatter=parsed,
        links=tuple(extract_links(lines)),
        tags=tags,
    )
