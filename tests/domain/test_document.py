"""Tests for Document construction."""

from __future__ import annotations

from lintkit.domain.document import parse_document
from lintkit.domain.links import LinkKind
from lintkit.domain.tags import TagOccurrence

CONTENT = """\
---
title: Alpha
date: 2024-03-04
tags:
  - infra
  - API
---
# Alpha

Links to [[Beta]] and [the guide](docs/guide.md).
"""


class TestParseDocument:
    def test_fields(self) -> None:
        doc = parse_document("wiki/alpha.md", CONTENT)
        assert doc.path == "wiki/alpha.md"
        assert doc.content == CONTENT
        assert doc.lines[0] == "---"
        assert doc.lines[9] == "Links to [[Beta]] and [the guide](docs/guide.md)."
        assert doc.frontmatter.ok

    def test_links_carry_lines(self) -> None:
        doc = parse_document("wiki/alpha.md", CONTENT)
        assert [(link.kind, link.target, link.line) for link in doc.links] == [
            (LinkKind.WIKILINK, "Beta", 10),
            (LinkKind.MARKDOWN, "docs/guide.md", 10),
        ]

    def test_tags_from_frontmatter(self) -> None:
        doc = parse_document("wiki/alpha.md", CONTENT)
        assert doc.tags == (
            TagOccurrence(path="wiki/alpha.md", line=5, raw="infra"),
            TagOccurrence(path="wiki/alpha.md", line=6, raw="API"),
        )

    def test_no_frontmatter_means_no_tags(self) -> None:
        doc = parse_document("wiki/plain.md", "Just text with [[Link]].\n")
        assert doc.frontmatter.missing
        assert doc.tags == ()
        assert len(doc.links) == 1

    def test_partial_frontmatter_keeps_tags(self) -> None:
        doc = parse_document("wiki/bad.md", "---\ntags:\n  - kept\n- broken\n---\n")
        assert not doc.frontmatter.ok
        assert [t.raw for t in doc.tags] == ["kept"]

    def test_trailing_newline_gives_empty_last_line(self) -> None:
        doc = parse_document("wiki/x.md", "one\ntwo\n")
        assert doc.lines == ("one", "two", "")
