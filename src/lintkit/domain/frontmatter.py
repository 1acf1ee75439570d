"""Frontmatter micro-parser for wiki-style markdown.

This is not YAML. The accepted grammar is deliberately small:

- ``key: value`` scalar lines (split on the first colon)
- an indented ``  - value`` list, valid only directly under ``tags:``

The parser walks the block line by line tracking the current key and the
keys already seen. It stops at the first malformed line and returns the
values recorded up to that point together with the error, so callers can
decide how far to trust the partial result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

# Opening delimiter must be the very first line; closing is a line of exactly ``---``.
_BLOCK_PATTERN = re.compile(r"\A---\n(.*?)^---$", re.DOTALL | re.MULTILINE)
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_LIST_ITEM_PREFIX = "  - "

# The block body starts on the line after the opening ``---``.
_LINE_OFFSET = 2


class FrontmatterErrorKind(StrEnum):
    MISSING = "missing"
    LIST_WITHOUT_KEY = "list_without_key"
    UNEXPECTED_LIST_ITEM = "unexpected_list_item"
    INVALID_LINE = "invalid_line"
    DUPLICATE_KEY = "duplicate_key"


@dataclass(frozen=True)
class FrontmatterError:
    """A grammar violation inside (or the absence of) the frontmatter block."""

    kind: FrontmatterErrorKind
    line: int
    message: str
    previous_line: int | None = None  # first occurrence, for duplicate keys


@dataclass(frozen=True)
class ValueNode:
    """A scalar frontmatter value with the line it was read from."""

    value: str = ""
    line: int = 0
    present: bool = False


@dataclass(frozen=True)
class TagValue:
    value: str
    line: int


@dataclass(frozen=True)
class TagsNode:
    """The ``tags`` key: its own line plus every recorded value."""

    values: tuple[TagValue, ...] = ()
    line: int = 0

    @property
    def present(self) -> bool:
        return bool(self.values)


@dataclass(frozen=True)
class Frontmatter:
    title: ValueNode = field(default_factory=ValueNode)
    date: ValueNode = field(default_factory=ValueNode)
    tags: TagsNode = field(default_factory=TagsNode)


@dataclass(frozen=True)
class FrontmatterParse:
    """Best-effort frontmatter plus whatever went wrong while reading it."""

    frontmatter: Frontmatter
    errors: tuple[FrontmatterError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def missing(self) -> bool:
        """True when the document has no delimited block at all."""
        return any(e.kind is FrontmatterErrorKind.MISSING for e in self.errors)


MISSING_FRONTMATTER = FrontmatterError(
    kind=FrontmatterErrorKind.MISSING,
    line=1,
    message="missing frontmatter",
)


class _Builder:
    """Mutable accumulator used while scanning a block."""

    def __init__(self) -> None:
        self.title = ValueNode()
        self.date = ValueNode()
        self.tag_values: list[TagValue] = []
        self.tags_line = 0

    def freeze(self) -> Frontmatter:
        return Frontmatter(
            title=self.title,
            date=self.date,
            tags=TagsNode(values=tuple(self.tag_values), line=self.tags_line),
        )


def parse_frontmatter(content: str) -> FrontmatterParse:
    """Parse the frontmatter block at the top of *content*.

    Returns a :class:`FrontmatterParse` whose ``errors`` holds at most one
    entry: either :data:`MISSING_FRONTMATTER` or the first grammar error.
    """
    match = _BLOCK_PATTERN.match(content)
    if match is None:
        return FrontmatterParse(frontmatter=Frontmatter(), errors=(MISSING_FRONTMATTER,))

    builder = _Builder()
    seen_keys: dict[str, int] = {}
    current_key: str | None = None

    for index, line in enumerate(match.group(1).split("\n")):
        line_no = index + _LINE_OFFSET
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("-") and not line.startswith(_LIST_ITEM_PREFIX):
            return _fail(
                builder,
                FrontmatterErrorKind.LIST_WITHOUT_KEY,
                line_no,
                f"invalid YAML list entry without key on line {line_no}",
            )

        if line.startswith(_LIST_ITEM_PREFIX):
            if current_key != "tags":
                return _fail(
                    builder,
                    FrontmatterErrorKind.UNEXPECTED_LIST_ITEM,
                    line_no,
                    f"unexpected list item on line {line_no}",
                )
            value = line[len(_LIST_ITEM_PREFIX) :].strip()
            if value:
                builder.tag_values.append(TagValue(value=value, line=line_no))
            continue

        key, sep, raw_value = line.partition(":")
        if not sep:
            return _fail(
                builder,
                FrontmatterErrorKind.INVALID_LINE,
                line_no,
                f"invalid frontmatter line {line_no}",
            )

        key = key.strip()
        value = raw_value.strip()
        current_key = key

        previous = seen_keys.get(key)
        if previous is not None:
            return _fail(
                builder,
                FrontmatterErrorKind.DUPLICATE_KEY,
                line_no,
                f'duplicate key "{key}" on line {line_no} (previously on line {previous})',
                previous_line=previous,
            )
        seen_keys[key] = line_no

        if key == "title" and value:
            builder.title = ValueNode(value=value, line=line_no, present=True)
        elif key == "date" and value:
            builder.date = ValueNode(value=value, line=line_no, present=True)
        elif key == "tags":
            builder.tags_line = line_no
            if value:
                builder.tag_values.append(TagValue(value=value, line=line_no))

    return FrontmatterParse(frontmatter=builder.freeze())


def _fail(
    builder: _Builder,
    kind: FrontmatterErrorKind,
    line: int,
    message: str,
    *,
    previous_line: int | None = None,
) -> FrontmatterParse:
    error = FrontmatterError(kind=kind, line=line, message=message, previous_line=previous_line)
    return FrontmatterParse(frontmatter=builder.freeze(), errors=(error,))


def is_valid_date(value: str) -> bool:
    """True for a real calendar date written as ``YYYY-MM-DD``.

    Examples:
        >>> is_valid_date("2024-02-29")
        True
        >>> is_valid_date("2024-13-45")
        False
        >>> is_valid_date("2024-1-5")
        False
    """
    if not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
