"""Tag hygiene — corpus-wide orphan and case-variant detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TagOccurrence:
    path: str
    line: int
    raw: str


@dataclass(frozen=True)
class TagGroup:
    """All occurrences of one tag, compared case-insensitively."""

    normalized: str
    occurrences: tuple[TagOccurrence, ...]

    @property
    def is_orphan(self) -> bool:
        return len(self.occurrences) == 1

    @property
    def variants(self) -> frozenset[str]:
        return frozenset(occ.raw for occ in self.occurrences)

    @property
    def has_case_variants(self) -> bool:
        return len(self.variants) > 1


def normalize_tag(tag: str) -> str:
    return tag.lower()


def group_tags(occurrences: Iterable[TagOccurrence]) -> list[TagGroup]:
    """Group occurrences by normalized tag, ordered by first occurrence.

    Examples:
        >>> occs = [TagOccurrence("a.md", 3, "API"), TagOccurrence("b.md", 4, "api")]
        >>> [(g.normalized, len(g.occurrences)) for g in group_tags(occs)]
        [('api', 2)]
    """
    grouped: dict[str, list[TagOccurrence]] = {}
    for occ in occurrences:
        grouped.setdefault(normalize_tag(occ.raw), []).append(occ)
    return [TagGroup(normalized=norm, occurrences=tuple(occs)) for norm, occs in grouped.items()]
