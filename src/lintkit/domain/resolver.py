"""Document index and link resolution.

The index is derived state: a plain mapping from normalized document name to
path, rebuilt from the full document set on every run and passed explicitly
to the resolvers.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from lintkit.domain.document import Document
from lintkit.domain.links import slugify

Index = Mapping[str, str]


def _stem(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def build_index(documents: Iterable[Document]) -> dict[str, str]:
    """Map lowercased and slugified filename stems to document paths.

    Later documents win on key collisions, so a sorted document set gives a
    reproducible index.
    """
    index: dict[str, str] = {}
    for doc in documents:
        stem = _stem(doc.path)
        index[stem.lower()] = doc.path
        index[slugify(stem)] = doc.path
    return index


def resolve_wikilink(target: str, index: Index) -> bool:
    """Resolve ``[[target]]`` by slug, then by lowercased name."""
    target = target.strip()
    if not target:
        return False
    if slugify(target) in index:
        return True
    return target.lower() in index


def resolve_markdown_link(current_path: str, target: str, index: Index) -> bool:
    """Resolve a markdown link relative to the linking document's directory.

    Matches on filename stem first. For ``.md`` targets the index values are
    also compared against the resolved path itself, which covers links whose
    directory components the stem keys cannot express.
    """
    if not target:
        return False
    cleaned = target.removeprefix("/")
    resolved = os.path.normpath(os.path.join(os.path.dirname(current_path), cleaned))
    stem = _stem(resolved)
    if stem.lower() in index or slugify(stem) in index:
        return True
    if resolved.endswith(".md"):
        return any(same_file(resolved, path) for path in index.values())
    return False


def same_file(a: str, b: str) -> bool:
    return os.path.abspath(a) == os.path.abspath(b)
