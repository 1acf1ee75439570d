"""Filesystem discovery and loading of markdown documents.

INVARIANT: Loading is all-or-nothing. A missing root, an unreadable
directory, or an unreadable file raises the underlying ``OSError`` and no
documents are returned.

Pure parsing lives in :mod:`lintkit.domain.document`; this module only walks
directories and reads files.
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Collection, Iterable
from pathlib import Path

from lintkit.domain.document import Document, parse_document

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def _raise(exc: OSError) -> None:
    raise exc


def is_markdown(name: str) -> bool:
    return name.lower().endswith(MARKDOWN_SUFFIX)


def find_markdown_files(
    roots: Iterable[str | Path],
    *,
    skip_dirs: Collection[str] = (),
) -> list[str]:
    """Discover every ``*.md`` file (case-insensitive) under *roots*.

    Paths are joined onto the root as given and normalized, de-duplicated
    by real path across roots, then sorted, so the result is independent of
    directory listing order. A root that is
    itself a markdown file is returned as-is. Directories named in
    *skip_dirs* are not descended into.
    """
    results: list[str] = []
    for root in roots:
        root_str = os.fspath(root)
        if not os.path.exists(root_str):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), root_str)
        if os.path.isfile(root_str):
            if is_markdown(os.path.basename(root_str)):
                results.append(os.path.normpath(root_str))
            continue
        for dirpath, dirnames, filenames in os.walk(root_str, onerror=_raise):
            dirnames[:] = [d for d in dirnames if d not in skip_dirs]
            for name in filenames:
                if is_markdown(name):
                    results.append(os.path.normpath(os.path.join(dirpath, name)))
    # Overlapping roots must not load a file twice, however each root was
    # spelled; the first spelling found is the one reported.
    seen: set[str] = set()
    unique: list[str] = []
    for path in results:
        real = os.path.realpath(path)
        if real not in seen:
            seen.add(real)
            unique.append(path)
    return sorted(unique)


def read_document(path: str) -> Document:
    """Read and parse one markdown file.

    Undecodable bytes are replaced rather than rejected; line endings are
    normalized to ``\\n``.
    """
    content = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_document(path, content)


def load_documents(
    roots: Iterable[str | Path],
    *,
    skip_dirs: Collection[str] = (),
) -> list[Document]:
    """Load every markdown document under *roots*, sorted by path."""
    paths = find_markdown_files(roots, skip_dirs=skip_dirs)
    documents = [read_document(path) for path in paths]
    logger.debug("Loaded %d markdown documents", len(documents))
    return documents
