"""Deterministic pre-order directory traversal.

The walk visits a directory before anything inside it, lists children in
name order, and never descends into version-control metadata or follows
symlinked directories.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .errors import TemplateNotFoundError

# Directory names that are neither visited nor recursed into.
SKIPPED_DIRECTORIES: frozenset[str] = frozenset({".git"})

Visitor = Callable[[Path], None]


def pre_order_directory_traverse(
    root: str | Path,
    on_directory: Visitor,
    on_file: Visitor,
) -> None:
    """Walk *root*, calling *on_directory* for directories and *on_file* for files.

    *root* itself is passed to *on_directory* first.  Children of a
    directory are listed once, sorted by name, before any of them is
    visited; a visitor may therefore rename files in the directory being
    walked without the walk seeing the new names.  Symlinks to directories
    are skipped; symlinks to files are passed to *on_file*.

    Raises:
        TemplateNotFoundError: If *root* does not exist or is not a directory.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise TemplateNotFoundError(f"Directory not found: {root_path}", path=root_path)
    _visit(root_path, on_directory, on_file)


def _visit(directory: Path, on_directory: Visitor, on_file: Visitor) -> None:
    on_directory(directory)
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        if child.is_symlink() and child.is_dir():
            continue
        if child.is_dir():
            if child.name in SKIPPED_DIRECTORIES:
                continue
            _visit(child, on_directory, on_file)
        elif child.is_file():
            on_file(child)
