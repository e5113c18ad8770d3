"""Copy a template directory onto a project directory.

Most files are copied byte for byte.  A handful of well-known files get
special treatment:

* dot-files are stored in templates under an underscore alias (``_gitignore``)
  so that packaging tools do not drop them, and are restored on render;
* ignore files are merged line by line when several templates contribute one;
* ``package.json`` is deep-merged so each template can add its own scripts
  and dependencies.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

from ..utils import dump_json
from .errors import TemplateNotFoundError
from .traverse import pre_order_directory_traverse

# Template basename -> destination basename (exact matches only).
FILENAME_REMAP: dict[str, str] = {
    "_gitignore": ".gitignore",
    "_npmrc": ".npmrc",
    "_editorconfig": ".editorconfig",
}

# Destination basenames merged by line-set union.
MERGEABLE_FILES: frozenset[str] = frozenset({".gitignore"})

# Destination basenames deep-merged as JSON.
MANIFEST_FILES: frozenset[str] = frozenset({"package.json"})

_DEPENDENCY_KEYS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


def render_template(template_dir: str | Path, dest_dir: str | Path) -> None:
    """Render one template directory onto *dest_dir*.

    Directories (including empty ones) are created in the destination before
    any file is copied into them.  *dest_dir* and its parents are created if
    missing.

    Raises:
        TemplateNotFoundError: If *template_dir* does not exist.
        OSError: On any read/write failure.  Files already written stay
            in place.
    """
    source_root = Path(template_dir)
    dest_root = Path(dest_dir)
    if not source_root.is_dir():
        raise TemplateNotFoundError(f"Template not found: {source_root}", path=source_root)

    dest_root.mkdir(parents=True, exist_ok=True)

    def on_directory(directory: Path) -> None:
        (dest_root / directory.relative_to(source_root)).mkdir(parents=True, exist_ok=True)

    def on_file(source: Path) -> None:
        rel = source.relative_to(source_root)
        target = dest_root / rel.parent / destination_name(rel.name)
        if target.name in MERGEABLE_FILES and target.exists():
            _write_text(target, merge_lines(_read_text(target), _read_text(source)))
        elif target.name in MANIFEST_FILES and target.exists():
            merged = merge_manifest(_read_json(target), _read_json(source))
            _write_text(target, dump_json(merged))
        else:
            shutil.copyfile(source, target)

    pre_order_directory_traverse(source_root, on_directory, on_file)


def destination_name(basename: str) -> str:
    """Map a template basename to the name it is written under."""
    return FILENAME_REMAP.get(basename, basename)


# ---------------------------------------------------------------------------
# Merge helpers
# ---------------------------------------------------------------------------


def merge_lines(existing: str, incoming: str) -> str:
    """Union the lines of two text files.

    Lines already in *existing* keep their order and come first; lines from
    *incoming* that are not yet present follow in their own order.  Blank
    lines are dropped and no line appears twice.
    """
    merged: list[str] = []
    seen: set[str] = set()
    for line in existing.splitlines() + incoming.splitlines():
        if not line.strip() or line in seen:
            continue
        seen.add(line)
        merged.append(line)
    return "\n".join(merged) + "\n" if merged else ""


def merge_manifest(existing: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two ``package.json`` documents.

    Objects merge recursively, arrays are unioned, and scalar values from
    *incoming* win.  Dependency maps are sorted by package name.
    """
    merged = _deep_merge(existing, incoming)
    for key in _DEPENDENCY_KEYS:
        if isinstance(merged.get(key), dict):
            merged[key] = dict(sorted(merged[key].items()))
    return merged


def _deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    result = dict(target)
    for key, value in source.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = current + [item for item in value if item not in current]
        else:
            result[key] = value
    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_json(path: Path) -> dict[str, Any]:
    data = json.loads(_read_text(path))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")
