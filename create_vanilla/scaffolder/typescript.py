"""Convert a freshly rendered JavaScript project to TypeScript.

Runs once, after every template has been rendered: renames ``.js`` sources
to ``.ts``, ``jsconfig.json`` to ``tsconfig.json``, and points the HTML entry
file at the TypeScript entry script.
"""

from __future__ import annotations

from pathlib import Path

from ..utils import print_warning
from .errors import RenameCollisionError, TemplateNotFoundError
from .traverse import pre_order_directory_traverse

UNTYPED_EXTENSION = ".js"
TYPED_EXTENSION = ".ts"

# Untyped config basename -> typed config basename.
CONFIG_RENAMES: dict[str, str] = {"jsconfig.json": "tsconfig.json"}

ENTRY_FILE = "index.html"
UNTYPED_ENTRY_SCRIPT = "src/app.js"
TYPED_ENTRY_SCRIPT = "src/app.ts"


def convert_to_typescript(project_root: str | Path, entry_file: str = ENTRY_FILE) -> list[Path]:
    """Rename JavaScript files under *project_root* and rewrite the entry HTML.

    Only the first occurrence of the entry script path is rewritten.  A
    warning is printed when there was nothing to rewrite or when further
    occurrences remain.

    Returns:
        The new paths of every renamed file, in traversal order.

    Raises:
        RenameCollisionError: If a renamed file would overwrite another file.
        TemplateNotFoundError: If the entry HTML file does not exist.
    """
    root = Path(project_root)
    renamed: list[Path] = []

    def on_file(path: Path) -> None:
        new_name = typed_name(path.name)
        if new_name is not None:
            renamed.append(_rename(path, path.with_name(new_name)))

    pre_order_directory_traverse(root, lambda _: None, on_file)

    entry_path = root / entry_file
    if not entry_path.is_file():
        raise TemplateNotFoundError(f"Entry file not found: {entry_path}", path=entry_path)

    content = entry_path.read_text(encoding="utf-8")
    if UNTYPED_ENTRY_SCRIPT not in content:
        print_warning(f"No reference to {UNTYPED_ENTRY_SCRIPT} in {entry_file}")
        return renamed

    content = content.replace(UNTYPED_ENTRY_SCRIPT, TYPED_ENTRY_SCRIPT, 1)
    if UNTYPED_ENTRY_SCRIPT in content:
        print_warning(
            f"{entry_file} still references {UNTYPED_ENTRY_SCRIPT} after the rewrite"
        )
    entry_path.write_text(content, encoding="utf-8")
    return renamed


def typed_name(basename: str) -> str | None:
    """Return the TypeScript name for *basename*, or ``None`` if it stays as is."""
    if basename.endswith(UNTYPED_EXTENSION):
        return basename[: -len(UNTYPED_EXTENSION)] + TYPED_EXTENSION
    return CONFIG_RENAMES.get(basename)


def _rename(source: Path, target: Path) -> Path:
    if target.exists():
        raise RenameCollisionError(
            f"Cannot rename {source.name} to {target.name}: {target} already exists",
            source=source,
            target=target,
        )
    source.rename(target)
    return target
