"""Shared utility functions for create-vanilla.

Provides npm package-name helpers, package-manager command formatting, JSON
I/O, and Rich-based console reporting.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()

# ---------------------------------------------------------------------------
# Package-name helpers
# ---------------------------------------------------------------------------

_VALID_PACKAGE_NAME = re.compile(
    r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$"
)


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* is acceptable as a ``package.json`` name.

    Scoped names (``@scope/name``) are allowed.
    """
    return bool(_VALID_PACKAGE_NAME.match(name))


def to_valid_package_name(name: str) -> str:
    """Convert an arbitrary project name to a valid npm package name.

    * Trims and lowercases the input.
    * Replaces whitespace runs with hyphens.
    * Drops a single leading ``.`` or ``_``.
    * Replaces every other run of invalid characters with a hyphen.

    Examples::

        to_valid_package_name("My Project") -> "my-project"
        to_valid_package_name("_private")   -> "private"
    """
    result = name.strip().lower()
    result = re.sub(r"\s+", "-", result)
    result = re.sub(r"^[._]", "", result)
    return re.sub(r"[^a-z0-9-~]+", "-", result)


# ---------------------------------------------------------------------------
# Package manager helpers
# ---------------------------------------------------------------------------

def detect_package_manager(npm_execpath: str | None) -> str:
    """Guess the package manager from the value of ``npm_execpath``.

    pnpm wins over yarn, and npm is the fallback when nothing matches.
    """
    execpath = npm_execpath or ""
    if "pnpm" in execpath:
        return "pnpm"
    if "yarn" in execpath:
        return "yarn"
    return "npm"


def get_command(package_manager: str, script_name: str) -> str:
    """Return the shell command that runs *script_name* with *package_manager*.

    Examples::

        get_command("yarn", "install") -> "yarn"
        get_command("npm", "dev")      -> "npm run dev"
        get_command("pnpm", "build")   -> "pnpm build"
    """
    if script_name == "install":
        return "yarn" if package_manager == "yarn" else f"{package_manager} install"

    if package_manager == "npm":
        return f"npm run {script_name}"
    return f"{package_manager} {script_name}"


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}")
    return data


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way npm writes ``package.json`` (2-space indent)."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.  The write itself is
    performed in a worker thread so the event loop is never blocked.

    Args:
        data: Serialisable data (dict or list).
        path: Destination file path.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    await asyncio.to_thread(file_path.write_text, dump_json(data), "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a plain informational message."""
    console.print(escape(message))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
