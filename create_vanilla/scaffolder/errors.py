"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder."""


class TemplateNotFoundError(ScaffoldError, FileNotFoundError):
    """Raised when a template directory or a required rendered file is missing."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class RenameCollisionError(ScaffoldError, FileExistsError):
    """Raised when a rename would overwrite a file that already exists."""

    def __init__(self, message: str, source: Path, target: Path):
        self.source = source
        self.target = target
        super().__init__(message)


class OperationCancelled(ScaffoldError):
    """Raised when the user aborts the interactive questions."""
