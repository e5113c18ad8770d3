"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` (the user's answers) and a ``Config`` (where things
live) and builds the project: renders the template directories in order,
converts the result to TypeScript when requested, then writes the
``package.json`` manifest and the README.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..config import Config
from ..utils import get_command, is_valid_package_name, load_json, save_json
from .render import render_template
from .templates import TemplateRenderer
from .typescript import convert_to_typescript

DEFAULT_PROJECT_NAME = "default-project"
MANIFEST_VERSION = "0.0.0"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    project_name: str = Field(default=DEFAULT_PROJECT_NAME, description="Name shown in the README")
    package_name: str = Field(..., description="Name written to package.json")
    needs_typescript: bool = Field(default=False, description="Whether to add TypeScript")

    @field_validator("package_name")
    @classmethod
    def _validate_package_name(cls, value: str) -> str:
        if not is_valid_package_name(value):
            raise ValueError(f"Invalid package.json name: {value!r}")
        return value


# ---------------------------------------------------------------------------
# Template selection and rendering
# ---------------------------------------------------------------------------


def template_names(needs_typescript: bool) -> list[str]:
    """Return the templates to render, in render order."""
    variant = "typescript-default" if needs_typescript else "default"
    names = ["base"]
    if needs_typescript:
        names.append("config/typescript")
    names.append(f"code/{variant}")
    names.append(f"entry/{variant}")
    return names


def render_project_templates(
    template_root: str | Path,
    root: str | Path,
    needs_typescript: bool,
) -> None:
    """Render every selected template onto *root*, then convert if needed.

    The TypeScript conversion only starts once every render has finished.
    """
    template_root = Path(template_root)
    for name in template_names(needs_typescript):
        render_template(template_root / name, root)

    if needs_typescript:
        convert_to_typescript(root)


async def write_manifest(root: Path, package_name: str) -> Path:
    """Write ``package.json`` with the project's name and initial version.

    Anything the templates already put into ``package.json`` (scripts,
    dependencies) is kept; ``name`` and ``version`` come first.
    """
    manifest_path = root / "package.json"
    existing: dict[str, Any] = {}
    if manifest_path.exists():
        existing = await asyncio.to_thread(load_json, manifest_path)

    manifest = {"name": package_name, "version": MANIFEST_VERSION}
    manifest.update(
        (key, value) for key, value in existing.items() if key not in manifest
    )
    await save_json(manifest, manifest_path)
    return manifest_path


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a project directory containing:
    - the base Vite project files and ``.gitignore``
    - TypeScript config (when requested)
    - the starter code and ``index.html`` entry
    - a ``package.json`` named after the package
    - a README with commands for the detected package manager
    """

    def __init__(self, config: ProjectConfig, settings: Config | None = None) -> None:
        self.config = config
        self.settings = settings or Config()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, target_dir: str | Path) -> Path:
        """Generate the project in *target_dir*.

        Args:
            target_dir: Directory relative to ``settings.cwd`` (or absolute).
                ``"."`` scaffolds into the working directory itself.

        Returns:
            Path to the generated project root.
        """
        root = self.settings.project_root(target_dir)
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

        # 1. Render templates, then the TypeScript pass
        await asyncio.to_thread(
            render_project_templates,
            self.settings.template_root,
            root,
            self.config.needs_typescript,
        )

        # 2. Manifest
        await write_manifest(root, self.config.package_name)

        # 3. README
        await self.renderer.render_to_file(
            "README.md.j2", root / "README.md", self._build_context()
        )

        return root

    def next_steps(self, root: Path) -> list[str]:
        """Return the shell commands the user should run next."""
        package_manager = self.settings.package_manager
        steps: list[str] = []
        if root != self.settings.cwd.resolve():
            steps.append(f"cd {os.path.relpath(root, self.settings.cwd)}")
        steps.append(get_command(package_manager, "install"))
        steps.append(get_command(package_manager, "dev"))
        return steps

    # -- Internal ----------------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        package_manager = self.settings.package_manager
        return {
            "project_name": self.config.project_name,
            "needs_typescript": self.config.needs_typescript,
            "install_command": get_command(package_manager, "install"),
            "dev_command": get_command(package_manager, "dev"),
            "build_command": get_command(package_manager, "build"),
        }
