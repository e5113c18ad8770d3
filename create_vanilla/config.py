"""create-vanilla runtime configuration.

Everything the generator would otherwise read from process-wide state (the
working directory, the template location, the invoking package manager) is
collected here once, so the scaffolding code only ever receives explicit
values.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .utils import detect_package_manager

DEFAULT_TEMPLATE_ROOT = Path(__file__).parent / "template"


class Config(BaseModel):
    """Global create-vanilla configuration.

    Instances are created once by the CLI entry point and then passed to the
    generator.
    """

    cwd: Path = Field(default_factory=Path.cwd, description="Directory the project is created in")
    template_root: Path = Field(
        default=DEFAULT_TEMPLATE_ROOT,
        description="Root holding the base/config/code/entry template directories",
    )
    package_manager: Literal["npm", "yarn", "pnpm"] = Field(default="npm")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    def project_root(self, target_dir: str | Path) -> Path:
        """Absolute path of the project created for *target_dir*."""
        return (self.cwd / target_dir).resolve()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from the current process.

        Recognised variables (all optional):
            npm_execpath                  set by npm/yarn/pnpm when running ``create``
            CREATE_VANILLA_TEMPLATE_ROOT  alternative template set
        """
        template_root = os.environ.get("CREATE_VANILLA_TEMPLATE_ROOT")
        return cls(
            cwd=Path.cwd(),
            template_root=Path(template_root) if template_root else DEFAULT_TEMPLATE_ROOT,
            package_manager=detect_package_manager(os.environ.get("npm_execpath")),
        )
