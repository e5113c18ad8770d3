"""Shared pytest fixtures for the create-vanilla test suite.

Provides reusable fixtures for:
- Small template sets built on disk
- Temporary project directories
- A ``Config`` pointing at those directories
"""

from __future__ import annotations

from pathlib import Path

import pytest

from create_vanilla.config import Config


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create every ``relative path -> content`` entry under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_tree():
    """Return :func:`write_files` so tests can lay out arbitrary trees."""
    return write_files


# ---------------------------------------------------------------------------
# Template sets
# ---------------------------------------------------------------------------

@pytest.fixture
def scenario_template_root(tmp_path: Path) -> Path:
    """The minimal template set: README, ignore file, app script, entry HTML."""
    root = tmp_path / "template"
    write_files(
        root,
        {
            "base/README.md": "# Template readme\n",
            "base/_gitignore": "node_modules\ndist\n",
            "code/default/src/app.js": "console.log('hello');\n",
            "entry/default/index.html": '<script type="module" src="/src/app.js"></script>\n',
        },
    )
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A complete template set with both the JavaScript and TypeScript variants."""
    root = tmp_path / "template"
    write_files(
        root,
        {
            "base/_gitignore": "node_modules\ndist\n",
            "base/jsconfig.json": '{"include": ["src"]}\n',
            "base/package.json": '{"scripts": {"dev": "vite", "build": "vite build"}}\n',
            "base/vite.config.js": "export default {};\n",
            "config/typescript/_gitignore": "*.tsbuildinfo\n",
            "config/typescript/package.json": (
                '{"scripts": {"build": "tsc && vite build"},'
                ' "devDependencies": {"typescript": "~5.5.0"}}\n'
            ),
            "code/default/src/js/store.js": "export const Store = {};\n",
            "code/typescript-default/src/ts/helper.ts": "export const x: number = 1;\n",
            "entry/default/index.html": '<script type="module" src="/src/app.js"></script>\n',
            "entry/default/src/app.js": "import './js/store.js';\n",
            "entry/typescript-default/index.html": (
                '<script type="module" src="/src/app.js"></script>\n'
            ),
            "entry/typescript-default/src/app.js": "import './ts/helper';\n",
        },
    )
    return root


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory standing in for the user's working directory."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def settings(workspace: Path, template_root: Path) -> Config:
    """A ``Config`` rooted in the temporary workspace and template set."""
    return Config(cwd=workspace, template_root=template_root, package_manager="npm")
