"""Integration tests for rendering whole template sets.

These tests run the real renderer, TypeScript pass, and generator against
template sets on disk (a minimal one built per test, and the template set
shipped with the package) and verify the resulting project tree.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_vanilla.config import DEFAULT_TEMPLATE_ROOT, Config
from create_vanilla.scaffolder import (
    ProjectConfig,
    ProjectGenerator,
    convert_to_typescript,
    render_template,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _render_scenario(template_root: Path, project: Path) -> None:
    """Render base, code, and entry templates, then convert to TypeScript."""
    for name in ("base", "code/default", "entry/default"):
        render_template(template_root / name, project)
    convert_to_typescript(project)


def _gitignore_lines(project: Path) -> list[str]:
    return (project / ".gitignore").read_text(encoding="utf-8").splitlines()


# ---------------------------------------------------------------------------
# Minimal template set
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScenario:
    """The README / ignore file / app script / entry HTML scenario."""

    def test_typescript_render(self, scenario_template_root: Path, tmp_path: Path) -> None:
        project = tmp_path / "proj"
        _render_scenario(scenario_template_root, project)

        assert (project / "README.md").read_bytes() == (
            scenario_template_root / "base" / "README.md"
        ).read_bytes()
        assert _gitignore_lines(project) == ["node_modules", "dist"]
        assert not (project / "_gitignore").exists()
        assert (project / "src" / "app.ts").read_text(encoding="utf-8") == (
            "console.log('hello');\n"
        )
        assert not (project / "src" / "app.js").exists()
        assert 'src="/src/app.ts"' in (project / "index.html").read_text(encoding="utf-8")

    def test_merge_with_existing_gitignore_single_run(
        self, scenario_template_root: Path, tmp_path: Path
    ) -> None:
        project = tmp_path / "proj"
        project.mkdir()
        (project / ".gitignore").write_text("build\n", encoding="utf-8")

        render_template(scenario_template_root / "base", project)

        assert _gitignore_lines(project) == ["build", "node_modules", "dist"]

    def test_merge_with_existing_gitignore_two_runs(
        self, scenario_template_root: Path, tmp_path: Path
    ) -> None:
        project = tmp_path / "proj"
        project.mkdir()
        (project / ".gitignore").write_text("build\n", encoding="utf-8")

        for _ in range(2):
            for name in ("base", "code/default", "entry/default"):
                render_template(scenario_template_root / name, project)

        assert _gitignore_lines(project) == ["build", "node_modules", "dist"]


# ---------------------------------------------------------------------------
# Shipped template set
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestShippedTemplates:
    """Generate projects from the templates packaged with create-vanilla."""

    async def _generate(self, tmp_path: Path, needs_typescript: bool) -> Path:
        settings = Config(cwd=tmp_path, template_root=DEFAULT_TEMPLATE_ROOT)
        config = ProjectConfig(
            project_name="vanilla-app",
            package_name="vanilla-app",
            needs_typescript=needs_typescript,
        )
        return await ProjectGenerator(config, settings).generate("vanilla-app")

    async def test_javascript_project(self, tmp_path: Path) -> None:
        project = await self._generate(tmp_path, needs_typescript=False)

        for rel in (
            ".gitignore",
            "index.html",
            "jsconfig.json",
            "package.json",
            "README.md",
            "vite.config.js",
            "public/favicon.svg",
            "src/app.js",
            "src/style.css",
            "src/js/store.js",
            "src/js/helper.js",
        ):
            assert (project / rel).is_file(), f"Missing {rel}"

        manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "vanilla-app"
        assert manifest["version"] == "0.0.0"
        assert manifest["scripts"]["build"] == "vite build"
        assert "typescript" not in manifest["devDependencies"]
        assert "node_modules" in _gitignore_lines(project)

    async def test_typescript_project(self, tmp_path: Path) -> None:
        project = await self._generate(tmp_path, needs_typescript=True)

        assert list(project.rglob("*.js")) == []
        for rel in (
            "tsconfig.json",
            "vite.config.ts",
            "env.d.ts",
            "src/app.ts",
            "src/ts/helper.ts",
            "src/ts/store.ts",
        ):
            assert (project / rel).is_file(), f"Missing {rel}"
        assert not (project / "jsconfig.json").exists()

        manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert manifest["scripts"]["build"] == "tsc && vite build"
        assert list(manifest["devDependencies"]) == ["typescript", "vite"]

        gitignore = _gitignore_lines(project)
        assert "*.tsbuildinfo" in gitignore
        assert len(gitignore) == len(set(gitignore))

        html = (project / "index.html").read_text(encoding="utf-8")
        assert 'src="/src/app.ts"' in html
        assert "Type-Check" in (project / "README.md").read_text(encoding="utf-8")
