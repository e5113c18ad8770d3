"""create-vanilla scaffolder -- builds a Vite project from static templates.

The template set under ``create_vanilla/template/`` is rendered piece by
piece onto the project directory, optionally converted to TypeScript, and
completed with a generated ``package.json`` and README.

Quick usage::

    from create_vanilla.scaffolder import ProjectConfig, ProjectGenerator

    config = ProjectConfig(project_name="my-app", package_name="my-app")
    generator = ProjectGenerator(config)
    project_path = await generator.generate("my-app")
"""

from create_vanilla.scaffolder.errors import (
    OperationCancelled,
    RenameCollisionError,
    ScaffoldError,
    TemplateNotFoundError,
)
from create_vanilla.scaffolder.generator import (
    ProjectConfig,
    ProjectGenerator,
    render_project_templates,
)
from create_vanilla.scaffolder.render import render_template
from create_vanilla.scaffolder.templates import TemplateRenderer
from create_vanilla.scaffolder.traverse import pre_order_directory_traverse
from create_vanilla.scaffolder.typescript import convert_to_typescript

__all__ = [
    "OperationCancelled",
    "ProjectConfig",
    "ProjectGenerator",
    "RenameCollisionError",
    "ScaffoldError",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "convert_to_typescript",
    "pre_order_directory_traverse",
    "render_project_templates",
    "render_template",
]
