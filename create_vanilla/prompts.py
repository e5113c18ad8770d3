"""Interactive questions asked before anything is written to disk.

Questions are skipped when the command line already answers them:

- Project name: only when no target directory was given.
- Package name: only when the project name is not a valid npm name.
- TypeScript: only when neither ``--default`` nor ``--typescript`` was passed.
"""

from __future__ import annotations

from rich.prompt import Confirm, Prompt

from .scaffolder.errors import OperationCancelled
from .scaffolder.generator import DEFAULT_PROJECT_NAME, ProjectConfig
from .utils import console, is_valid_package_name, print_error, to_valid_package_name


def collect_project_config(
    target_dir: str | None,
    use_defaults: bool | None = None,
    typescript: bool | None = None,
) -> tuple[str, ProjectConfig]:
    """Ask the remaining questions and return ``(target_dir, ProjectConfig)``.

    Raises:
        OperationCancelled: If the user hits Ctrl-C or closes stdin.
    """
    feature_flags_used = use_defaults is not None or typescript is not None
    try:
        if target_dir:
            project_name = target_dir
        else:
            answer = Prompt.ask(
                "Project name:", default=DEFAULT_PROJECT_NAME, console=console
            )
            project_name = answer.strip() or DEFAULT_PROJECT_NAME

        package_name = project_name
        if not is_valid_package_name(project_name):
            package_name = _ask_package_name(to_valid_package_name(project_name))

        needs_typescript = bool(typescript)
        if not feature_flags_used:
            needs_typescript = Confirm.ask(
                "Add TypeScript?", default=False, console=console
            )
    except (KeyboardInterrupt, EOFError) as exc:
        raise OperationCancelled("✖ Operation cancelled") from exc

    config = ProjectConfig(
        project_name=project_name,
        package_name=package_name,
        needs_typescript=needs_typescript,
    )
    return project_name, config


def _ask_package_name(default: str) -> str:
    while True:
        answer = Prompt.ask("Package name:", default=default, console=console).strip()
        if is_valid_package_name(answer):
            return answer
        print_error("Invalid package.json name")
