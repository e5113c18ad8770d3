"""Command-line entry point for ``create-vanilla``."""

from __future__ import annotations

import argparse
import asyncio
import sys

from rich.markup import escape

from .config import Config
from .prompts import collect_project_config
from .scaffolder import ProjectGenerator, ScaffoldError
from .utils import console, print_error, print_info, print_success


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-vanilla",
        description="Scaffold a vanilla Vite project, optionally with TypeScript",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-vanilla\n"
            "  create-vanilla my-app --default\n"
            "  create-vanilla my-app --ts\n"
            "  create-vanilla . --typescript\n"
        ),
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        help="Directory to create the project in (asked interactively if omitted)",
    )
    parser.add_argument(
        "--default",
        dest="use_defaults",
        action="store_true",
        default=None,
        help="Skip the feature questions and use plain JavaScript",
    )
    parser.add_argument(
        "--typescript", "--ts",
        dest="typescript",
        action="store_true",
        default=None,
        help="Skip the feature questions and add TypeScript",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-vanilla`` / ``python -m create_vanilla``."""
    args = build_parser().parse_args(argv)
    settings = Config.from_env()

    try:
        target_dir, project = collect_project_config(
            args.target_dir, args.use_defaults, args.typescript
        )
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    generator = ProjectGenerator(project, settings)
    print_info(f"\nScaffolding project in {settings.project_root(target_dir)}...")

    try:
        root = asyncio.run(generator.generate(target_dir))
    except (ScaffoldError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_success("\nDone. Now run:\n")
    for command in generator.next_steps(root):
        console.print(f"  [bold green]{escape(command)}[/bold green]")
    console.print()


if __name__ == "__main__":
    main()
