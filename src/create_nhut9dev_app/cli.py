"""Command line interface for create-nhut9dev-app."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from . import __version__
from .config import GeneratorConfig
from .errors import GeneratorError
from .scaffold import GenerationResult, ProjectGenerator

__all__ = ["build_parser", "main", "prompt_project_name", "prompt_template"]


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-nhut9dev-app",
        description="Create a new project from one of the bundled templates",
    )
    parser.add_argument("-t", "--template", help="Template key; skips the template prompt")
    parser.add_argument("-n", "--name", help="Project name; skips the project name prompt")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory the project folder is created in (defaults to the current directory)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_templates",
        help="List the available templates and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    if verbose:
        logging.getLogger(__name__.split(".")[0]).setLevel(logging.DEBUG)


def prompt_project_name(console: Console, config: GeneratorConfig) -> str:
    return Prompt.ask(
        "What is your project name?",
        console=console,
        default=config.default_project_name,
    )


def prompt_template(console: Console, config: GeneratorConfig) -> str:
    """Ask for one of ``config.templates`` and return its key."""

    if not config.templates:
        raise GeneratorError("No templates are configured.")

    console.print("Choose a project template")
    for index, template in enumerate(config.templates, start=1):
        console.print(f"  {index}) {escape(template.label)} [dim]({escape(template.key)})[/dim]")

    keys = config.template_keys()
    choices = [str(index) for index in range(1, len(keys) + 1)]
    answer = Prompt.ask(
        "Template",
        console=console,
        choices=choices,
        default="1",
        show_choices=False,
    )
    return keys[int(answer) - 1]


def _print_templates(console: Console, config: GeneratorConfig) -> None:
    for template in config.templates:
        console.print(f"{escape(template.key)}\t{escape(template.label)}")


def _print_success(console: Console, result: GenerationResult, config: GeneratorConfig) -> None:
    name = escape(result.project_name)
    choice = config.get_template(result.template)
    described = f"'{escape(result.template)}' template"
    if choice is not None:
        described = f"{described} ({escape(choice.label)})"
    console.print()
    console.print(
        f"[green]✅ Project '{name}' has been successfully created using the {described}.[/green]"
    )
    console.print()
    console.print(f"👉 [cyan]cd {name}[/cyan]")
    console.print("👉 [cyan]npm install[/cyan]")
    console.print("👉 [cyan]npm run dev[/cyan] (or your preferred command)")


def _run(args: argparse.Namespace, console: Console, config: GeneratorConfig) -> int:
    if args.list_templates:
        _print_templates(console, config)
        return 0

    name = args.name if args.name is not None else prompt_project_name(console, config)
    template = args.template if args.template is not None else prompt_template(console, config)

    generator = ProjectGenerator(config)
    result = generator.generate(name, template, args.directory)
    _print_success(console, result, config)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    config: GeneratorConfig | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = console or Console()
    try:
        config = config or GeneratorConfig.from_env()
        return _run(args, console, config)
    except (GeneratorError, ValueError) as exc:
        console.print(f"[red]❌ {escape(str(exc))}[/red]")
        return 1
    except Exception:
        LOGGER.debug("project generation failed", exc_info=True)
        console.print_exception()
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
