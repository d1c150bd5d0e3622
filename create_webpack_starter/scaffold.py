"""create-webpack-starter orchestrator.

Runs the scaffolding workflow as a fixed sequence of stages:

1. PROMPT  -- ask for the project name and template.
2. COPY    -- copy the template tree to ``<cwd>/<project name>``.
3. INSTALL -- run ``npm install`` inside the new directory.

The first failing stage ends the run: the error is printed once and the
process exits with status 1.  Nothing done by earlier stages is undone.

Usage::

    create-webpack-starter
    python -m create_webpack_starter --name demo-app --template pug-scss-js
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import StarterConfig
from .copier import copy_template
from .installer import install_deps
from .models import ScaffoldRequest, ScaffoldResult
from .prompts import ask_questions
from .registry import TEMPLATE_ROOT, TEMPLATES, resolve_template_path
from .utils import (
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Drives one scaffolding run.

    The working directory and the template root are injected so the whole
    flow can run against temporary directories.

    Attributes:
        config: CLI settings (default name, install command, hints).
        cwd: Directory the new project is created in.
        template_root: Directory the registry paths are relative to.
    """

    def __init__(
        self,
        config: StarterConfig | None = None,
        *,
        cwd: str | Path | None = None,
        template_root: str | Path = TEMPLATE_ROOT,
        project_name: str | None = None,
        template_key: str | None = None,
    ) -> None:
        self.config = config or StarterConfig()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.template_root = Path(template_root)
        self._project_name = project_name
        self._template_key = template_key

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def prompt(self) -> ScaffoldRequest:
        """Stage 1: collect the operator's answers."""
        return ask_questions(
            self.config,
            project_name=self._project_name,
            template_key=self._template_key,
        )

    def compute_paths(self, request: ScaffoldRequest) -> tuple[Path, Path]:
        """Return ``(template_path, target_dir)`` for *request*."""
        template_path = resolve_template_path(request.template_key, self.template_root)
        target_dir = (self.cwd / request.project_name).resolve()
        return template_path, target_dir

    async def scaffold(self) -> ScaffoldResult:
        """Run every stage in order and return what was produced.

        Raises:
            StarterError: From whichever stage failed first.
        """
        request = self.prompt()
        template_path, target_dir = self.compute_paths(request)

        print_info(f"Creating project in {request.project_name}...")
        await copy_template(template_path, target_dir)

        installed = False
        if not self.config.skip_install:
            print_info("Installing dependencies...")
            await install_deps(target_dir, self.config.install_command)
            installed = True

        return ScaffoldResult(
            project_name=request.project_name,
            template_key=request.template_key,
            target_dir=target_dir,
            installed=installed,
        )

    # ------------------------------------------------------------------
    # Entry
    # ------------------------------------------------------------------

    async def run(self) -> int:
        """Scaffold a project and report the outcome.

        Returns:
            The process exit status: ``0`` on success, ``1`` on any failure.
        """
        try:
            result = await self.scaffold()
        except Exception as exc:
            print_error(str(exc) or exc.__class__.__name__)
            return 1

        self._report_success(result)
        return 0

    def _report_success(self, result: ScaffoldResult) -> None:
        print_success("Done!")
        if not result.installed:
            print_warning("Dependencies were not installed.")
        print_info(f"cd {result.project_name}")
        if not result.installed:
            print_info(self.config.install_command_display)
        print_info(self.config.dev_command)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``create-webpack-starter``."""
    parser = argparse.ArgumentParser(
        prog="create-webpack-starter",
        description="Create a new webpack starter project from a bundled template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-webpack-starter\n"
            "  create-webpack-starter --name demo-app --template pug-scss-ts\n"
            "  create-webpack-starter --skip-install\n"
        ),
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project directory name (asked interactively if omitted)",
    )
    parser.add_argument(
        "--template", "-t",
        choices=list(TEMPLATES),
        default=None,
        help="Template key (asked interactively if omitted)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Copy the template without installing dependencies",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List the available templates and exit",
    )
    return parser


def list_templates() -> None:
    """Print the template registry as a table."""
    print_summary_table(
        {key: descriptor.description for key, descriptor in TEMPLATES.items()},
        title="Templates",
        columns=("Key", "Description"),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``create-webpack-starter``."""
    args = build_parser().parse_args(argv)

    if args.list_templates:
        list_templates()
        return 0

    try:
        config = StarterConfig.from_env()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1
    if args.skip_install:
        config.skip_install = True

    scaffolder = Scaffolder(
        config,
        project_name=args.name,
        template_key=args.template,
    )
    try:
        return asyncio.run(scaffolder.run())
    except KeyboardInterrupt:
        print_error("Aborted.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
