"""Interactive questions asked before a project is scaffolded.

Two answers are collected: the project name (free text with a default) and
the template (a numbered single-choice list built from the registry).  Both
questions block on standard input until the operator answers.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from .config import StarterConfig
from .models import ScaffoldRequest
from .registry import template_choices
from .utils import console as default_console


def ask_project_name(default: str, console: Console | None = None) -> str:
    """Ask for the project name, falling back to *default* on empty input."""
    answer = Prompt.ask(
        "[bold]Project name:[/bold]",
        default=default,
        console=console or default_console,
    )
    return (answer or "").strip() or default


def ask_template(console: Console | None = None) -> str:
    """Ask the operator to pick a template and return its key.

    Labels are the template descriptions in registry order.  Only the listed
    numbers are accepted; anything else is asked again.
    """
    out = console or default_console
    choices = template_choices()

    out.print("[bold]Choose a template:[/bold]")
    for index, (label, _key) in enumerate(choices, start=1):
        out.print(f"  [cyan]{index}[/cyan]) {label}")

    selected = IntPrompt.ask(
        "Template",
        choices=[str(i) for i in range(1, len(choices) + 1)],
        default=1,
        show_choices=False,
        console=out,
    )
    return choices[selected - 1][1]


def ask_questions(
    config: StarterConfig | None = None,
    *,
    project_name: str | None = None,
    template_key: str | None = None,
    console: Console | None = None,
) -> ScaffoldRequest:
    """Collect a :class:`ScaffoldRequest` from the operator.

    Answers already supplied through *project_name* or *template_key* (for
    example from command-line flags) are not asked again.
    """
    config = config or StarterConfig()

    if project_name is None or not project_name.strip():
        project_name = ask_project_name(config.default_project_name, console)
    if template_key is None:
        template_key = ask_template(console)

    return ScaffoldRequest(project_name=project_name.strip(), template_key=template_key)
