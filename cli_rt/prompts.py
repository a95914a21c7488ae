"""Interactive questions asked when a flag was not supplied.

The questions always run in the fixed order template -> firebase -> name and
a question is skipped whenever its answer is already known from the command
line.
"""

from __future__ import annotations

from enum import Enum

from rich.console import Console
from rich.prompt import Confirm, Prompt

from cli_rt.config import DEFAULT_PROJECT_NAME
from cli_rt.models import Answers, CliOptions
from cli_rt.templates import DEFAULT_TEMPLATE_LABEL, TEMPLATE_LABELS
from cli_rt.utils import console as default_console


class PromptStep(str, Enum):
    """One question of the prompt sequence, in the order they are asked."""
    TEMPLATE = "template"
    FIREBASE = "firebase"
    NAME = "name"


def pending_steps(cli: CliOptions) -> list[PromptStep]:
    """Return the questions whose answers the command line did not supply.

    When both the template and the name come from flags the run is
    non-interactive and firebase stays off unless ``--firebase`` was given.
    """
    if cli.template is not None and cli.name is not None:
        return []

    steps: list[PromptStep] = []
    if cli.template is None:
        steps.append(PromptStep.TEMPLATE)
    if not cli.firebase:
        steps.append(PromptStep.FIREBASE)
    if cli.name is None:
        steps.append(PromptStep.NAME)
    return steps


class Prompter:
    """Asks the three questions on the terminal using ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask_template(self) -> str:
        self.console.print("[bold]What template do you want to use?[/bold]")
        for index, label in enumerate(TEMPLATE_LABELS, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]) {label}")
        default = str(TEMPLATE_LABELS.index(DEFAULT_TEMPLATE_LABEL) + 1)
        choice = Prompt.ask(
            "Template",
            choices=[str(i) for i in range(1, len(TEMPLATE_LABELS) + 1)],
            default=default,
            console=self.console,
        )
        return TEMPLATE_LABELS[int(choice) - 1]

    def ask_firebase(self) -> bool:
        return Confirm.ask(
            "Do you want to install firebase?", default=False, console=self.console
        )

    def ask_name(self) -> str:
        return Prompt.ask(
            "What's the name of your project?",
            default=DEFAULT_PROJECT_NAME,
            console=self.console,
        )


def collect_answers(cli: CliOptions, prompter: Prompter | None = None) -> Answers:
    """Fill in everything the flags left open and return the full ``Answers``.

    Call this before starting the event loop.  A blocking read inside
    ``asyncio.run`` only sees Ctrl-C as a task cancellation, so the first
    interrupt would not reach ``input()``.
    """
    prompter = prompter or Prompter()
    values = {
        "template": cli.template,
        "install_firebase": bool(cli.firebase),
        "project_name": cli.name if cli.name is not None else DEFAULT_PROJECT_NAME,
    }

    for step in pending_steps(cli):
        if step is PromptStep.TEMPLATE:
            values["template"] = prompter.ask_template()
        elif step is PromptStep.FIREBASE:
            values["install_firebase"] = prompter.ask_firebase()
        elif step is PromptStep.NAME:
            values["project_name"] = prompter.ask_name()

    return Answers(dependencies=cli.dependencies, **values)
