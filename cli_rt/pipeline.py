"""Scaffold pipeline orchestrator.

Runs one scaffold from parsed flags to an installed project:

1. Ask for whatever the flags did not supply.
2. Resolve the template label into source and target directories.
3. Copy the template into the target without overwriting anything.
4. Install firebase (if requested), the custom packages (if any) and the
   project's own dependencies.

Steps 1-3 are fatal on failure.  The installs are independent: a failed
install is reported and the next one still runs.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.markup import escape

from cli_rt.config import Settings
from cli_rt.copier import CopyReport, copy_template
from cli_rt.installer import InstallFailedError, install, project_install
from cli_rt.models import Answers, CliOptions, ProjectOptions
from cli_rt.prompts import Prompter, collect_answers
from cli_rt.templates import build_project_options
from cli_rt.utils import console, print_summary_table, step_spinner

# Install step keys, in the order they run.
FIREBASE = "firebase"
CUSTOM = "custom dependencies"
PROJECT = "dependencies"


@dataclass
class ScaffoldResult:
    """Outcome of a scaffold run.

    ``installs`` maps each install step that ran to ``"success"`` or
    ``"failure"``; steps that were not requested are absent.
    """

    options: ProjectOptions
    copy: CopyReport
    installs: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return all(status == "success" for status in self.installs.values())


class ScaffoldPipeline:
    """Drives a single scaffold run.

    Attributes:
        settings: Tunables loaded from the environment.
        prompter: Source of answers for questions the flags left open.
        cwd: Directory the project folder is created in.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        prompter: Prompter | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.prompter = prompter or Prompter()
        self.cwd = cwd or Path.cwd()

    async def run(self, cli: CliOptions, answers: Answers | None = None) -> ScaffoldResult:
        """Scaffold a project from the parsed command-line options.

        *answers* are collected from the prompter when not given.

        Raises:
            UnknownTemplateError: If the template label matches no template.
            TemplateNotFoundError: If the template directory is missing.
        """
        if answers is None:
            answers = collect_answers(cli, self.prompter)
        templates_root = self.settings.templates_root(test_mode=cli.test, cwd=self.cwd)
        options = build_project_options(answers, templates_root, cwd=self.cwd)

        report = await self.copy(options)
        result = ScaffoldResult(options=options, copy=report)

        await self.install_firebase(options, result)
        await self.install_custom_dependencies(options, result)
        await self.install_dependencies(options, result)

        self._print_summary(result)
        return result

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def copy(self, options: ProjectOptions) -> CopyReport:
        with step_spinner("Copying template...") as spinner:
            report = await copy_template(options.template_dir, options.target_dir)
            spinner.success(
                f"Successfully imported template [bold cyan]{options.template}[/bold cyan]!"
            )
        return report

    async def install_firebase(self, options: ProjectOptions, result: ScaffoldResult) -> None:
        if not options.install_firebase:
            return
        await self._install_step(
            FIREBASE,
            "Installing firebase...",
            "Successfully installed firebase",
            "Oh, something went wrong while installing firebase. :c",
            lambda: install(
                {"firebase": self.settings.firebase_version},
                options.target_dir,
                manager=self.settings.package_manager,
                timeout=self.settings.install_timeout,
            ),
            result,
        )

    async def install_custom_dependencies(
        self, options: ProjectOptions, result: ScaffoldResult
    ) -> None:
        if not options.dependencies:
            return
        await self._install_step(
            CUSTOM,
            "Installing custom dependencies...",
            "Successfully installed custom dependencies",
            "Oh, something went wrong while installing custom dependencies. :c",
            lambda: install(
                options.dependencies,
                options.target_dir,
                manager=self.settings.package_manager,
                timeout=self.settings.install_timeout,
            ),
            result,
        )

    async def install_dependencies(self, options: ProjectOptions, result: ScaffoldResult) -> None:
        ok = await self._install_step(
            PROJECT,
            "Installing dependencies...",
            "Successfully installed dependencies",
            "Oh, something went wrong while installing the dependencies. :c",
            lambda: project_install(
                options.target_dir,
                manager=self.settings.package_manager,
                timeout=self.settings.install_timeout,
            ),
            result,
        )
        if ok:
            console.print("[bold black on cyan] DONE [/bold black on cyan]")

    async def _install_step(
        self,
        key: str,
        running: str,
        succeeded: str,
        failed: str,
        action: Callable[[], Awaitable[Any]],
        result: ScaffoldResult,
    ) -> bool:
        with step_spinner(running) as spinner:
            try:
                await action()
            except InstallFailedError as exc:
                result.installs[key] = "failure"
                result.errors[key] = str(exc)
                spinner.error(f"[red]ERROR![/red] {failed}")
                if exc.stderr:
                    console.print(f"[dim]{escape(exc.stderr)}[/dim]")
                return False
            result.installs[key] = "success"
            spinner.success(succeeded)
        return True

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_summary(self, result: ScaffoldResult) -> None:
        data = {
            "Project": result.options.project_name,
            "Template": result.options.template,
            "Location": escape(str(result.options.target_dir)),
            "Files copied": str(len(result.copy.copied)),
            "Files kept": str(len(result.copy.skipped)),
        }
        for key, status in result.installs.items():
            data[f"Install {key}"] = status
        print_summary_table(data, title="Scaffold Summary")
