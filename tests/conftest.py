"""Shared pytest fixtures for the cli-rt test suite.

Provides reusable fixtures for:
- Temporary template roots
- A scripted prompter that records which questions were asked
- Mocked package-manager installs
- Mock subprocess helpers
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cli_rt.config import Settings
from cli_rt.prompts import Prompter
from cli_rt.templates import TEMPLATES


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def _write_template(root: Path, template_id: str) -> Path:
    template_dir = root / template_id
    (template_dir / "src").mkdir(parents=True)
    (template_dir / "public").mkdir()
    (template_dir / "package.json").write_text(
        f'{{"name": "{template_id}", "dependencies": {{"react": "^17.0.2"}}}}\n',
        encoding="utf-8",
    )
    (template_dir / "src" / "App.js").write_text(
        f"// {template_id}\nexport default function App() {{ return null; }}\n",
        encoding="utf-8",
    )
    (template_dir / "public" / "index.html").write_text(
        "<div id=\"root\"></div>\n", encoding="utf-8"
    )
    return template_dir


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A templates root holding a small copy of every known template."""
    root = tmp_path / "templates"
    root.mkdir()
    for spec in TEMPLATES:
        _write_template(root, spec.id)
    yield root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory the scaffolded project is created in."""
    work = tmp_path / "work"
    work.mkdir()
    yield work


@pytest.fixture
def settings(templates_root: Path) -> Settings:
    return Settings(templates_dir=templates_root, package_manager="npm")


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------

class ScriptedPrompter(Prompter):
    """Prompter that returns canned answers and records every question asked."""

    def __init__(
        self,
        template: str = "React",
        firebase: bool = False,
        name: str = "untitled-project",
    ) -> None:
        super().__init__()
        self.template = template
        self.firebase = firebase
        self.name = name
        self.asked: list[str] = []

    def ask_template(self) -> str:
        self.asked.append("template")
        return self.template

    def ask_firebase(self) -> bool:
        self.asked.append("firebase")
        return self.firebase

    def ask_name(self) -> str:
        self.asked.append("name")
        return self.name


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


# ---------------------------------------------------------------------------
# Installs / subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_installs():
    """Patch both install entry points used by the pipeline.

    Usage::

        def test_x(mock_installs):
            install, project_install = mock_installs
            ...
            install.assert_awaited()
    """
    install = AsyncMock(return_value="")
    project_install = AsyncMock(return_value="")
    with patch("cli_rt.pipeline.install", install), patch(
        "cli_rt.pipeline.project_install", project_install
    ):
        yield install, project_install


@pytest.fixture
def mock_subprocess():
    """Factory for a fake ``asyncio`` subprocess.

    Usage::

        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0, stdout=b"ok")
            with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
                ...
    """

    def factory(
        returncode: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
    ) -> MagicMock:
        proc = MagicMock()
        proc.returncode = returncode
        proc.communicate = AsyncMock(return_value=(stdout, stderr))
        proc.wait = AsyncMock(return_value=returncode)
        proc.kill = MagicMock()
        return proc

    return factory

