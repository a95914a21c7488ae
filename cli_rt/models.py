"""Pydantic v2 models describing one scaffold run.

``CliOptions`` is what the user typed, ``Answers`` is the complete set of
choices once the prompts have filled the gaps, and ``ProjectOptions`` is the
resolved plan handed to the copier and installers.  All three are frozen.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cli_rt.config import DEFAULT_PROJECT_NAME

DependencyMap = dict[str, str]


def parse_packages(specs: list[str] | None) -> DependencyMap:
    """Turn ``name`` / ``name@version`` specifiers into a dependency map.

    A missing or empty version becomes ``"latest"``.  A leading ``@`` marks
    an npm scope and stays part of the name.  Later duplicates win.

    Examples::

        parse_packages(["lodash@4.0.0", "express"])
            -> {"lodash": "4.0.0", "express": "latest"}
        parse_packages(["@types/node@20"]) -> {"@types/node": "20"}
    """
    dependencies: DependencyMap = {}
    for raw in specs or []:
        spec = raw.strip()
        if not spec:
            continue
        separator = spec.rfind("@")
        if separator > 0:
            name, version = spec[:separator], spec[separator + 1:]
        else:
            name, version = spec, ""
        dependencies[name] = version or "latest"
    return dependencies


class CliOptions(BaseModel):
    """Flags parsed from the command line. ``None`` means "not supplied"."""

    model_config = ConfigDict(frozen=True)

    packages: Optional[list[str]] = None
    template: Optional[str] = None
    firebase: Optional[bool] = None
    test: bool = False
    name: Optional[str] = None
    help: bool = False

    @property
    def dependencies(self) -> DependencyMap:
        return parse_packages(self.packages)


class Answers(BaseModel):
    """Every choice needed to scaffold, whether it came from a flag or a prompt."""

    model_config = ConfigDict(frozen=True)

    template: str = Field(..., description="Template label or alias as typed by the user")
    install_firebase: bool = False
    project_name: str = DEFAULT_PROJECT_NAME
    dependencies: DependencyMap = Field(default_factory=dict)

    @field_validator("project_name")
    @classmethod
    def _default_blank_name(cls, value: str) -> str:
        return value.strip() or DEFAULT_PROJECT_NAME


class ProjectOptions(BaseModel):
    """Resolved configuration for a single scaffold operation."""

    model_config = ConfigDict(frozen=True)

    template: str = Field(..., description="Canonical template id")
    project_name: str
    template_dir: Path
    target_dir: Path
    install_firebase: bool = False
    dependencies: DependencyMap = Field(default_factory=dict)
