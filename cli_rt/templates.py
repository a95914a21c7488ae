"""Template registry and label resolution.

Maps the labels shown in the template menu, plus the short aliases accepted
by ``--template``, to the canonical template id.  The id doubles as the name
of the template's directory under the templates root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cli_rt.models import Answers, ProjectOptions


@dataclass(frozen=True)
class TemplateSpec:
    """A bundled starter project."""

    id: str
    label: str
    aliases: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        key = text.strip().lower()
        return key == self.id or key == self.label.lower() or key in self.aliases


# Menu order; the first entry is the default choice.
TEMPLATES: tuple[TemplateSpec, ...] = (
    TemplateSpec("react", "React"),
    TemplateSpec(
        "react-styled-components",
        "React with Styled-Components",
        aliases=("styled-components",),
    ),
    TemplateSpec(
        "react-tailwindcss",
        "React with TailwindCSS",
        aliases=("react-tailwind", "tailwindcss", "tailwind"),
    ),
    TemplateSpec("react-chris", "React (Chris's version)"),
    TemplateSpec("react-pau", "React (Pau's version)"),
    TemplateSpec(
        "react-tailwindcss-chris",
        "React with TailwindCSS (Chris's version)",
        aliases=("react-tailwind-chris", "tailwindcss-chris", "tailwind-chris"),
    ),
)

TEMPLATE_LABELS: list[str] = [spec.label for spec in TEMPLATES]
DEFAULT_TEMPLATE_LABEL = TEMPLATES[0].label


class UnknownTemplateError(Exception):
    """Raised when a template label matches none of the known templates."""

    def __init__(self, label: str) -> None:
        self.label = label
        known = ", ".join(spec.id for spec in TEMPLATES)
        super().__init__(f"Unknown template '{label}' (expected one of: {known})")


def resolve_template(label: str) -> TemplateSpec:
    """Return the template whose id, label or alias matches *label*.

    Matching ignores case and surrounding whitespace.

    Raises:
        UnknownTemplateError: If nothing matches.
    """
    for spec in TEMPLATES:
        if spec.matches(label):
            return spec
    raise UnknownTemplateError(label)


def build_project_options(
    answers: Answers,
    templates_root: Path,
    cwd: Path | None = None,
) -> ProjectOptions:
    """Resolve *answers* into source and target directories.

    The template directory is ``<templates_root>/<id>`` and the target is
    ``<cwd>/<project name>``.  Nothing on disk is touched.
    """
    spec = resolve_template(answers.template)
    base = cwd or Path.cwd()
    return ProjectOptions(
        template=spec.id,
        project_name=answers.project_name,
        template_dir=templates_root / spec.id,
        target_dir=base / answers.project_name,
        install_firebase=answers.install_firebase,
        dependencies=dict(answers.dependencies),
    )
