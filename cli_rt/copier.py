"""Non-clobbering recursive copy of a template directory."""

from __future__ import annotations

import asyncio
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CopyReport:
    """Relative paths of the files written and the ones left untouched."""

    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class TemplateNotFoundError(Exception):
    """Raised when a template directory is missing or unreadable."""

    def __init__(self, template_dir: Path) -> None:
        self.template_dir = template_dir
        super().__init__(f"Invalid template name: {template_dir} does not exist or is not readable")


def check_template_dir(template_dir: Path) -> None:
    """Raise ``TemplateNotFoundError`` unless *template_dir* is a readable directory."""
    if not template_dir.is_dir() or not os.access(template_dir, os.R_OK | os.X_OK):
        raise TemplateNotFoundError(template_dir)


def _copy_tree(source: Path, target: Path) -> CopyReport:
    report = CopyReport()
    target.mkdir(parents=True, exist_ok=True)

    for current, dirnames, filenames in os.walk(source):
        dirnames.sort()
        current_path = Path(current)
        relative_dir = current_path.relative_to(source)
        (target / relative_dir).mkdir(parents=True, exist_ok=True)

        # os.walk lists directory symlinks without descending; recreate them as links
        for dirname in list(dirnames):
            link = current_path / dirname
            if not link.is_symlink():
                continue
            dirnames.remove(dirname)
            relative = (relative_dir / dirname).as_posix()
            destination = target / relative_dir / dirname
            if os.path.lexists(destination):
                report.skipped.append(relative)
                continue
            os.symlink(os.readlink(link), destination, target_is_directory=True)
            report.copied.append(relative)

        for filename in sorted(filenames):
            relative = (relative_dir / filename).as_posix()
            destination = target / relative_dir / filename
            # lexists so a dangling symlink at the destination is also kept
            if os.path.lexists(destination):
                report.skipped.append(relative)
                continue
            shutil.copy2(current_path / filename, destination, follow_symlinks=False)
            report.copied.append(relative)

    return report


async def copy_template(template_dir: Path, target_dir: Path) -> CopyReport:
    """Copy every file under *template_dir* into *target_dir*.

    Files that already exist at the destination are never overwritten, so
    re-running into a non-empty directory only fills in what is missing.
    The template is validated before anything is created.

    Raises:
        TemplateNotFoundError: If the template directory is missing or unreadable.
    """
    check_template_dir(template_dir)
    return await asyncio.to_thread(_copy_tree, template_dir, target_dir)
