"""Package installation for scaffolded projects.

Wraps npm, yarn and pnpm behind two calls: ``install`` adds specific
``name@version`` pairs and ``project_install`` installs whatever the
project's own ``package.json`` declares.  Every failure is raised as
``InstallFailedError`` so callers can decide whether it is fatal.
"""

from __future__ import annotations

from pathlib import Path

from cli_rt.config import PackageManager
from cli_rt.models import DependencyMap
from cli_rt.utils import run_command

# Checked in order; the first lockfile found decides.
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("package-lock.json", "npm"),
)

_ADD_VERB: dict[str, str] = {
    "npm": "install",
    "yarn": "add",
    "pnpm": "add",
}


class InstallFailedError(Exception):
    """Raised when a package-manager command fails, times out or cannot start."""

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = ""):
        self.command = command or []
        self.stderr = stderr
        super().__init__(message)


def detect_package_manager(cwd: Path) -> PackageManager:
    """Pick the package manager whose lockfile is present in *cwd* (npm if none)."""
    for lockfile, manager in LOCKFILES:
        if (cwd / lockfile).exists():
            return manager
    return "npm"


def build_add_command(manager: PackageManager, dependencies: DependencyMap) -> list[str]:
    """Build the command that installs the given ``name -> version`` pairs."""
    specs = [f"{name}@{version}" for name, version in dependencies.items()]
    return [manager, _ADD_VERB[manager], *specs]


async def _run_install(cmd: list[str], cwd: Path, timeout: float | None) -> str:
    try:
        returncode, stdout, stderr = await run_command(cmd, cwd=cwd, timeout=timeout)
    except FileNotFoundError as exc:
        raise InstallFailedError(
            f"'{cmd[0]}' was not found on PATH", command=cmd, stderr=str(exc)
        ) from exc

    if returncode != 0:
        raise InstallFailedError(
            f"'{' '.join(cmd)}' exited with code {returncode}",
            command=cmd,
            stderr=stderr,
        )
    return stdout


async def install(
    dependencies: DependencyMap,
    cwd: Path,
    manager: PackageManager | None = None,
    timeout: float | None = None,
) -> str:
    """Install specific packages into the project at *cwd*.

    Does nothing when *dependencies* is empty.

    Returns:
        The package manager's stdout.

    Raises:
        InstallFailedError: On a non-zero exit, a timeout, or a missing executable.
    """
    if not dependencies:
        return ""
    cmd = build_add_command(manager or detect_package_manager(cwd), dependencies)
    return await _run_install(cmd, cwd, timeout)


async def project_install(
    cwd: Path,
    manager: PackageManager | None = None,
    timeout: float | None = None,
) -> str:
    """Install the dependencies declared by the project at *cwd*."""
    cmd = [manager or detect_package_manager(cwd), "install"]
    return await _run_install(cmd, cwd, timeout)
