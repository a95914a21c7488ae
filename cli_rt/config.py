"""cli-rt configuration.

Tunables that are not exposed as command-line flags.  Settings use a Pydantic
v2 model so they are validated at construction time and can be loaded from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_PROJECT_NAME = "untitled-project"
DEFAULT_FIREBASE_VERSION = "^9.6.2"

PackageManager = Literal["npm", "yarn", "pnpm"]


class Settings(BaseModel):
    """Global cli-rt settings.

    Instances are created once by the CLI entry point and passed to the
    pipeline together with the parsed options.
    """

    model_config = ConfigDict(frozen=True)

    templates_dir: Optional[Path] = Field(
        default=None,
        description="Explicit templates root; overrides both package and test-mode lookup",
    )
    package_manager: Optional[PackageManager] = Field(
        default=None,
        description="Force a package manager instead of detecting it from lockfiles",
    )
    install_timeout: Optional[float] = Field(
        default=None, gt=0, description="Per-install timeout in seconds (None waits forever)"
    )
    firebase_version: str = Field(default=DEFAULT_FIREBASE_VERSION, min_length=1)

    def templates_root(self, test_mode: bool = False, cwd: Path | None = None) -> Path:
        """Return the directory that holds one subdirectory per template.

        Resolution order: ``templates_dir`` if set, ``<cwd>/templates`` in
        test mode, otherwise the ``templates`` directory shipped inside the
        installed package.
        """
        if self.templates_dir is not None:
            return self.templates_dir
        if test_mode:
            return (cwd or Path.cwd()) / "templates"
        return PACKAGE_DIR / "templates"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CLI_RT_TEMPLATES_DIR, CLI_RT_PACKAGE_MANAGER,
            CLI_RT_INSTALL_TIMEOUT, CLI_RT_FIREBASE_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CLI_RT_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["CLI_RT_TEMPLATES_DIR"])
        if os.environ.get("CLI_RT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CLI_RT_PACKAGE_MANAGER"].strip().lower()
        if os.environ.get("CLI_RT_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = float(os.environ["CLI_RT_INSTALL_TIMEOUT"])
        if os.environ.get("CLI_RT_FIREBASE_VERSION"):
            kwargs["firebase_version"] = os.environ["CLI_RT_FIREBASE_VERSION"]
        return cls(**kwargs)
