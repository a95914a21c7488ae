"""cli-rt -- scaffold React projects from bundled templates.

Quick usage::

    import asyncio
    from cli_rt import CliOptions, ScaffoldPipeline

    cli = CliOptions(template="tailwind", name="my-app", firebase=True)
    result = asyncio.run(ScaffoldPipeline().run(cli))
    print(result.options.target_dir)
"""

from cli_rt.config import Settings
from cli_rt.models import Answers, CliOptions, ProjectOptions, parse_packages
from cli_rt.pipeline import ScaffoldPipeline, ScaffoldResult
from cli_rt.templates import TEMPLATES, resolve_template

__version__ = "1.0.0"

__all__ = [
    "Answers",
    "CliOptions",
    "ProjectOptions",
    "ScaffoldPipeline",
    "ScaffoldResult",
    "Settings",
    "TEMPLATES",
    "parse_packages",
    "resolve_template",
]
