"""Tests for the option records and package-specifier parsing (cli_rt.models)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cli_rt.models import Answers, CliOptions, ProjectOptions, parse_packages

pytestmark = pytest.mark.unit


class TestParsePackages:
    def test_name_and_version(self):
        assert parse_packages(["lodash@4.0.0", "express"]) == {
            "lodash": "4.0.0",
            "express": "latest",
        }

    def test_none_and_empty(self):
        assert parse_packages(None) == {}
        assert parse_packages([]) == {}
        assert parse_packages(["", "  "]) == {}

    def test_empty_version_is_latest(self):
        assert parse_packages(["axios@"]) == {"axios": "latest"}

    def test_version_range_kept_verbatim(self):
        assert parse_packages(["react-router-dom@^6.2.1"]) == {"react-router-dom": "^6.2.1"}

    def test_scoped_package(self):
        assert parse_packages(["@types/node@20.1.0", "@emotion/react"]) == {
            "@types/node": "20.1.0",
            "@emotion/react": "latest",
        }

    def test_later_duplicate_wins(self):
        assert parse_packages(["lodash@3", "lodash@4"]) == {"lodash": "4"}


class TestCliOptions:
    def test_defaults_mean_not_supplied(self):
        cli = CliOptions()
        assert cli.packages is None
        assert cli.template is None
        assert cli.firebase is None
        assert cli.name is None
        assert cli.test is False
        assert cli.help is False
        assert cli.dependencies == {}

    def test_dependencies_property(self):
        cli = CliOptions(packages=["lodash@4.0.0", "express"])
        assert cli.dependencies == {"lodash": "4.0.0", "express": "latest"}

    def test_frozen(self):
        cli = CliOptions(template="react")
        with pytest.raises(ValidationError):
            cli.template = "react-pau"


class TestAnswers:
    def test_defaults(self):
        answers = Answers(template="React")
        assert answers.install_firebase is False
        assert answers.project_name == "untitled-project"
        assert answers.dependencies == {}

    def test_blank_name_falls_back_to_default(self):
        assert Answers(template="React", project_name="   ").project_name == "untitled-project"

    def test_name_is_stripped(self):
        assert Answers(template="React", project_name="  my-app ").project_name == "my-app"

    def test_template_required(self):
        with pytest.raises(ValidationError):
            Answers()


class TestProjectOptions:
    def test_paths_are_paths(self, tmp_path: Path):
        options = ProjectOptions(
            template="react",
            project_name="foo",
            template_dir=str(tmp_path / "templates" / "react"),
            target_dir=str(tmp_path / "foo"),
        )
        assert options.template_dir == tmp_path / "templates" / "react"
        assert options.target_dir == tmp_path / "foo"
        assert options.install_firebase is False
