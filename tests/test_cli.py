# tests/test_cli.py
"""Tests for the CLI."""

import json
import os

import pytest
import yaml
from typer.testing import CliRunner

from quizmultiplier import __version__
from quizmultiplier.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, temp_dir, clean_env):
    monkeypatch.chdir(temp_dir)


@pytest.fixture
def fact_file(temp_dir):
    path = os.path.join(temp_dir, "fact.yaml")
    with open(path, "w") as f:
        yaml.safe_dump(
            {
                "id": "fr-21",
                "subject": "Polity",
                "topic": "Fundamental Rights",
                "content": "Right to Life",
                "source": "Article 21",
                "importance": "high",
                "concepts": [
                    "fundamental rights",
                    "personal liberty",
                    "due process",
                    "judicial review",
                ],
                "relatedFacts": ["Article 14", "Article 19", "Article 32"],
            },
            f,
        )
    return path


@pytest.fixture
def questions_file(runner, temp_dir, fact_file):
    path = os.path.join(temp_dir, "questions.json")
    result = runner.invoke(app, ["generate", fact_file, "--seed", "1", "--output", path])
    assert result.exit_code == 0
    return path


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "quizmultiplier" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestGenerateCommand:
    def test_table_output(self, runner, fact_file):
        result = runner.invoke(app, ["generate", fact_file, "--seed", "1"])
        assert result.exit_code == 0
        assert "Generated" in result.output

    def test_json_output(self, runner, fact_file):
        result = runner.invoke(app, ["generate", fact_file, "--seed", "1", "--format", "json"])
        assert result.exit_code == 0

        questions = json.loads(result.stdout)
        assert questions
        assert all(q["baseFactId"].startswith("fr-21") for q in questions)

    def test_output_file(self, questions_file):
        with open(questions_file) as f:
            assert json.load(f)

    def test_unknown_format(self, runner, fact_file):
        result = runner.invoke(app, ["generate", fact_file, "--format", "xml"])
        assert result.exit_code == 1
        assert "unknown format" in result.output

    def test_missing_fact_file(self, runner):
        result = runner.invoke(app, ["generate", "missing.yaml"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestValidateCommand:
    def test_reports_invalid_questions(self, runner, temp_dir, questions_file):
        with open(questions_file) as f:
            questions = json.load(f)
        questions[0]["questionText"] = "Short?"
        broken = os.path.join(temp_dir, "broken.json")
        with open(broken, "w") as f:
            json.dump(questions, f)

        result = runner.invoke(app, ["validate", broken, "--issues-only"])
        assert result.exit_code == 1
        assert "Validation" in result.output

    def test_quality_review_flag(self, runner, temp_dir, questions_file):
        with open(questions_file) as f:
            questions = json.load(f)
        questions[0]["questionText"] = "Short?"
        broken = os.path.join(temp_dir, "broken.json")
        with open(broken, "w") as f:
            json.dump(questions, f)

        result = runner.invoke(app, ["validate", broken, "--quality"])
        assert result.exit_code == 1
        assert "Validation" in result.output

    def test_missing_file(self, runner):
        result = runner.invoke(app, ["validate", "missing.json"])
        assert result.exit_code == 1


class TestFactorCommand:
    def test_shows_plan(self, runner, fact_file):
        result = runner.invoke(app, ["factor", fact_file])
        assert result.exit_code == 0
        assert "Factor" in result.output
        assert "15" in result.output


class TestReportCommand:
    def test_plain_report(self, runner, questions_file):
        result = runner.invoke(app, ["report", questions_file, "--plain"])
        assert result.exit_code == 0
        assert "UPSC Question Pattern Analysis Report" in result.output

    def test_empty_set(self, runner, temp_dir):
        path = os.path.join(temp_dir, "empty.json")
        with open(path, "w") as f:
            f.write("[]")
        result = runner.invoke(app, ["report", path])
        assert result.exit_code == 1


class TestConfigCommand:
    def test_config_shows_settings(self, runner):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "max_concurrent_generations" in result.output
        assert "No config file found" in result.output
