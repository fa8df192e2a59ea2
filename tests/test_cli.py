"""CLI integration tests for verstree."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from verstree.cli import app


@pytest.fixture
def initialized(runner: CliRunner, workspace: Path) -> Path:
    """Workspace with .verstree initialized."""
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    return workspace


@pytest.fixture
def history(runner: CliRunner, initialized: Path) -> Path:
    """notes.md recorded twice (second version appends a line), app.py once."""
    notes = initialized / "notes.md"
    notes.write_text("alpha\nbeta\n")
    (initialized / "app.py").write_text("print('hi')\n")
    assert runner.invoke(app, ["record", "notes.md", "app.py"]).exit_code == 0

    notes.write_text("alpha\nbeta\ngamma\n")
    assert runner.invoke(app, ["record", "notes.md"]).exit_code == 0
    return initialized


class TestVersionCommand:
    """Tests for --version flag."""

    @pytest.mark.cli
    def test_version_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "verstree 0.1.0" in result.output

    @pytest.mark.cli
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ["init", "record", "tree", "log", "show", "diffstat", "restore"]:
            assert command in result.output


class TestInitCommand:
    """Tests for verstree init."""

    @pytest.mark.cli
    def test_creates_store(self, runner: CliRunner, workspace: Path) -> None:
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (workspace / ".verstree" / "config.toml").exists()
        assert (workspace / ".verstree" / "history").is_dir()

    @pytest.mark.cli
    def test_keeps_existing_config(self, runner: CliRunner, initialized: Path) -> None:
        config_path = initialized / ".verstree" / "config.toml"
        config_path.write_text("[store]\nmax_versions = 2\n")

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert "max_versions = 2" in config_path.read_text()

    @pytest.mark.cli
    def test_store_option(self, runner: CliRunner, workspace: Path) -> None:
        result = runner.invoke(app, ["--store", "custom", "init"])
        assert result.exit_code == 0
        assert (workspace / "custom" / "config.toml").exists()
        assert not (workspace / ".verstree").exists()


class TestRecordCommand:
    """Tests for verstree record."""

    @pytest.mark.cli
    def test_requires_init(self, runner: CliRunner, workspace: Path) -> None:
        (workspace / "a.txt").write_text("a")
        result = runner.invoke(app, ["record", "a.txt"])
        assert result.exit_code == 1
        assert "verstree init" in result.output

    @pytest.mark.cli
    def test_missing_file(self, runner: CliRunner, initialized: Path) -> None:
        result = runner.invoke(app, ["record", "nope.txt"])
        assert result.exit_code == 1
        assert "File not found" in result.output

    @pytest.mark.cli
    def test_binary_file_rejected(self, runner: CliRunner, initialized: Path) -> None:
        (initialized / "blob.bin").write_bytes(b"\xff\xfe\x00")
        result = runner.invoke(app, ["record", "blob.bin"])
        assert result.exit_code == 1
        assert "UTF-8" in result.output

    @pytest.mark.cli
    def test_records_versions(self, runner: CliRunner, initialized: Path) -> None:
        (initialized / "a.txt").write_text("one\n")
        result = runner.invoke(app, ["record", "a.txt"])
        assert result.exit_code == 0
        assert "version 1" in result.output

    @pytest.mark.cli
    def test_json_reports_unchanged(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["--json", "-q", "record", "notes.md"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["recorded"][0]["version"] == 0


class TestTreeCommand:
    """Tests for verstree tree."""

    @pytest.mark.cli
    def test_empty_store(self, runner: CliRunner, initialized: Path) -> None:
        result = runner.invoke(app, ["tree"])
        assert result.exit_code == 0
        assert "No versioned files." in result.output

    @pytest.mark.cli
    def test_renders_groups_and_versions(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["tree"])
        assert result.exit_code == 0
        assert "Today" in result.output
        assert "2 files" in result.output
        assert "notes.md" in result.output
        assert "MD" in result.output
        assert "Version 2" in result.output
        assert "+1 -0" in result.output
        assert "Initial version" in result.output

    @pytest.mark.cli
    def test_json(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["--json", "-q", "tree"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)

        assert [g["label"] for g in data["groups"]] == ["Today"]
        files = data["groups"][0]["files"]
        assert [Path(f["identity"]).name for f in files] == ["notes.md", "app.py"]
        notes_versions = files[0]["versions"]
        assert [v["version_number"] for v in notes_versions] == [2, 1]
        assert notes_versions[0]["diff_stats"] == {"added": 1, "removed": 0}
        assert notes_versions[1]["diff_stats"] is None


class TestLogCommand:
    """Tests for verstree log."""

    @pytest.mark.cli
    def test_lists_versions(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["log", "notes.md"])
        assert result.exit_code == 0
        assert "+1 -0" in result.output
        assert "Initial version" in result.output

    @pytest.mark.cli
    def test_json_newest_first(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["--json", "-q", "log", "notes.md"])
        data = json.loads(result.stdout)
        assert [v["index"] for v in data["versions"]] == [0, 1]

    @pytest.mark.cli
    def test_untracked_file(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["log", "other.md"])
        assert result.exit_code == 1
        assert "No versions recorded" in result.output


class TestShowCommand:
    """Tests for verstree show."""

    @pytest.mark.cli
    def test_show_latest(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["show", "notes.md"])
        assert result.exit_code == 0
        assert result.stdout == "alpha\nbeta\ngamma\n"

    @pytest.mark.cli
    def test_show_version(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["show", "notes.md", "--version", "1"])
        assert result.exit_code == 0
        assert result.stdout == "alpha\nbeta\n"

    @pytest.mark.cli
    def test_show_missing_version(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["show", "notes.md", "-n", "7"])
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestDiffstatCommand:
    """Tests for verstree diffstat."""

    @pytest.mark.cli
    def test_latest(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["diffstat", "notes.md"])
        assert result.exit_code == 0
        assert "+1 -0" in result.output

    @pytest.mark.cli
    def test_initial_version(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["diffstat", "notes.md", "--version", "1"])
        assert result.exit_code == 0
        assert "Initial version" in result.output

    @pytest.mark.cli
    def test_json(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["--json", "-q", "diffstat", "app.py"])
        data = json.loads(result.stdout)
        assert data["version"] == 1
        assert data["diff_stats"] is None

    @pytest.mark.cli
    def test_against_file_needs_no_store(self, runner: CliRunner, workspace: Path) -> None:
        (workspace / "new.txt").write_text("a\nb\nc\nd")
        (workspace / "old.txt").write_text("a\nd")
        result = runner.invoke(app, ["diffstat", "new.txt", "--against", "old.txt"])
        assert result.exit_code == 0
        assert "+2 -0" in result.output

    @pytest.mark.cli
    def test_untracked(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["diffstat", "other.md"])
        assert result.exit_code == 1


class TestRestoreCommand:
    """Tests for verstree restore."""

    @pytest.mark.cli
    def test_restores_and_keeps_current(self, runner: CliRunner, history: Path) -> None:
        """Unrecorded edits are saved as a version before restoring."""
        notes = history / "notes.md"
        notes.write_text("rewritten\n")

        result = runner.invoke(app, ["restore", "notes.md", "--version", "1"])

        assert result.exit_code == 0
        assert notes.read_text() == "alpha\nbeta\n"
        shown = runner.invoke(app, ["show", "notes.md", "--version", "3"])
        assert shown.stdout == "rewritten\n"

    @pytest.mark.cli
    def test_unknown_version(self, runner: CliRunner, history: Path) -> None:
        result = runner.invoke(app, ["restore", "notes.md", "--version", "9"])
        assert result.exit_code == 1
        assert (history / "notes.md").read_text() == "alpha\nbeta\ngamma\n"


class TestConfigEffects:
    """Tests for config.toml driven behavior."""

    @pytest.mark.cli
    def test_max_versions_prunes(self, runner: CliRunner, initialized: Path) -> None:
        (initialized / ".verstree" / "config.toml").write_text("[store]\nmax_versions = 1\n")
        target = initialized / "a.txt"
        for text in ["one", "two"]:
            target.write_text(text)
            runner.invoke(app, ["record", "a.txt"])

        result = runner.invoke(app, ["--json", "-q", "log", "a.txt"])
        data = json.loads(result.stdout)
        assert len(data["versions"]) == 1
        assert data["versions"][0]["diff_stats"] is None

    @pytest.mark.cli
    def test_invalid_config(self, runner: CliRunner, initialized: Path) -> None:
        (initialized / ".verstree" / "config.toml").write_text('[display]\norder = "up"\n')
        result = runner.invoke(app, ["tree"])
        assert result.exit_code == 1
        assert "Invalid config" in result.output


class TestStoreErrors:
    """Tests for damaged store handling."""

    @pytest.mark.cli
    def test_corrupt_index(self, runner: CliRunner, history: Path) -> None:
        (history / ".verstree" / "history" / "index.json").write_text("{broken")
        result = runner.invoke(app, ["tree"])
        assert result.exit_code == 1
        assert "Corrupt store index" in result.output

    @pytest.mark.cli
    def test_undecodable_index(self, runner: CliRunner, history: Path) -> None:
        (history / ".verstree" / "history" / "index.json").write_bytes(b"\xff\xfe")
        result = runner.invoke(app, ["tree"])
        assert result.exit_code == 1
        assert "Corrupt store index" in result.output
