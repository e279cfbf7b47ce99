"""Tests for the command line interface."""

import logging

import pytest
from typer.testing import CliRunner

from cli.parser import app
from event_presets.backends.ics_store import IcsEventStore
from event_presets.models.authorization import AuthorizationState
from event_presets.storage.preset_repository import PresetRepository

runner = CliRunner()


@pytest.fixture
def env(tmp_path):
    """Environment pointing every file into tmp_path."""
    return {
        "DATA_DIR": str(tmp_path / "data"),
        "LOG_DIR": str(tmp_path / "logs"),
        "ASSUME_ACCESS_GRANTED": "true",
        "CALENDAR_NAME": "Presets",
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handlers installed by the CLI callback."""
    yield
    logging.getLogger().handlers.clear()


def invoke(env, *args, **kwargs):
    return runner.invoke(app, list(args), env=env, **kwargs)


def load_presets(tmp_path):
    return PresetRepository(tmp_path / "data" / "presets.json").load()


def test_ls_empty(env):
    """Test listing without presets."""
    result = invoke(env, "ls")
    assert result.exit_code == 0
    assert "No presets found" in result.output


def test_add_and_ls(env, tmp_path):
    """Test adding a preset writes the archive and the calendar."""
    result = invoke(env, "add", "Team lunch", "2030-01-01 12:30")
    assert result.exit_code == 0
    assert "Preset 'Team lunch' added" in result.output

    presets = load_presets(tmp_path)
    assert len(presets) == 1
    store = IcsEventStore(tmp_path / "data" / "calendar.ics", authorization=AuthorizationState())
    assert store.fetch(presets[0].external_identifier).title == "Team lunch"

    result = invoke(env, "ls")
    assert result.exit_code == 0
    assert "Team lunch" in result.output
    assert "2030-01-01 12:30" in result.output


def test_add_invalid_date(env):
    """Test malformed dates are rejected."""
    result = invoke(env, "add", "Team lunch", "next tuesday")
    assert result.exit_code != 0


def test_add_empty_title(env, tmp_path):
    """Test empty titles fail without creating anything."""
    result = invoke(env, "add", "", "2030-01-01 12:30")
    assert result.exit_code == 1
    assert load_presets(tmp_path) == []


def test_add_access_denied(env, tmp_path):
    """Test a refused prompt leaves nothing behind."""
    env["ASSUME_ACCESS_GRANTED"] = "false"
    result = invoke(env, "add", "Team lunch", "2030-01-01 12:30", input="n\n")
    assert result.exit_code == 1
    assert load_presets(tmp_path) == []

    result = invoke(env, "status")
    assert result.exit_code == 0
    assert "denied" in result.output


def test_edit(env, tmp_path):
    """Test editing title and date."""
    invoke(env, "add", "Team lunch", "2030-01-01 12:30")

    result = invoke(env, "edit", "1", "--title", "Team dinner", "--date", "2030-01-01 19:00")

    assert result.exit_code == 0
    preset = load_presets(tmp_path)[0]
    assert preset.title == "Team dinner"
    assert preset.date.hour == 19


def test_edit_requires_change(env):
    """Test edit without options fails."""
    invoke(env, "add", "Team lunch", "2030-01-01 12:30")
    result = invoke(env, "edit", "1")
    assert result.exit_code == 1


def test_edit_unknown_position(env):
    """Test positions outside the list fail."""
    result = invoke(env, "edit", "4", "--title", "Nothing")
    assert result.exit_code == 1


def test_rm(env, tmp_path):
    """Test deleting a preset with and without confirmation."""
    invoke(env, "add", "Team lunch", "2030-01-01 12:30")

    result = invoke(env, "rm", "1", input="n\n")
    assert result.exit_code == 0
    assert len(load_presets(tmp_path)) == 1

    result = invoke(env, "rm", "1", "--force")
    assert result.exit_code == 0
    assert load_presets(tmp_path) == []


def test_sync_marks_deleted_events(env, tmp_path):
    """Test sync tags presets whose event was deleted elsewhere."""
    invoke(env, "add", "Team lunch", "2030-01-01 12:30")
    preset = load_presets(tmp_path)[0]

    store = IcsEventStore(tmp_path / "data" / "calendar.ics", authorization=AuthorizationState())
    store.remove(store.fetch(preset.external_identifier))

    result = invoke(env, "sync")

    assert result.exit_code == 0
    assert load_presets(tmp_path)[0].title == "Team lunch - deleted!"

    result = invoke(env, "sync")
    assert "All presets are up to date" in result.output


def test_samples(env, tmp_path):
    """Test sample presets are created."""
    result = invoke(env, "samples")
    assert result.exit_code == 0
    assert len(load_presets(tmp_path)) == 3


def test_status_request(env, tmp_path):
    """Test requesting access records the decision."""
    result = invoke(env, "status", "--request")
    assert result.exit_code == 0
    assert "authorized" in result.output
    assert (tmp_path / "data" / "authorization.json").exists()


def test_titles_are_shown_literally(env, tmp_path):
    """Test bracketed titles are printed as typed, not as markup."""
    result = invoke(env, "add", "[/red]", "2030-01-01 12:30")
    assert result.exit_code == 0
    assert "Preset '[/red]' added" in result.output

    invoke(env, "add", "[bold]x", "2030-01-02 12:30")
    result = invoke(env, "ls")

    assert result.exit_code == 0
    assert "[/red]" in result.output
    assert "[bold]x" in result.output
