"""Shared test fixtures for autopilot-engine."""

import shutil
from pathlib import Path

import pytest

from autopilot_engine.config import AutopilotConfig

FIXTURES = Path(__file__).parent / "fixtures"

SCENARIO_SCRIPT = 'foo({initialSequence: "this.sequence_ABC123"})'


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Keep the active-root record and env overrides out of the real home dir."""
    monkeypatch.setenv("AUTOPILOT_STATE_DIR", str(tmp_path / "state"))
    monkeypatch.delenv("AUTOPILOT_CONFIG", raising=False)
    monkeypatch.delenv("AUTOPILOT_FORMATTER", raising=False)
    return tmp_path / "state"


@pytest.fixture
def config():
    return AutopilotConfig(formatter=None)


@pytest.fixture
def project(tmp_path):
    """A tour folder with the fixture script and index page."""
    root = tmp_path / "tour"
    root.mkdir()
    shutil.copy(FIXTURES / "script_general.js", root / "script_general.js")
    shutil.copy(FIXTURES / "index.htm", root / "index.htm")
    return root


@pytest.fixture
def scenario_project(tmp_path):
    """A tour folder whose live script is a single sequence reference."""
    root = tmp_path / "scenario"
    root.mkdir()
    (root / "script_general.js").write_text(SCENARIO_SCRIPT, encoding="utf-8")
    return root
