"""Tests for the autopilot CLI.

Covers:
- Parser construction and --help for every command
- activate / enable / disable / status against a temp project
- Remembered active root between invocations
- Error reporting and exit codes
"""

import argparse
import json
from pathlib import Path

import pytest

from autopilot_engine.cli import build_parser, main
from autopilot_engine.session.registry import load_active_root

FIXTURES = Path(__file__).parent / "fixtures"
CONFIG = str(FIXTURES / "autopilot.yaml")


def run(*argv):
    return main(["--config", CONFIG, *argv])


class TestParser:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        assert main([]) == 0
        assert "autopilot" in capsys.readouterr().out

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["activate", "--help"],
        ["enable", "--help"],
        ["disable", "--help"],
        ["status", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0

    def test_activate_requires_root(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["activate"])


class TestCommands:
    def test_activate_records_root(self, project, capsys):
        assert run("activate", str(project)) == 0
        out = capsys.readouterr().out
        assert "Sequences updated: 2" in out
        assert load_active_root() == project.resolve()
        assert (project / "modified_script_general.js").is_file()

    def test_enable_disable_use_recorded_root(self, scenario_project, capsys):
        live = scenario_project / "script_general.js"
        original = live.read_bytes()
        run("activate", str(scenario_project))

        assert run("enable") == 0
        assert live.read_bytes() == (scenario_project / "modified_script_general.js").read_bytes()

        assert run("disable") == 0
        assert live.read_bytes() == original
        assert "Autopilot disabled" in capsys.readouterr().out

    def test_status_json(self, scenario_project, capsys):
        run("activate", str(scenario_project))
        run("enable")
        capsys.readouterr()
        assert run("status", "--json") == 0
        info = json.loads(capsys.readouterr().out)
        assert info["mode"] == "autopilot"
        assert info["state"] == "BOUND"

    def test_status_text(self, scenario_project, capsys):
        run("activate", str(scenario_project))
        capsys.readouterr()
        assert run("status", "--root", str(scenario_project)) == 0
        out = capsys.readouterr().out
        assert "Live mode: original" in out
        assert "backup" in out


class TestErrors:
    def test_activate_missing_folder(self, tmp_path, capsys):
        assert run("activate", str(tmp_path / "nope")) == 1
        assert "folder not found" in capsys.readouterr().err
        assert load_active_root() is None

    def test_activate_missing_live_file(self, tmp_path, capsys):
        assert run("activate", str(tmp_path)) == 1
        assert "missing script_general.js" in capsys.readouterr().err

    def test_enable_without_any_activation(self, capsys):
        assert run("enable") == 1
        assert "autopilot activate" in capsys.readouterr().err

    def test_enable_with_root_never_activated(self, scenario_project, capsys):
        before = (scenario_project / "script_general.js").read_bytes()
        assert run("enable", "--root", str(scenario_project)) == 1
        assert "modified variant not found" in capsys.readouterr().err
        assert (scenario_project / "script_general.js").read_bytes() == before

    def test_enable_with_corrupt_record(self, isolated_state, capsys):
        isolated_state.mkdir(parents=True)
        (isolated_state / "active.yaml").write_text("root: [unclosed\n")
        assert run("enable") == 1
        assert "autopilot activate" in capsys.readouterr().err

    def test_disable_without_backup(self, scenario_project, capsys):
        assert run("disable", "--root", str(scenario_project)) == 1
        assert "backup variant not found" in capsys.readouterr().err

    def test_activate_non_utf8_script(self, tmp_path, capsys):
        root = tmp_path / "latin1"
        root.mkdir()
        live = b'x = "\xe9"; foo({initialSequence: "this.sequence_AB"});'
        (root / "script_general.js").write_bytes(live)
        assert run("activate", str(root)) == 0
        assert "Sequences updated: 1" in capsys.readouterr().out
        modified = (root / "modified_script_general.js").read_bytes()
        assert modified.startswith(b'x = "\xe9"; foo({initialSequence: {')
        assert (root / "backup_script_general.js").read_bytes() == live

    def test_bad_config(self, tmp_path, project, capsys):
        cfg = tmp_path / "bad.yaml"
        cfg.write_text("nonsense_key: 1\n")
        assert main(["--config", str(cfg), "activate", str(project)]) == 1
        assert "Unknown config keys" in capsys.readouterr().err
