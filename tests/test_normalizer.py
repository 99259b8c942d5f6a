"""Tests for the best-effort formatter wrapper."""

import subprocess
from unittest.mock import patch

from autopilot_engine.transform.normalizer import Normalizer


def _completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(
        args=["prettier"], returncode=returncode, stdout=stdout, stderr=stderr,
    )


class TestNormalizer:
    def test_disabled_is_identity(self):
        n = Normalizer(None)
        assert not n.enabled
        assert n.normalize("a  =1") == "a  =1"

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_formats_through_command(self, mock_run):
        mock_run.return_value = _completed(stdout="a = 1;\n")
        n = Normalizer(["prettier", "--parser", "babel"], timeout=5)
        assert n.normalize("a=1") == "a = 1;\n"
        cmd = mock_run.call_args.args[0]
        assert cmd == ["prettier", "--parser", "babel"]
        assert mock_run.call_args.kwargs["input"] == "a=1"
        assert mock_run.call_args.kwargs["timeout"] == 5

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_missing_executable_falls_back(self, mock_run, caplog):
        mock_run.side_effect = FileNotFoundError("prettier")
        n = Normalizer(["prettier"])
        assert n.normalize("x") == "x"
        assert "Formatter failed" in caplog.text

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_parse_error_falls_back(self, mock_run, caplog):
        mock_run.return_value = _completed(stderr="SyntaxError: Unexpected token\n", returncode=2)
        n = Normalizer(["prettier"])
        assert n.normalize("{{{") == "{{{"
        assert "SyntaxError" in caplog.text

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_timeout_falls_back(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="prettier", timeout=1)
        assert Normalizer(["prettier"], timeout=1).normalize("x") == "x"

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_empty_output_falls_back(self, mock_run):
        mock_run.return_value = _completed(stdout="")
        assert Normalizer(["prettier"]).normalize("x = 1") == "x = 1"

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_undecodable_output_falls_back(self, mock_run, caplog):
        mock_run.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        assert Normalizer(["prettier"]).normalize("x = 1") == "x = 1"
        assert "undecodable" in caplog.text

    @patch("autopilot_engine.transform.normalizer.subprocess.run")
    def test_unencodable_input_falls_back(self, mock_run):
        mock_run.side_effect = UnicodeEncodeError("utf-8", "\udce9", 0, 1, "surrogates not allowed")
        assert Normalizer(["prettier"]).normalize("x = '\udce9'") == "x = '\udce9'"
