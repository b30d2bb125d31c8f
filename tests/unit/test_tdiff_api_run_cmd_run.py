"""Unit tests for tdiff.api.run.cmd_run."""

import json

import pytest

from tdiff.api.cases import save_cases
from tdiff.api.run import ProcessResult, ProcessTimeoutError, TestCase
from tdiff.api.run.cmd_run import cmd_run
from tests.unit.conftest import FakeRunner, ok, run_cmd

pytestmark = pytest.mark.unit


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog"
    path.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def cases_file(tmp_path):
    path = tmp_path / "cases.toml"
    save_cases(
        path,
        [
            TestCase(input="a", expected="A", note="upper"),
            TestCase(input="b", expected="B"),
        ],
    )
    return path


class TestCmdRun:
    def test_all_pass(self, program, cases_file):
        runner = FakeRunner({"a": ok("A"), "b": ok("B")})
        result = run_cmd(cmd_run, str(program), str(cases_file), runner=runner)

        assert result.success
        assert result.result == "2/2 case(s) passed"
        assert result.output["total"] == 2
        assert result.output["passed"] == 2
        assert result.output["failed"] == 0
        assert result.output["program"] == str(program.resolve())
        assert [o["note"] for o in result.output["outcomes"]] == ["upper", None]

    def test_failure_marks_run_failed(self, program, cases_file):
        runner = FakeRunner({"a": ok("A"), "b": ProcessResult(exit_code=1)})
        result = run_cmd(cmd_run, str(program), str(cases_file), runner=runner)

        assert not result.success
        assert result.output["failed"] == 1
        assert result.output["outcomes"][1]["error"]["kind"] == "non_zero_exit"
        assert result.output["warnings"][0].startswith("case 1: non_zero_exit")

    def test_timeout_from_config(self, program, cases_file, tdiff_home):
        (tdiff_home / "config.json").write_text(json.dumps({"run": {"timeout_seconds": 3}}))
        runner = FakeRunner({"a": ok("A"), "b": ProcessTimeoutError(3)})
        result = run_cmd(cmd_run, str(program), str(cases_file), runner=runner)

        assert {call[2] for call in runner.calls} == {3}
        assert result.output["outcomes"][1]["error"]["kind"] == "timeout"

    def test_timeout_override(self, program, cases_file):
        runner = FakeRunner({"a": ok("A"), "b": ok("B")})
        run_cmd(cmd_run, str(program), str(cases_file), timeout=0.25, max_workers=2, runner=runner)
        assert {call[2] for call in runner.calls} == {0.25}

    def test_missing_program(self, tmp_path, cases_file):
        result = run_cmd(cmd_run, str(tmp_path / "nope"), str(cases_file), runner=FakeRunner({}))
        assert not result.success
        assert "program not found" in result.output["errors"][0]

    def test_bad_case_file(self, tmp_path, program):
        bad = tmp_path / "bad.toml"
        bad.write_text("[[tests]\n")
        result = run_cmd(cmd_run, str(program), str(bad), runner=FakeRunner({}))
        assert not result.success
        assert "invalid TOML" in result.output["errors"][0]

    def test_invalid_config(self, program, cases_file, tdiff_home):
        (tdiff_home / "config.json").write_text("{")
        result = run_cmd(cmd_run, str(program), str(cases_file), runner=FakeRunner({}))
        assert not result.success
        assert "Invalid JSON" in result.result

    def test_invalid_override(self, program, cases_file):
        result = run_cmd(cmd_run, str(program), str(cases_file), max_workers=0, runner=FakeRunner({}))
        assert not result.success
