"""Program mode end to end: real executables, real test-case files."""

import json
import sys
import time

import pytest

from tdiff.api.cases import save_cases
from tdiff.api.run import RunErrorKind, TestCase, run_tests
from tdiff.cli import main

pytestmark = pytest.mark.integration

UPPER = """import sys
data = sys.stdin.read()
if data == "fail":
    sys.stdout.write("half")
    sys.stderr.write("refusing input\\n")
    sys.exit(4)
sys.stdout.write(data.upper() + "".join(sys.argv[1:]))
"""


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "upper.py"
    path.write_text(f"#!{sys.executable}\n{UPPER}")
    path.chmod(0o755)
    return path


class TestProgramMode:
    def test_mixed_batch(self, program):
        cases = [
            TestCase(input="abc", expected="ABC"),
            TestCase(input="fail", expected="whole"),
            TestCase(input="x", expected="X!", args=("!",), note="with args"),
            TestCase(input="hello", expected="world"),
        ]
        outcomes = run_tests(program, cases, max_workers=2)

        assert [o.case_index for o in outcomes] == [0, 1, 2, 3]
        assert [o.passed for o in outcomes] == [True, False, True, False]
        assert outcomes[1].error.kind is RunErrorKind.NON_ZERO_EXIT
        assert "refusing input" in outcomes[1].error.message
        assert outcomes[1].diff.right == "half"
        assert outcomes[2].note == "with args"
        assert outcomes[3].error is None
        assert outcomes[3].diff.right == "HELLO"

    def test_timeout_then_next_case_runs(self, tmp_path):
        slow = tmp_path / "slow.py"
        slow.write_text(f"#!{sys.executable}\nimport sys, time\nif sys.stdin.read() == 'wait':\n    time.sleep(10)\nprint('done')\n")
        slow.chmod(0o755)
        outcomes = run_tests(slow, [TestCase(input="wait"), TestCase(input="go", expected="done\n")], timeout=0.5)

        assert outcomes[0].error.kind is RunErrorKind.TIMEOUT
        assert outcomes[1].passed

    @pytest.mark.skipif(sys.platform == "win32", reason="needs /bin/sh")
    def test_shell_target_timeout_then_next_case_runs(self, tmp_path):
        script = tmp_path / "wait.sh"
        script.write_text('#!/bin/sh\nread line\nif [ "$line" = "wait" ]; then sleep 8; fi\necho "$line"\n')
        script.chmod(0o755)
        started = time.monotonic()
        outcomes = run_tests(script, [TestCase(input="wait\n"), TestCase(input="go\n", expected="go\n")], timeout=0.5)

        assert time.monotonic() - started < 5
        assert outcomes[0].error.kind is RunErrorKind.TIMEOUT
        assert outcomes[1].passed

    def test_cli_program_mode(self, program, tmp_path, capsys):
        cases_file = tmp_path / "cases.yaml"
        save_cases(cases_file, [TestCase(input="ab", expected="AB", note="upper")])

        assert main(["get", str(program), str(cases_file), "--mode", "program"]) == 0
        out = capsys.readouterr().out
        assert "upper [0]: PASS" in out

    def test_cli_program_mode_failure_json(self, program, tmp_path, capsys):
        cases_file = tmp_path / "cases.toml"
        save_cases(cases_file, [TestCase(input="ab", expected="AB"), TestCase(input="fail")])

        assert main(["-d", "json", "get", str(program), str(cases_file), "-m", "program", "-j", "2"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["total"] == 2
        assert data["passed"] == 1
        assert data["outcomes"][1]["error"]["kind"] == "non_zero_exit"
