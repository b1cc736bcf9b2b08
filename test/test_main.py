"""
Command line tests for modthree.main.run
"""

import io

import pytest

from modthree.core.modthree import mod_three
from modthree.main import EXIT_INVALID_ARGS, EXIT_OK, EXIT_RUNTIME_ERROR, is_binary, run


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setenv("MODTHREE_LOG_CONSOLE", "0")
    monkeypatch.delenv("MODTHREE_LOG_DIR", raising=False)
    monkeypatch.delenv("MODTHREE_LOG_LEVEL", raising=False)


def run_with(*args):
    """Run the CLI and return (stdout, stderr, exit code)."""
    out, err = io.StringIO(), io.StringIO()
    code = run(list(args), out, err)
    return out.getvalue(), err.getvalue(), code


# ---------------------------------------------------------------------------
# Valid input
# ---------------------------------------------------------------------------
class TestValid:
    def test_no_spaces(self):
        stdout, stderr, code = run_with("-in=1101")
        assert code == EXIT_OK
        assert stderr == ""
        assert stdout == f'modThree("1101") => {mod_three("1101")}\n'

    def test_trim_spaces_in_quoted_value(self):
        stdout, stderr, code = run_with("-in=   1110   ")
        assert code == EXIT_OK
        assert stderr == ""
        assert 'modThree("1110") => 2' in stdout

    def test_double_dash_alias(self):
        stdout, stderr, code = run_with("--in=11")
        assert code == EXIT_OK
        assert stderr == ""
        assert stdout == 'modThree("11") => 0\n'

    def test_help_is_success(self):
        stdout, _, code = run_with("-h")
        assert code == EXIT_OK
        assert "usage: modthree -in=<binary>" in stdout


# ---------------------------------------------------------------------------
# Invalid arguments
# ---------------------------------------------------------------------------
class TestInvalid:
    def test_space_separated(self):
        _, stderr, code = run_with("-in", "1101")
        assert code == EXIT_INVALID_ARGS
        assert "invalid format" in stderr

    def test_space_separated_double_dash(self):
        _, stderr, code = run_with("--in", "1101")
        assert code == EXIT_INVALID_ARGS
        assert "invalid format" in stderr

    def test_equals_then_space(self):
        _, stderr, code = run_with("-in=", "1101")
        assert code == EXIT_INVALID_ARGS
        assert "unexpected extra args" in stderr

    def test_non_binary(self):
        _, stderr, code = run_with("-in=1102")
        assert code == EXIT_INVALID_ARGS
        assert 'invalid input "1102": must contain only 0 and 1' in stderr

    def test_internal_space(self):
        _, stderr, code = run_with("-in=1 1")
        assert code == EXIT_INVALID_ARGS
        assert "must contain only 0 and 1" in stderr

    def test_missing_value_flag_present(self):
        _, stderr, code = run_with("-in=")
        assert code == EXIT_INVALID_ARGS
        assert "provide -in=<binary>" in stderr

    def test_whitespace_only_value(self):
        _, stderr, code = run_with("-in=    ")
        assert code == EXIT_INVALID_ARGS
        assert "provide -in=<binary>" in stderr

    def test_missing_flag_completely(self):
        _, stderr, code = run_with()
        assert code == EXIT_INVALID_ARGS
        assert "provide -in=<binary>" in stderr

    def test_extra_positional_args(self):
        _, stderr, code = run_with("-in=101", "extra")
        assert code == EXIT_INVALID_ARGS
        assert "unexpected extra args" in stderr

    def test_unknown_flag(self):
        _, stderr, code = run_with("-x")
        assert code == EXIT_INVALID_ARGS
        assert "usage: modthree -in=<binary>" in stderr

    def test_bad_configuration(self, monkeypatch):
        monkeypatch.setenv("MODTHREE_LOG_LEVEL", "LOUD")
        _, stderr, code = run_with("-in=1")
        assert code == EXIT_INVALID_ARGS
        assert "invalid configuration" in stderr


def test_runtime_error_exit_code(monkeypatch):
    from modthree import main as cli
    from modthree.core.modthree import ModThreeError

    def broken(_):
        raise ModThreeError("invalid binary input: boom")

    monkeypatch.setattr(cli, "mod_three", broken)
    _, stderr, code = run_with("-in=1")
    assert code == EXIT_RUNTIME_ERROR
    assert "error: invalid binary input: boom" in stderr


@pytest.mark.parametrize("value, expected", [
    ("", False),
    ("0", True),
    ("0101", True),
    ("012", False),
    (" 1", False),
])
def test_is_binary(value, expected):
    assert is_binary(value) is expected
