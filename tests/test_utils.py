import pytest

from promptparts.utils import CommandOutput, exec_cmd, read_file


def test_exec_no_output():
    assert exec_cmd("true", []) == CommandOutput(stdout="", stderr="")


def test_exec_with_output_stdout():
    assert exec_cmd("/bin/echo", ["-n", "hello"]) == CommandOutput(stdout="hello", stderr="")


def test_exec_with_output_stderr():
    result = exec_cmd("/bin/sh", ["-c", "echo hello >&2"])
    assert result == CommandOutput(stdout="", stderr="hello\n")


def test_exec_with_output_both():
    result = exec_cmd("/bin/sh", ["-c", "echo hello; echo world >&2"])
    assert result == CommandOutput(stdout="hello\n", stderr="world\n")


def test_exec_with_non_zero_exit_code():
    assert exec_cmd("false", []) is None


def test_exec_missing_command(tmp_path):
    assert exec_cmd(str(tmp_path / "no-such-program"), []) is None


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")
    assert read_file(path) == "line one\nline two\n"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")