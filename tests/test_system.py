import re
import subprocess
from unittest import mock

import pytest

from promptparts.system import (
    format_kib,
    get_uid,
    jobs_display,
    nix_shell_message,
    percent_sign,
    should_show_username,
    trim_hostname,
)

_SIZE = re.compile(r"[0-9]+(B|KiB|MiB|GiB|TiB|PiB|EiB)")


def _completed(returncode, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(
        args=["id", "-u"], returncode=returncode, stdout=stdout, stderr=stderr
    )


def test_format_kib_exact_units():
    assert format_kib(1) == "1KiB"
    assert format_kib(1024) == "1MiB"
    assert format_kib(1024 * 1024) == "1GiB"


@pytest.mark.parametrize("n_kib", [0, 1, 5, 1023, 1024, 1500, 123456, 10**9])
def test_format_kib_has_no_spaces_and_unit(n_kib):
    result = format_kib(n_kib)
    assert " " not in result
    assert _SIZE.fullmatch(result)


def test_format_kib_number_below_1024_for_large_values():
    for n_kib in (2000, 5 * 1024 * 1024, 7 * 1024**3):
        number = int(re.match(r"[0-9]+", format_kib(n_kib)).group())
        assert number <= 1024


def test_percent_sign_zsh():
    assert percent_sign("zsh") == "%%"


def test_percent_sign_powershell():
    assert percent_sign("powershell") == "`%"


@pytest.mark.parametrize("shell", ["bash", "fish", "", None])
def test_percent_sign_default(shell):
    assert percent_sign(shell) == "%"


def test_trim_hostname_cuts_at_first_occurrence():
    assert trim_hostname("box.lan.example.com", ".") == "box"


def test_trim_hostname_empty_trim_at_keeps_host():
    assert trim_hostname("box.lan", "") == "box.lan"


def test_trim_hostname_missing_marker_keeps_host():
    assert trim_hostname("box.lan", "#") == "box.lan"


def test_trim_hostname_multichar_marker():
    host = "workstation.example.com"
    assert trim_hostname(host, ".example") == "workstation"


def test_username_hidden_for_plain_local_user():
    assert should_show_username("alice", "alice", None, 1000, False) is False


def test_username_shown_when_user_differs_from_logname():
    assert should_show_username("bob", "alice", None, 1000, False) is True


def test_username_shown_over_ssh():
    assert should_show_username("alice", "alice", "10.0.0.1 1 10.0.0.2 22", 1000, False) is True


def test_username_shown_for_root():
    assert should_show_username("root", "root", None, 0, False) is True


def test_username_shown_always_when_configured():
    assert should_show_username("alice", "alice", None, 1000, True) is True


def test_username_unknown_uid_not_root():
    assert should_show_username("alice", "alice", None, None, False) is False


@pytest.mark.parametrize("jobs", [None, "0", "  0 ", "abc", "", "1.5"])
def test_jobs_hidden(jobs):
    assert jobs_display(jobs, 1) is None


def test_jobs_number_shown_above_threshold():
    assert jobs_display("3", 1) == "3"


def test_jobs_symbol_only_at_threshold():
    assert jobs_display("1", 1) == ""


def test_jobs_symbol_only_below_threshold():
    assert jobs_display(" 2\n", 5) == ""


def test_jobs_plus_sign_accepted():
    assert jobs_display("+4", 1) == "4"


def test_jobs_out_of_range_hidden():
    assert jobs_display(str(2**63), 1) is None


def test_nix_shell_pure():
    assert nix_shell_message("pure", "pure", "impure") == "pure"


@pytest.mark.parametrize("shell_type", ["1", "impure"])
def test_nix_shell_impure(shell_type):
    assert nix_shell_message(shell_type, "P", "I") == "I"


@pytest.mark.parametrize("shell_type", [None, "", "yes", "0"])
def test_nix_shell_not_in_shell(shell_type):
    assert nix_shell_message(shell_type, "P", "I") is None


def test_nix_shell_with_name():
    assert nix_shell_message("impure", "pure", "impure", "myenv") == "myenv (impure)"


def test_nix_shell_name_ignored_outside_shell():
    assert nix_shell_message("other", "pure", "impure", "myenv") is None


def test_get_uid_parses_output():
    with mock.patch("promptparts.utils.subprocess.run", return_value=_completed(0, b"1000\n")):
        assert get_uid() == 1000


def test_get_uid_root():
    with mock.patch("promptparts.utils.subprocess.run", return_value=_completed(0, b"0\n")):
        assert get_uid() == 0


def test_get_uid_garbage_output():
    with mock.patch("promptparts.utils.subprocess.run", return_value=_completed(0, b"nobody\n")):
        assert get_uid() is None


def test_get_uid_failing_command():
    with mock.patch("promptparts.utils.subprocess.run", return_value=_completed(1, b"5\n")):
        assert get_uid() is None


def test_get_uid_missing_command():
    with mock.patch("promptparts.utils.subprocess.run", side_effect=FileNotFoundError):
        assert get_uid() is None