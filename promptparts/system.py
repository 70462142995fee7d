"""System facts for the prompt: memory, hostname, username, jobs and nix-shell."""

from __future__ import annotations

import re

from promptparts.utils import exec_cmd

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MAX = 2**32 - 1

_IMPURE_TYPES = frozenset({"1", "impure"})
_PURE_TYPES = frozenset({"pure"})


def format_kib(n_kib: int) -> str:
    """Render a size given in KiB with the largest fitting binary unit, e.g. "8GiB"."""
    value = float(n_kib) * 1024
    unit = _BINARY_UNITS[0]
    for candidate in _BINARY_UNITS[1:]:
        if value < 1024:
            break
        value /= 1024
        unit = candidate
    return f"{value:.0f}{unit}"


def percent_sign(shell: str | None) -> str:
    """The percent sign escaped for the given shell's prompt."""
    match shell:
        case "zsh":
            # % is an escape in zsh prompts.
            return "%%"
        case "powershell":
            return "`%"
        case _:
            return "%"


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut `host` at the first occurrence of `trim_at`; an empty `trim_at` keeps it whole."""
    if not trim_at:
        return host
    index = host.find(trim_at)
    return host if index < 0 else host[:index]


def get_uid() -> int | None:
    """The current user's numeric id, as reported by `id -u`."""
    output = exec_cmd("id", ["-u"])
    if output is None:
        return None
    text = output.stdout.strip()
    if not _UNSIGNED_INT.fullmatch(text):
        return None
    uid = int(text)
    return uid if uid <= _U32_MAX else None


def should_show_username(
    user: str | None,
    logname: str | None,
    ssh_connection: str | None,
    uid: int | None,
    show_always: bool,
) -> bool:
    """Whether the username is worth showing.

    It is shown when the user differs from the login name, in an SSH
    session, for root, or when configured to always show.
    """
    return (
        user != logname
        or ssh_connection is not None
        or uid == 0
        or show_always
    )


def jobs_display(jobs: str | None, threshold: int) -> str | None:
    """What to show for the number of background jobs.

    Returns None when the jobs module is hidden (no jobs, or an unreadable
    count). Otherwise returns the count to show next to the symbol, or ""
    when the count does not exceed `threshold` and only the symbol is shown.
    """
    text = ("0" if jobs is None else jobs).strip()
    if not _SIGNED_INT.fullmatch(text):
        return None
    count = int(text)
    if not _I64_MIN <= count <= _I64_MAX:
        return None
    if count == 0:
        return None
    return str(count) if count > threshold else ""


def nix_shell_message(
    shell_type: str | None,
    pure_msg: str,
    impure_msg: str,
    name: str | None = None,
) -> str | None:
    """Describe the nix-shell from $IN_NIX_SHELL, optionally with its name.

    "1" and "impure" mean an impure shell, "pure" a pure one; anything
    else, or no value, means not in a nix-shell and gives None.
    """
    if shell_type in _IMPURE_TYPES:
        message = impure_msg
    elif shell_type in _PURE_TYPES:
        message = pure_msg
    else:
        return None
    if name is not None:
        return f"{name} ({message})"
    return message