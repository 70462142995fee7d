"""Branch name display for git and mercurial repositories."""

from __future__ import annotations

import logging
import subprocess
from os import PathLike

import regex

log = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")

NO_BRANCH = "(no branch)"


def get_graphemes(text: str, length: int) -> str:
    """Return the first `length` grapheme clusters of `text`."""
    if length <= 0:
        return ""
    clusters = []
    for match in _GRAPHEME.finditer(text):
        if len(clusters) >= length:
            break
        clusters.append(match.group())
    return "".join(clusters)


def graphemes_len(text: str) -> int:
    """Count the grapheme clusters in `text`."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


def truncate_branch_name(
    branch_name: str, truncation_length: int, truncation_symbol: str
) -> str:
    """Shorten a branch name to `truncation_length` graphemes.

    The first grapheme of `truncation_symbol` is appended only when the name
    was actually shortened. A non-positive length means no truncation.
    """
    if truncation_length <= 0:
        log.warning(
            '"truncation_length" should be a positive value, found %s',
            truncation_length,
        )
        return branch_name

    symbol = get_graphemes(truncation_symbol, 1)
    truncated = get_graphemes(branch_name, truncation_length)
    if truncation_length < graphemes_len(branch_name):
        return truncated + symbol
    return truncated


def hg_log_template(template: str, cwd: str | PathLike[str]) -> str | None:
    """Expand a mercurial log template for the working revision in `cwd`."""
    try:
        completed = subprocess.run(
            ["hg", "log", "-r", ".", "--template", template],
            cwd=cwd,
            capture_output=True,
            check=False,
        )
    except OSError:
        return None
    try:
        output = completed.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return output or None


def hg_branch_name(cwd: str | PathLike[str]) -> str:
    """Return the active bookmark, else the branch, else "(no branch)"."""
    return (
        hg_log_template("{activebookmark}", cwd)
        or hg_log_template("{branch}", cwd)
        or NO_BRANCH
    )