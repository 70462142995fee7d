"""Git repository state: commit hashes, in-progress operations and file status."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from promptparts.utils import read_file

_UNSIGNED = re.compile(r"\+?[0-9]+")


def id_to_hex_abbrev(data: bytes, length: int) -> str:
    """Hex-encode `data` and keep the first `length` characters."""
    return data.hex()[:length]


class RepositoryState(enum.Enum):
    """The operation a repository is in the middle of."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert_sequence"
    CHERRY_PICK = "cherry_pick"
    CHERRY_PICK_SEQUENCE = "cherry_pick_sequence"
    BISECT = "bisect"
    APPLY_MAILBOX = "apply_mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply_mailbox_or_rebase"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase_interactive"
    REBASE_MERGE = "rebase_merge"


@dataclass(frozen=True)
class StateProgress:
    """How far an operation has got, e.g. step 3 of 10."""

    current: int
    total: int


@dataclass(frozen=True)
class StateDescription:
    """A label naming the operation, with progress where it is known."""

    label: str
    progress: StateProgress | None = None


_LABELS = {
    RepositoryState.MERGE: "merge",
    RepositoryState.REVERT: "revert",
    RepositoryState.REVERT_SEQUENCE: "revert",
    RepositoryState.CHERRY_PICK: "cherry_pick",
    RepositoryState.CHERRY_PICK_SEQUENCE: "cherry_pick",
    RepositoryState.BISECT: "bisect",
    RepositoryState.APPLY_MAILBOX: "am",
    RepositoryState.APPLY_MAILBOX_OR_REBASE: "am_or_rebase",
}

_REBASE_STATES = frozenset(
    {
        RepositoryState.REBASE,
        RepositoryState.REBASE_INTERACTIVE,
        RepositoryState.REBASE_MERGE,
    }
)


def _file_to_count(path: Path) -> int | None:
    try:
        contents = read_file(path).strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not _UNSIGNED.fullmatch(contents):
        return None
    return int(contents)


def _progress(current_path: Path, total_path: Path) -> StateProgress | None:
    current = _file_to_count(current_path)
    if current is None:
        return None
    total = _file_to_count(total_path)
    if total is None:
        return None
    return StateProgress(current, total)


def describe_rebase(root: str | PathLike[str]) -> StateDescription:
    """Describe a rebase, reading its progress from the files under .git."""
    dot_git = Path(root) / ".git"
    if (dot_git / "rebase-merge").exists():
        progress = _progress(
            dot_git / "rebase-merge" / "msgnum", dot_git / "rebase-merge" / "end"
        )
    elif (dot_git / "rebase-apply").exists():
        progress = _progress(
            dot_git / "rebase-apply" / "next", dot_git / "rebase-apply" / "last"
        )
    else:
        progress = None
    return StateDescription("rebase", progress)


def describe_state(
    state: RepositoryState, root: str | PathLike[str]
) -> StateDescription | None:
    """Describe the repository's operation in progress; None when clean."""
    if state is RepositoryState.CLEAN:
        return None
    if state in _REBASE_STATES:
        return describe_rebase(root)
    return StateDescription(_LABELS[state])


class StatusFlag(enum.IntFlag):
    """Status bits of a single file in the index and working tree."""

    CURRENT = 0
    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4
    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    WT_UNREADABLE = 1 << 12
    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


@dataclass(frozen=True)
class RepoStatus:
    """Number of files in each status category."""

    conflicted: int = 0
    deleted: int = 0
    renamed: int = 0
    modified: int = 0
    staged: int = 0
    untracked: int = 0


def _count(statuses: list[StatusFlag], mask: StatusFlag) -> int:
    return sum(1 for status in statuses if status & mask)


def repo_status(statuses: Iterable[StatusFlag | int]) -> RepoStatus:
    """Count files per category; raises ValueError when there are none."""
    flags = [StatusFlag(status) for status in statuses]
    if not flags:
        raise ValueError("Repo has no status")
    return RepoStatus(
        conflicted=_count(flags, StatusFlag.CONFLICTED),
        deleted=_count(flags, StatusFlag.WT_DELETED | StatusFlag.INDEX_DELETED),
        renamed=_count(flags, StatusFlag.WT_RENAMED | StatusFlag.INDEX_RENAMED),
        modified=_count(flags, StatusFlag.WT_MODIFIED),
        staged=_count(flags, StatusFlag.INDEX_MODIFIED | StatusFlag.INDEX_NEW),
        untracked=_count(flags, StatusFlag.WT_NEW),
    )


def _with_count(name: str, count: int, show_count: bool) -> list[tuple[str, str | None]]:
    if count <= 0:
        return []
    segments: list[tuple[str, str | None]] = [(name, None)]
    if show_count:
        segments.append((f"{name}_count", str(count)))
    return segments


def sync_segments(
    ahead: int, behind: int, show_sync_count: bool
) -> list[tuple[str, str | None]]:
    """Segments describing how a branch relates to its upstream.

    Each item is (segment name, value); a value of None stands for the
    segment's configured symbol, a string is a count to show.
    """
    segments: list[tuple[str, str | None]] = []
    if ahead > 0 and behind > 0:
        segments.append(("diverged", None))
        if show_sync_count:
            segments += _with_count("ahead", ahead, show_sync_count)
            segments += _with_count("behind", behind, show_sync_count)
    if ahead > 0 and behind == 0:
        segments += _with_count("ahead", ahead, show_sync_count)
    if behind > 0 and ahead == 0:
        segments += _with_count("behind", behind, show_sync_count)
    return segments