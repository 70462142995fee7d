# promptparts

A library of small building blocks for writing a shell prompt. Its functions
look at the current directory, ask installed tools for their versions, read
repository and kubeconfig files, and describe a few system details. Each one
returns a short string that a prompt can style and print.

## Installation

```
pip install promptparts
```

The test suite needs the `test` extra:

```
pip install "promptparts[test]"
pytest
```

## Modules

- `promptparts.segment`: `Style` holds colours and text attributes, and
  `Style.paint` wraps text in ANSI escape sequences. `Segment` holds a name, a
  value and an optional style. `Segment.ansi_string` returns the painted value
  and `Segment.is_empty` is true when the value is only whitespace.
- `promptparts.utils`: `read_file` returns a file's text. `exec_cmd(cmd, args)`
  runs a command and returns a `CommandOutput` (`stdout`, `stderr`). It returns
  `None` when the command cannot be started or exits with a non-zero status.
- `promptparts.directory`: `truncate(path, n)` keeps the last `n` components of
  a slash-separated path. `n == 0` leaves the path as it is.
- `promptparts.java`: `parse_jre_version` and `format_java_version` read the
  version from `java -Xinternalversion` output. `get_java_version` runs
  `$JAVA_HOME/bin/java`, or `java` when `JAVA_HOME` is unset.
- `promptparts.branch`: `truncate_branch_name` shortens a branch name by
  grapheme cluster. It appends the truncation symbol only when the name was
  actually cut. `hg_branch_name` asks Mercurial for the active bookmark, then
  the branch, and otherwise returns `"(no branch)"`.
- `promptparts.git`:
  - `id_to_hex_abbrev` abbreviates a commit id.
  - `describe_state` turns a `RepositoryState` into a `StateDescription`. For a
    rebase, it reads the progress from `.git/rebase-merge` or
    `.git/rebase-apply`.
  - `repo_status` counts `StatusFlag` values into a `RepoStatus`.
  - `sync_segments` lists the ahead, behind and diverged segments.
- `promptparts.kubernetes`: `get_kube_context` parses kubeconfig YAML into
  `(context, namespace)`. `find_kube_context` looks in `$KUBECONFIG`, or in
  `~/.kube/config` when it is unset.
- `promptparts.package`: `get_package_version(directory)` reads the project
  version from the first readable file among `Cargo.toml`, `package.json`,
  `pyproject.toml` (`[tool.poetry]`) and `composer.json`.
- `promptparts.versions`:
  - Version formatting and lookup for PHP, Python and Ruby.
  - `python_virtual_env`, the name of the active virtualenv.
  - `format_terraform_version`.
  - `get_terraform_workspace`, which reads `$TF_WORKSPACE` or the data
    directory's `environment` file. It returns `"default"` when that file is
    missing.
- `promptparts.clock`: `format_time` and `create_offset_time_string`. The
  latter takes fractional hour offsets and raises `InvalidOffsetError` unless
  the offset lies strictly between -24 and 24. `current_time_string` falls
  back to local time when the offset is invalid.
- `promptparts.system`: small helpers for memory sizes (`format_kib`),
  prompt-safe percent signs, hostname trimming, the current uid, whether to
  show the username, background job counts and nix-shell messages.

## Examples

```python
from promptparts.directory import truncate
from promptparts.package import format_version
from promptparts.clock import current_time_string

truncate("~/starship/engines/booster", 3)   # "starship/engines/booster"
format_version(" 0.1.0 ")                   # "v0.1.0"
current_time_string("%T", "+5.75")          # the time at UTC+05:45
```

Most lookups return `None` when the information is not available, for
example when a tool is not installed or a file is missing. A prompt can then
leave that part out.

## What it does not do

This is a library, not a prompt program:

- It has no command to run and does not assemble or print a full prompt.
- It does not detect the Rust toolchain.
- It does not open git repositories itself. The `git` helpers work from the
  repository state and file status flags you pass in.
- The `system` helpers format values that you supply. They do not read memory
  usage, the hostname or the job count from the system, except `get_uid`,
  which runs `id -u`.