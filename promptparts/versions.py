"""Language and tool version lookups: PHP, Python, Ruby and Terraform."""

from __future__ import annotations

import os
import subprocess
from os import PathLike
from pathlib import Path, PurePath

from promptparts.utils import exec_cmd, read_file

_PHP_VERSION_SCRIPT = (
    "echo PHP_MAJOR_VERSION.'.'.PHP_MINOR_VERSION.'.'.PHP_RELEASE_VERSION;"
)


def _strip_prefixes(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def format_php_version(php_version: str) -> str:
    """Prefix the PHP version with "v"."""
    return f"v{php_version}"


def get_php_version() -> str | None:
    """Ask php for its version, or None if php cannot be run."""
    try:
        completed = subprocess.run(
            ["php", "-r", _PHP_VERSION_SCRIPT], capture_output=True, check=False
        )
    except OSError:
        return None
    return completed.stdout.decode("utf-8")


def format_python_version(python_stdout: str) -> str:
    """Turn "Python 3.7.2" into "v3.7.2"."""
    return f"v{_strip_prefixes(python_stdout, 'Python ').strip()}"


def get_python_version() -> str | None:
    """Output of `python --version`, from stdout or else stderr."""
    output = exec_cmd("python", ["--version"])
    if output is None:
        return None
    return output.stdout or output.stderr


def python_virtual_env() -> str | None:
    """Name of the active virtualenv directory, from $VIRTUAL_ENV."""
    venv = os.environ.get("VIRTUAL_ENV")
    if venv is None:
        return None
    name = PurePath(venv).name
    if not name or name == "..":
        return None
    return name


def format_ruby_version(ruby_version: str) -> str | None:
    """Turn "ruby 2.6.0p0 ..." into "v2.6.0"."""
    words = ruby_version.split()
    if len(words) < 2:
        return None
    head = words[1].encode("utf-8")
    if len(head) < 5:
        return None
    try:
        version = head[:5].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def format_terraform_version(version: str) -> str | None:
    """Take the first line of `terraform version` and return "v0.12.14 "."""
    if not version:
        return None
    first_line = version.split("\n", 1)[0].removesuffix("\r")
    return _strip_prefixes(first_line, "Terraform ").strip() + " "


def get_terraform_workspace(cwd: str | PathLike[str]) -> str | None:
    """The selected Terraform workspace.

    $TF_WORKSPACE overrides everything; otherwise the `environment` file in
    the data directory ($TF_DATA_DIR or ./.terraform) names it, and a missing
    file means "default".
    """
    override = os.environ.get("TF_WORKSPACE")
    if override is not None:
        return override

    data_dir_env = os.environ.get("TF_DATA_DIR")
    data_dir = Path(data_dir_env) if data_dir_env is not None else Path(cwd) / ".terraform"
    try:
        return read_file(data_dir / "environment")
    except FileNotFoundError:
        return "default"
    except (OSError, UnicodeDecodeError):
        return None