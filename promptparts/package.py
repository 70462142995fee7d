"""Project version lookup from package manifests."""

from __future__ import annotations

import json
import tomllib
from os import PathLike
from pathlib import Path
from typing import Any

from promptparts.utils import read_file


def format_version(version: str) -> str:
    """Strip quotes and whitespace and make sure the version starts with "v"."""
    cleaned = version.replace('"', "").strip()
    return cleaned if cleaned.startswith("v") else f"v{cleaned}"


def _lookup_str(data: Any, *keys: str) -> str | None:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data if isinstance(data, str) else None


def _toml_version(contents: str, *keys: str) -> str | None:
    try:
        data = tomllib.loads(contents)
    except tomllib.TOMLDecodeError:
        return None
    raw = _lookup_str(data, *keys)
    return None if raw is None else format_version(raw)


def _json_version(contents: str) -> str | None:
    try:
        data = json.loads(contents)
    except ValueError:
        return None
    raw = _lookup_str(data, "version")
    if raw is None or raw == "null":
        return None
    return format_version(raw)


def extract_cargo_version(contents: str) -> str | None:
    """Version from a Cargo.toml `[package]` table."""
    return _toml_version(contents, "package", "version")


def extract_package_version(contents: str) -> str | None:
    """Version from a package.json document."""
    return _json_version(contents)


def extract_poetry_version(contents: str) -> str | None:
    """Version from a pyproject.toml `[tool.poetry]` table."""
    return _toml_version(contents, "tool", "poetry", "version")


def extract_composer_version(contents: str) -> str | None:
    """Version from a composer.json document."""
    return _json_version(contents)


_MANIFESTS = (
    ("Cargo.toml", extract_cargo_version),
    ("package.json", extract_package_version),
    ("pyproject.toml", extract_poetry_version),
    ("composer.json", extract_composer_version),
)


def get_package_version(directory: str | PathLike[str] = ".") -> str | None:
    """Version from the first readable manifest in `directory`.

    Manifests are tried in the order Cargo.toml, package.json, pyproject.toml,
    composer.json; the first one that can be read decides the result.
    """
    base = Path(directory)
    for filename, extract in _MANIFESTS:
        try:
            contents = read_file(base / filename)
        except (OSError, UnicodeDecodeError):
            continue
        return extract(contents)
    return None