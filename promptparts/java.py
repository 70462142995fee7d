"""Java runtime version detection."""

from __future__ import annotations

import os
import re

from promptparts.utils import exec_cmd

_VERSION = re.compile(r"[0-9.]+")
_PREFIXES = ("JRE (", "VM (")


def parse_jre_version(text: str) -> str | None:
    """Extract the version from `java -Xinternalversion` output.

    Recognised shapes are "JRE (1.8.0_222-b10)",
    "JRE (Zulu 8.40.0.25-CA-linux64) (1.8.0_222-b10)" and "VM (1.8.0_222-b10)".
    """
    for marker in _PREFIXES:
        index = text.find(marker)
        if index >= 0:
            rest = text[index + len(marker):]
            break
    else:
        return None

    match = _VERSION.match(rest)
    if match:
        return match.group()

    # Vendor label first, e.g. "(Zulu ...) (1.8.0...)": take the next parenthesis.
    paren = rest.find("(")
    if paren < 0:
        return None
    match = _VERSION.match(rest, paren + 1)
    return match.group() if match else None


def format_java_version(java_out: str) -> str | None:
    """Return the Java version as "v<version>", or None if it cannot be found."""
    version = parse_jre_version(java_out)
    return None if version is None else f"v{version}"


def get_java_version() -> str | None:
    """Run java (from $JAVA_HOME if set) and return its combined version output."""
    java_home = os.environ.get("JAVA_HOME")
    java_command = f"{java_home}/bin/java" if java_home is not None else "java"
    output = exec_cmd(java_command, ["-Xinternalversion"])
    if output is None:
        return None
    return output.stdout + output.stderr