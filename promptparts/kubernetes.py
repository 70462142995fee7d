"""Current Kubernetes context and namespace from kubeconfig files."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

import yaml

from promptparts.utils import read_file

KUBERNETES_PREFIX = "on "


def _namespace_of(contexts: object, current: str) -> str:
    if not isinstance(contexts, list):
        return ""
    for entry in contexts:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        if not isinstance(name, str) or name != current:
            continue
        context = entry.get("context")
        if not isinstance(context, dict):
            return ""
        namespace = context.get("namespace")
        return namespace if isinstance(namespace, str) else ""
    return ""


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """Return (current context, namespace) from kubeconfig YAML.

    The namespace is "" when the current context does not set one. None is
    returned when there is no usable current context.
    """
    try:
        documents = yaml.safe_load_all(contents)
        conf = next(iter(documents), None)
    except yaml.YAMLError:
        return None
    if not isinstance(conf, dict):
        return None

    current = conf.get("current-context")
    if not isinstance(current, str) or not current:
        return None

    return current, _namespace_of(conf.get("contexts"), current)


def parse_kubectl_file(path: str | PathLike[str]) -> tuple[str, str] | None:
    """Read a kubeconfig file and return its current context, if any."""
    try:
        contents = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    return get_kube_context(contents)


def find_kube_context() -> tuple[str, str] | None:
    """Look up the context from $KUBECONFIG, else from ~/.kube/config.

    With $KUBECONFIG set, the first listed file holding a context wins.
    """
    paths = os.environ.get("KUBECONFIG")
    if paths is not None:
        for filename in paths.split(os.pathsep):
            found = parse_kubectl_file(filename)
            if found is not None:
                return found
        return None

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    return parse_kubectl_file(home / ".kube" / "config")