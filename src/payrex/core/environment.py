"""
Utilities for building the environment used to configure a PayRex client.

The helpers understand ``.env`` files, let callers layer overrides on top of
the process environment, and return an immutable :class:`ClientEnvironment`
that :class:`payrex.core.config.ClientConfig` reads from.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

__all__ = ["ClientEnvironment", "build_environment", "parse_env_file"]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    # Inline comments only count when separated by whitespace.
    hash_at = value.find(" #")
    if hash_at != -1:
        value = value[:hash_at].rstrip()
    return value


def parse_env_file(path: Path) -> Dict[str, str]:
    """Read ``KEY=VALUE`` lines from ``path``; a missing file yields ``{}``."""
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            values[key] = _unquote(value.strip())
    return values


@dataclass(frozen=True)
class ClientEnvironment:
    """
    A resolved, read-only set of variables used to configure the client.
    """

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.variables


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ClientEnvironment:
    """
    Assemble a :class:`ClientEnvironment` from multiple sources.

    ``base`` defaults to :data:`os.environ`. Values from ``env_file`` never
    replace keys already present in ``base``; set it to ``None`` to skip file
    loading entirely. ``overrides`` always win.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return ClientEnvironment(variables=MappingProxyType(merged))
