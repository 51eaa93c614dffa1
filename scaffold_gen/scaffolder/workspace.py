"""pnpm workspace membership check.

Reads the ``packages`` globs from ``pnpm-workspace.yaml`` so the generator
can warn when a new package lands outside the workspace.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Optional

import yaml


def load_workspace_globs(path: Path) -> Optional[list[str]]:
    """Return the ``packages`` globs, or ``None`` if there is no workspace file.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        OSError: If the file exists but cannot be read.
    """
    if not path.is_file():
        return None
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        return []
    packages = data.get("packages") or []
    if isinstance(packages, str):
        packages = [packages]
    elif not isinstance(packages, list):
        return []
    return [str(p).strip() for p in packages if str(p).strip()]


def _match_segments(parts: list[str], patterns: list[str]) -> bool:
    if not patterns:
        return not parts
    head, rest = patterns[0], patterns[1:]
    if head == "**":
        # "**" swallows zero or more directory levels.
        return any(_match_segments(parts[i:], rest) for i in range(len(parts) + 1))
    if not parts:
        return False
    return fnmatchcase(parts[0], head) and _match_segments(parts[1:], rest)


def _matches(package_dir: str, pattern: str) -> bool:
    pattern = pattern.strip()
    if pattern.startswith("./"):
        pattern = pattern[2:]
    parts = [p for p in package_dir.split("/") if p]
    patterns = [p for p in pattern.split("/") if p]
    return _match_segments(parts, patterns)


def is_workspace_member(package_dir: str, globs: list[str]) -> bool:
    """Match *package_dir* against pnpm globs, honouring ``!`` negations."""
    member = False
    for pattern in globs:
        if pattern.startswith("!"):
            if _matches(package_dir, pattern[1:]):
                member = False
        elif _matches(package_dir, pattern):
            member = True
    return member
