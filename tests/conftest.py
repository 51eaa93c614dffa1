"""Shared pytest fixtures for the scaffolder test suite.

Provides reusable fixtures for:
- A temporary pnpm workspace root
- A ScaffoldConfig pointed at that workspace with formatting disabled
- Scripted prompt answers for the interactive flow
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable, Optional

import pytest

from scaffold_gen.config import ScaffoldConfig
from scaffold_gen.scaffolder.generator import PackageGenerator


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Temporary monorepo root with a pnpm workspace file."""
    root = tmp_path / "monorepo"
    root.mkdir()
    (root / "pnpm-workspace.yaml").write_text(
        textwrap.dedent(
            """\
            packages:
              - "apps/*"
              - "packages/*"
              - "packages/configs/*"
            """
        ),
        encoding="utf-8",
    )
    (root / "packages").mkdir()
    yield root


@pytest.fixture
def scaffold_config(workspace: Path) -> ScaffoldConfig:
    """Config rooted at the temporary workspace, formatter disabled."""
    return ScaffoldConfig(cwd=workspace, format=False)


@pytest.fixture
def generator(scaffold_config: ScaffoldConfig) -> PackageGenerator:
    return PackageGenerator(scaffold_config)


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------

class ScriptedAsk:
    """Stand-in for ``Prompt.ask`` that replays canned answers.

    An answer of ``None`` means "accept the default".  Every call is recorded
    as ``(message, default, choices)``.
    """

    def __init__(self, answers: list[Optional[str]]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Optional[list[str]]]] = []

    def __call__(
        self, message: str, *, default: str = "", choices: Optional[list[str]] = None
    ) -> str:
        self.calls.append((message, default, choices))
        answer = self.answers.pop(0)
        return default if answer is None else answer


@pytest.fixture
def scripted_ask() -> Callable[[list[Optional[str]]], ScriptedAsk]:
    """Factory for :class:`ScriptedAsk` instances."""
    return ScriptedAsk
