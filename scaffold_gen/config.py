"""Scaffolder configuration.

Centralised, typed configuration for the package generator.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_FALSY = {"0", "false", "no", "off"}


class ScaffoldConfig(BaseModel):
    """Global scaffolder configuration.

    Created once by the CLI entry point (usually via :meth:`from_env`) and
    passed to the generator.  All paths are resolved relative to ``cwd``.
    """

    scope: str = Field(default="biu", description="Organisation scope applied to every package name")
    packages_root: str = Field(default="packages", description="Workspace directory holding packages")
    config_subdir: str = Field(default="configs", description="Default subdirectory for config packages")
    formatter_command: str = Field(
        default="pnpm -w exec prettier --write",
        description="Shell command prefix used for the formatting pass",
    )
    format: bool = Field(default=True, description="Run the formatter over emitted files")
    workspace_file: str = Field(default="pnpm-workspace.yaml")
    cwd: Path = Field(default=Path("."))

    @field_validator("scope")
    @classmethod
    def _strip_scope_marker(cls, value: str) -> str:
        value = value.strip().lstrip("@")
        if not value:
            raise ValueError("scope must not be empty")
        return value

    @field_validator("packages_root")
    @classmethod
    def _normalise_root(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("packages_root must not be empty")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def workspace_path(self) -> Path:
        """Path to the pnpm workspace manifest."""
        return self.cwd / self.workspace_file

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_SCOPE, SCAFFOLD_PACKAGES_ROOT, SCAFFOLD_CONFIG_SUBDIR,
            SCAFFOLD_FORMATTER, SCAFFOLD_FORMAT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_SCOPE"):
            kwargs["scope"] = os.environ["SCAFFOLD_SCOPE"]
        if os.environ.get("SCAFFOLD_PACKAGES_ROOT"):
            kwargs["packages_root"] = os.environ["SCAFFOLD_PACKAGES_ROOT"]
        if os.environ.get("SCAFFOLD_CONFIG_SUBDIR"):
            kwargs["config_subdir"] = os.environ["SCAFFOLD_CONFIG_SUBDIR"]
        if os.environ.get("SCAFFOLD_FORMATTER"):
            kwargs["formatter_command"] = os.environ["SCAFFOLD_FORMATTER"]
        if os.environ.get("SCAFFOLD_FORMAT"):
            kwargs["format"] = os.environ["SCAFFOLD_FORMAT"].strip().lower() not in _FALSY

        return cls(**kwargs)
