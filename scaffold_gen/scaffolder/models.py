"""Pydantic v2 models for the package scaffolder.

Defines the request built from prompts or flags, the identity derived from
it, the static template registry entries, and the per-run result.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder."""


class InvalidRequestError(ScaffoldError):
    """Raised when user input cannot produce a valid package identity."""


class EmissionError(ScaffoldError):
    """Raised when writing one of the package files fails."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class FormatterError(ScaffoldError):
    """Raised when the external formatter exits with a non-zero status."""

    def __init__(self, returncode: int, command: str) -> None:
        self.returncode = returncode
        self.command = command
        super().__init__(f"Formatter exited with status {returncode}: {command}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class PackageKind(str, Enum):
    """Category of generated package; controls the default subdirectory."""
    LIB = "lib"
    CONFIG = "config"


class FileAction(str, Enum):
    """What happened to a single template file during emission."""
    ADD = "add"
    SKIP = "skip"


# ---------------------------------------------------------------------------
# Request & identity
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """User input for a single scaffolding run. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    raw_name: str = Field(..., description="Package name as typed, with or without scope")
    kind: PackageKind = Field(default=PackageKind.LIB)
    subdir_hint: Optional[str] = Field(
        default=None, description="Explicit subdirectory under the packages root"
    )
    include_react: bool = Field(default=False, description="Add React peer dependencies")


class ResolvedIdentity(BaseModel):
    """Canonical package name and destination derived from a request."""

    model_config = ConfigDict(frozen=True)

    scoped_name: str = Field(..., description="e.g. '@biu/my-utils'")
    folder_name: str = Field(..., description="Scope-stripped folder segment")
    package_dir: str = Field(..., description="Forward-slash path relative to the workspace root")


class TemplateFile(BaseModel):
    """One entry of the static template registry."""

    model_config = ConfigDict(frozen=True)

    template_path: str
    output_path_pattern: str
    skip_if_exists: bool = False

    def output_path(self, identity: ResolvedIdentity) -> str:
        """Substitute identity fields into the output path pattern."""
        return self.output_path_pattern.format(
            package_dir=identity.package_dir,
            folder_name=identity.folder_name,
        )


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class EmittedFile(BaseModel):
    """Outcome for a single template file."""
    path: str
    action: FileAction


class GenerationResult(BaseModel):
    """Everything a run produced, used for reporting."""

    identity: ResolvedIdentity
    files: list[EmittedFile] = Field(default_factory=list)
    formatted: bool = False

    @property
    def written(self) -> list[str]:
        """Paths that were written during this run."""
        return [f.path for f in self.files if f.action is FileAction.ADD]

    @property
    def skipped(self) -> list[str]:
        """Paths left untouched because they already existed."""
        return [f.path for f in self.files if f.action is FileAction.SKIP]
