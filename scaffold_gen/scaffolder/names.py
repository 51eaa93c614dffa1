"""Package name and destination resolution.

Pure functions only: nothing here touches the filesystem or prompts, so the
whole naming scheme can be unit-tested in isolation.

Examples::

    to_folder_name("@biu/foo-bar")   -> "foo-bar"
    to_scoped_name("foo-bar", "biu") -> "@biu/foo-bar"
    join_package_dir("packages", "configs", "eslint") -> "packages/configs/eslint"
"""

from __future__ import annotations

from typing import Optional

from .models import GenerationRequest, InvalidRequestError, PackageKind, ResolvedIdentity

SCOPE_MARKER = "@"
DEFAULT_CONFIG_SUBDIR = "configs"


def to_folder_name(raw: Optional[str]) -> str:
    """Convert a user-provided name into a folder name.

    ``"@biu/foo"`` becomes ``"foo"``; ``"@biu/"`` becomes ``""``; anything not
    starting with the scope marker is returned trimmed but otherwise as-is.
    """
    name = (raw or "").strip()
    if not name:
        return ""
    if name.startswith(SCOPE_MARKER):
        parts = name.split("/")
        return parts[1] if len(parts) > 1 else ""
    return name


def to_scoped_name(raw: Optional[str], scope: Optional[str]) -> str:
    """Return *raw* prefixed with ``@<scope>/`` unless it is already scoped."""
    name = (raw or "").strip()
    if not name:
        return ""
    if name.startswith(SCOPE_MARKER):
        return name

    clean_scope = (scope or "").strip()
    if clean_scope.startswith(SCOPE_MARKER):
        clean_scope = clean_scope[1:]
    return f"{SCOPE_MARKER}{clean_scope}/{name}"


def resolve_subdir(
    kind: PackageKind,
    subdir_hint: Optional[str] = None,
    config_subdir: str = DEFAULT_CONFIG_SUBDIR,
) -> str:
    """Pick the segment between the packages root and the folder name.

    An explicit hint wins verbatim; otherwise config packages nest under
    *config_subdir* and libraries sit directly in the packages root.
    """
    hint = (subdir_hint or "").strip()
    if hint:
        return hint
    return config_subdir if kind is PackageKind.CONFIG else ""


def join_package_dir(*segments: str) -> str:
    """Forward-slash join that drops empty segments and stray slashes."""
    parts: list[str] = []
    for segment in segments:
        for piece in segment.replace("\\", "/").split("/"):
            if piece:
                parts.append(piece)
    return "/".join(parts)


def resolve_identity(
    request: GenerationRequest,
    scope: str,
    packages_root: str = "packages",
    config_subdir: str = DEFAULT_CONFIG_SUBDIR,
) -> ResolvedIdentity:
    """Compute the scoped name, folder name and package directory.

    Raises:
        InvalidRequestError: If the name is blank or yields an empty folder
            name (e.g. ``"@biu/"``).
    """
    scoped_name = to_scoped_name(request.raw_name, scope)
    if not scoped_name:
        raise InvalidRequestError("Package name is required")

    folder_name = to_folder_name(scoped_name)
    if not folder_name:
        raise InvalidRequestError(
            f"Cannot derive a folder name from {request.raw_name!r}"
        )

    subdir = resolve_subdir(request.kind, request.subdir_hint, config_subdir)
    return ResolvedIdentity(
        scoped_name=scoped_name,
        folder_name=folder_name,
        package_dir=join_package_dir(packages_root, subdir, folder_name),
    )
