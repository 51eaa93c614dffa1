"""Input resolution for the package generator.

Builds a :class:`GenerationRequest` either from command-line flags alone
(unattended mode) or by asking questions with Rich, using the flags as
pre-filled defaults.

Flags are read straight from the raw argument list so the generator can be
driven non-interactively, e.g.::

    scaffold-gen package -- --name my-utils --kind lib --react
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from pydantic import BaseModel, Field
from rich.prompt import Prompt

from ..utils import console, print_error
from .models import GenerationRequest, InvalidRequestError, PackageKind
from .names import to_folder_name

ArgValue = Union[str, bool, None]
AskFn = Callable[..., str]

NAME_REQUIRED = "Package name is required"
NAME_NEEDS_FOLDER = "Package name needs a segment after the scope, e.g. @scope/my-utils"
KIND_CHOICES = [kind.value for kind in PackageKind]
REACT_CHOICES = ["no", "yes"]


# ---------------------------------------------------------------------------
# Flag parsing
# ---------------------------------------------------------------------------


def get_arg(argv: list[str], key: str) -> ArgValue:
    """Look up ``--key`` in *argv*.

    Returns ``None`` when the flag is absent, ``True`` when it is present
    without a value (end of args, or the next token is another ``--`` flag),
    otherwise the following token.
    """
    flag = f"--{key}"
    if flag not in argv:
        return None
    index = argv.index(flag)
    if index + 1 >= len(argv):
        return True
    value = argv[index + 1]
    if not value or value.startswith("--"):
        return True
    return value


def parse_bool(value: ArgValue) -> bool:
    """Case-insensitive ``"true"`` check; anything else is ``False``."""
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _as_text(value: ArgValue) -> Optional[str]:
    # A valueless flag like ``--name`` carries no usable text.
    return value if isinstance(value, str) else None


class CliDefaults(BaseModel):
    """Values collected from flags, used to pre-fill the prompts."""

    scope: Optional[str] = None
    name: Optional[str] = None
    kind: Optional[str] = None
    dir: Optional[str] = None
    react: Optional[bool] = None
    yes: bool = Field(default=False, description="Never prompt; fail on missing input")
    no_format: bool = Field(default=False, description="Skip the formatting pass")

    @classmethod
    def from_argv(cls, argv: list[str]) -> "CliDefaults":
        """Collect every recognised flag from *argv*."""
        react = get_arg(argv, "react")
        return cls(
            scope=_as_text(get_arg(argv, "scope")),
            name=_as_text(get_arg(argv, "name")),
            kind=_as_text(get_arg(argv, "kind")),
            dir=_as_text(get_arg(argv, "dir")),
            react=None if react is None else parse_bool(react),
            yes=get_arg(argv, "yes") is not None,
            no_format=get_arg(argv, "no-format") is not None,
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_name(value: Optional[str]) -> Optional[str]:
    """Return an error message for an unusable name, ``None`` when valid.

    Blank names and scope-only names such as ``@biu/`` are rejected.
    """
    if not (value or "").strip():
        return NAME_REQUIRED
    if not to_folder_name(value):
        return NAME_NEEDS_FOLDER
    return None


def parse_kind(value: Optional[str]) -> PackageKind:
    """Map ``lib``/``config`` (any case) to :class:`PackageKind`."""
    try:
        return PackageKind((value or PackageKind.LIB.value).strip().lower())
    except ValueError:
        raise InvalidRequestError(
            f"Unknown package kind {value!r} (expected one of: {', '.join(KIND_CHOICES)})"
        ) from None


# ---------------------------------------------------------------------------
# Request resolution
# ---------------------------------------------------------------------------


def _rich_ask(message: str, *, default: str = "", choices: Optional[list[str]] = None) -> str:
    return Prompt.ask(message, default=default, choices=choices, console=console)


def resolve_request(
    defaults: CliDefaults,
    *,
    scope: str,
    interactive: bool = True,
    ask: Optional[AskFn] = None,
) -> GenerationRequest:
    """Build a :class:`GenerationRequest` from flags and/or prompts.

    Args:
        defaults: Values parsed from the command line.
        scope: Scope shown in the name prompt.
        interactive: When ``False`` (``--yes``) no questions are asked.
        ask: Prompt function, ``ask(message, default=..., choices=...)``.
            Defaults to :class:`rich.prompt.Prompt`.

    Raises:
        InvalidRequestError: In unattended mode when the name is missing or
            the kind is unknown.
    """
    if not interactive:
        error = validate_name(defaults.name)
        if error:
            raise InvalidRequestError(error)
        return GenerationRequest(
            raw_name=(defaults.name or "").strip(),
            kind=parse_kind(defaults.kind),
            subdir_hint=(defaults.dir or "").strip() or None,
            include_react=bool(defaults.react),
        )

    ask = ask or _rich_ask

    name = defaults.name or ""
    while True:
        name = ask(f"Package name (without @{scope}/, e.g. my-utils)", default=name)
        error = validate_name(name)
        if error is None:
            break
        print_error(error)
        name = ""

    kind_default = (defaults.kind or PackageKind.LIB.value).strip().lower()
    if kind_default not in KIND_CHOICES:
        kind_default = PackageKind.LIB.value
    kind = parse_kind(ask("Package kind", default=kind_default, choices=KIND_CHOICES))

    subdir = ask(
        "Subdirectory under packages/ (blank for packages/ or packages/configs/)",
        default=defaults.dir or "",
    )

    react = ask(
        "Include React peerDependencies?",
        default="yes" if defaults.react else "no",
        choices=REACT_CHOICES,
    )

    return GenerationRequest(
        raw_name=name.strip(),
        kind=kind,
        subdir_hint=subdir.strip() or None,
        include_react=react.strip().lower() in ("yes", "true"),
    )
