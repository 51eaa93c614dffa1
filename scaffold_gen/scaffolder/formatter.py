"""External formatting pass over freshly emitted files.

The formatter is an opaque collaborator (prettier via pnpm by default).  Its
output streams straight to the terminal and the child inherits the current
environment unmodified.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Sequence

from ..utils import run_command
from .models import FormatterError


def build_format_command(command: str, files: Sequence[str]) -> str:
    """Append each file, shell-quoted, to the formatter *command*."""
    return " ".join([command, *(shlex.quote(str(f)) for f in files)])


async def format_files(
    files: Sequence[str],
    command: str,
    cwd: str | Path | None = None,
) -> bool:
    """Run the formatter over *files* and wait for it to finish.

    Returns:
        ``False`` when there was nothing to format, ``True`` otherwise.

    Raises:
        FormatterError: If the formatter exits with a non-zero status.
    """
    if not files:
        return False

    full_command = build_format_command(command, files)
    returncode = await run_command(full_command, cwd=cwd)
    if returncode != 0:
        raise FormatterError(returncode, full_command)
    return True
