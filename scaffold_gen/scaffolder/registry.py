"""Named generators selectable from the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..config import ScaffoldConfig
from .generator import PackageGenerator
from .models import GenerationResult, InvalidRequestError
from .prompts import AskFn, CliDefaults, resolve_request

Runner = Callable[[list[str], ScaffoldConfig, Optional[AskFn]], Awaitable[GenerationResult]]


@dataclass(frozen=True)
class GeneratorEntry:
    """A registered generator: what it is called and how to run it."""
    name: str
    description: str
    run: Runner


async def run_package(
    argv: list[str],
    config: ScaffoldConfig,
    ask: Optional[AskFn] = None,
) -> GenerationResult:
    """Resolve input from *argv* (and prompts) and scaffold one package."""
    defaults = CliDefaults.from_argv(argv)
    if defaults.scope is not None:
        scope = defaults.scope.strip().lstrip("@")
        if not scope:
            raise InvalidRequestError("--scope must not be empty")
        config = config.model_copy(update={"scope": scope})

    request = resolve_request(
        defaults,
        scope=config.scope,
        interactive=not defaults.yes,
        ask=ask,
    )
    generator = PackageGenerator(config)
    return await generator.generate(
        request, run_formatter=False if defaults.no_format else None
    )


GENERATORS: dict[str, GeneratorEntry] = {
    "package": GeneratorEntry(
        name="package",
        description="Create a new workspace package (default @biu/*)",
        run=run_package,
    ),
}

DEFAULT_GENERATOR = "package"


def get_generator(name: str) -> Optional[GeneratorEntry]:
    """Return the generator registered as *name*, if any."""
    return GENERATORS.get(name)
