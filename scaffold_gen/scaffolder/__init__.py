"""Workspace package scaffolder.

Takes a ``GenerationRequest`` (from prompts or flags) and renders the initial
file set of a new workspace package: ``package.json``, ``tsconfig.json``,
``src/index.ts`` and ``README.md``.

Quick usage::

    from scaffold_gen.scaffolder import GenerationRequest, PackageGenerator, PackageKind

    request = GenerationRequest(raw_name="my-utils", kind=PackageKind.LIB)
    result = await PackageGenerator().generate(request, run_formatter=False)
"""

from scaffold_gen.scaffolder.generator import PackageGenerator
from scaffold_gen.scaffolder.models import (
    EmissionError,
    FormatterError,
    GenerationRequest,
    GenerationResult,
    InvalidRequestError,
    PackageKind,
    ResolvedIdentity,
    ScaffoldError,
    TemplateFile,
)
from scaffold_gen.scaffolder.names import resolve_identity, to_folder_name, to_scoped_name
from scaffold_gen.scaffolder.templates import TemplateRenderer

__all__ = [
    "EmissionError",
    "FormatterError",
    "GenerationRequest",
    "GenerationResult",
    "InvalidRequestError",
    "PackageGenerator",
    "PackageKind",
    "ResolvedIdentity",
    "ScaffoldError",
    "TemplateFile",
    "TemplateRenderer",
    "resolve_identity",
    "to_folder_name",
    "to_scoped_name",
]
