"""Package scaffolding orchestrator.

Takes a ``GenerationRequest`` and creates a new workspace package: resolves
its scoped name and destination, writes the four package files in order, and
finally hands them to the external formatter.

Emission is deliberately not transactional.  Each file is checked and
written on its own; if a write fails, the files before it stay on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Sequence

import yaml

from ..config import ScaffoldConfig
from ..utils import print_action, print_warning
from .formatter import format_files
from .models import (
    EmissionError,
    EmittedFile,
    FileAction,
    GenerationRequest,
    GenerationResult,
    ResolvedIdentity,
    TemplateFile,
)
from .names import resolve_identity
from .templates import PACKAGE_TEMPLATES, TemplateRenderer
from .workspace import is_workspace_member, load_workspace_globs


class PackageGenerator:
    """Creates the initial file set of a workspace package.

    Given a ``ScaffoldConfig``, :meth:`generate` produces under
    ``<cwd>/<packages_root>/[<subdir>/]<folder>/``:
    - ``package.json`` (always rewritten)
    - ``tsconfig.json``, ``src/index.ts`` and ``README.md`` (created only
      when missing, so hand edits survive a re-run)
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
        templates: Sequence[TemplateFile] = PACKAGE_TEMPLATES,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = renderer or TemplateRenderer()
        self.templates = tuple(templates)

    # -- Public API --------------------------------------------------------

    def resolve(self, request: GenerationRequest) -> ResolvedIdentity:
        """Resolve *request* against the configured scope and roots."""
        return resolve_identity(
            request,
            scope=self.config.scope,
            packages_root=self.config.packages_root,
            config_subdir=self.config.config_subdir,
        )

    async def generate(
        self,
        request: GenerationRequest,
        *,
        run_formatter: bool | None = None,
    ) -> GenerationResult:
        """Scaffold the package described by *request*.

        Args:
            request: Validated user input.
            run_formatter: Override ``config.format`` for this run.

        Returns:
            The resolved identity and the per-file outcome.

        Raises:
            InvalidRequestError: Before any file is touched, if the name does
                not yield a folder name.
            EmissionError: If a file cannot be written.
            FormatterError: If the formatter fails; the files stay written.
        """
        identity = self.resolve(request)
        context = self.build_context(request, identity)

        self._check_workspace(identity)

        result = GenerationResult(identity=identity)
        result.files = await self.emit(identity, context)

        should_format = self.config.format if run_formatter is None else run_formatter
        if should_format:
            result.formatted = await format_files(
                [f.path for f in result.files],
                self.config.formatter_command,
                cwd=self.config.cwd,
            )
        return result

    def build_context(
        self, request: GenerationRequest, identity: ResolvedIdentity
    ) -> dict[str, Any]:
        """Template variables shared by every package file."""
        return {
            "scoped_name": identity.scoped_name,
            "folder_name": identity.folder_name,
            "package_dir": identity.package_dir,
            "kind": request.kind.value,
            "react": request.include_react,
            "scope": self.config.scope,
        }

    async def emit(
        self, identity: ResolvedIdentity, context: dict[str, Any]
    ) -> list[EmittedFile]:
        """Write every registered template, in order, honouring skip-if-exists."""
        emitted: list[EmittedFile] = []
        for template in self.templates:
            rel_path = template.output_path(identity)
            target = Path(self.config.cwd) / rel_path

            exists = await asyncio.to_thread(target.exists)
            if template.skip_if_exists and exists:
                emitted.append(EmittedFile(path=rel_path, action=FileAction.SKIP))
                print_action("skip", rel_path)
                continue

            try:
                await self.renderer.render_to_file(template.template_path, target, context)
            except OSError as exc:
                raise EmissionError(rel_path, exc.strerror or str(exc)) from exc

            emitted.append(EmittedFile(path=rel_path, action=FileAction.ADD))
            print_action("add", rel_path)
        return emitted

    # -- Internal helpers --------------------------------------------------

    def _check_workspace(self, identity: ResolvedIdentity) -> None:
        try:
            globs = load_workspace_globs(self.config.workspace_path)
        except (yaml.YAMLError, OSError) as exc:
            print_warning(
                f"Could not read {self.config.workspace_file} ({exc.__class__.__name__}); "
                "skipping the workspace membership check."
            )
            return
        if globs is None:
            return
        if not is_workspace_member(identity.package_dir, globs):
            print_warning(
                f"{identity.package_dir} is not matched by any pattern in "
                f"{self.config.workspace_file}; pnpm will not pick it up."
            )
