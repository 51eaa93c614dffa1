"""Jinja2 template rendering for package scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``scaffold_gen/scaffolder/templates/`` directory and renders them with the
resolved package identity.  Also holds the static registry of the four files
every new workspace package starts with.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .models import TemplateFile


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Order matters: the manifest is always rewritten, the rest are only created.
PACKAGE_TEMPLATES: tuple[TemplateFile, ...] = (
    TemplateFile(
        template_path="package/package.json.j2",
        output_path_pattern="{package_dir}/package.json",
    ),
    TemplateFile(
        template_path="package/tsconfig.json.j2",
        output_path_pattern="{package_dir}/tsconfig.json",
        skip_if_exists=True,
    ),
    TemplateFile(
        template_path="package/src-index.ts.j2",
        output_path_pattern="{package_dir}/src/index.ts",
        skip_if_exists=True,
    ),
    TemplateFile(
        template_path="package/README.md.j2",
        output_path_pattern="{package_dir}/README.md",
        skip_if_exists=True,
    ),
)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for package scaffolding.

    Templates are rendered with a context dictionary holding the resolved
    identity (``scoped_name``, ``folder_name``, ``package_dir``) plus
    ``kind``, ``react`` and ``scope``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["json_str"] = _json_string_filter
        self.env.filters["relative_root"] = _relative_root_filter
        self.env.filters["camel_case"] = _camel_case_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"package/package.json.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _json_string_filter(value: Any) -> str:
    """Serialise a value as a JSON literal (strings get quoted and escaped)."""
    return json.dumps(value, ensure_ascii=False)


def _relative_root_filter(package_dir: str) -> str:
    """``packages/configs/foo`` -> ``../../..``."""
    depth = len([p for p in package_dir.split("/") if p])
    return "/".join([".."] * depth) if depth else "."


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``.

    A leading digit gets an underscore prefix so the result is a valid
    identifier (``3d-utils`` -> ``_3dUtils``).
    """
    import re

    parts = [p for p in re.split(r"[^A-Za-z0-9]+", value) if p]
    if not parts:
        return ""
    camel = parts[0].lower() + "".join(word.capitalize() for word in parts[1:])
    return f"_{camel}" if camel[0].isdigit() else camel


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
