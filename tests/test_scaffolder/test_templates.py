"""Tests for the Jinja2 renderer and the package templates."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from jinja2 import UndefinedError

from scaffold_gen.scaffolder.models import ResolvedIdentity
from scaffold_gen.scaffolder.templates import (
    PACKAGE_TEMPLATES,
    TemplateRenderer,
    _camel_case_filter,
    _relative_root_filter,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def _context(**overrides: Any) -> dict[str, Any]:
    context = {
        "scoped_name": "@biu/my-utils",
        "folder_name": "my-utils",
        "package_dir": "packages/my-utils",
        "kind": "lib",
        "react": False,
        "scope": "biu",
    }
    context.update(overrides)
    return context


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestPackageTemplates:
    def test_four_entries_in_order(self):
        outputs = [t.output_path_pattern for t in PACKAGE_TEMPLATES]
        assert outputs == [
            "{package_dir}/package.json",
            "{package_dir}/tsconfig.json",
            "{package_dir}/src/index.ts",
            "{package_dir}/README.md",
        ]

    def test_only_manifest_is_overwritten(self):
        flags = [t.skip_if_exists for t in PACKAGE_TEMPLATES]
        assert flags == [False, True, True, True]

    def test_output_path_substitution(self):
        identity = ResolvedIdentity(
            scoped_name="@biu/foo", folder_name="foo", package_dir="packages/configs/foo"
        )
        assert PACKAGE_TEMPLATES[2].output_path(identity) == "packages/configs/foo/src/index.ts"

    def test_every_template_exists(self, renderer):
        for template in PACKAGE_TEMPLATES:
            assert (renderer.template_dir / template.template_path).is_file()


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


class TestManifestTemplate:
    def test_valid_json_with_name(self, renderer):
        manifest = json.loads(renderer.render("package/package.json.j2", _context()))
        assert manifest["name"] == "@biu/my-utils"
        assert manifest["private"] is True

    def test_no_react_entries_by_default(self, renderer):
        content = renderer.render("package/package.json.j2", _context())
        manifest = json.loads(content)
        assert "peerDependencies" not in manifest
        assert "react" not in content

    def test_react_peer_dependencies(self, renderer):
        manifest = json.loads(renderer.render("package/package.json.j2", _context(react=True)))
        assert set(manifest["peerDependencies"]) == {"react", "react-dom"}
        assert "react" in manifest["devDependencies"]

    def test_lib_uses_shared_configs(self, renderer):
        manifest = json.loads(renderer.render("package/package.json.j2", _context()))
        assert manifest["devDependencies"]["@biu/eslint-config"] == "workspace:*"
        assert manifest["prettier"] == "@biu/prettier-config"

    @pytest.mark.parametrize("react", [False, True])
    def test_config_kind_is_valid_json(self, renderer, react):
        context = _context(
            kind="config",
            react=react,
            scoped_name="@biu/shared-eslint",
            folder_name="shared-eslint",
            package_dir="packages/configs/shared-eslint",
        )
        manifest = json.loads(renderer.render("package/package.json.j2", context))
        assert manifest["devDependencies"]["@biu/eslint-config"] == "workspace:*"
        assert manifest["prettier"] == "@biu/prettier-config"

    @pytest.mark.parametrize("folder", ["eslint-config", "prettier-config"])
    def test_shared_config_packages_do_not_depend_on_themselves(self, renderer, folder):
        context = _context(
            kind="config",
            scoped_name=f"@biu/{folder}",
            folder_name=folder,
            package_dir=f"packages/configs/{folder}",
        )
        manifest = json.loads(renderer.render("package/package.json.j2", context))
        assert "@biu/eslint-config" not in manifest["devDependencies"]
        assert "@biu/prettier-config" not in manifest["devDependencies"]
        assert "prettier" not in manifest


# ---------------------------------------------------------------------------
# tsconfig / entry / readme
# ---------------------------------------------------------------------------


class TestOtherTemplates:
    def test_tsconfig_extends_root(self, renderer):
        tsconfig = json.loads(renderer.render("package/tsconfig.json.j2", _context()))
        assert tsconfig["extends"] == "../../tsconfig.base.json"
        assert "jsx" not in tsconfig["compilerOptions"]

    def test_tsconfig_depth_for_nested_package(self, renderer):
        context = _context(package_dir="packages/configs/shared-eslint", react=True)
        tsconfig = json.loads(renderer.render("package/tsconfig.json.j2", context))
        assert tsconfig["extends"] == "../../../tsconfig.base.json"
        assert tsconfig["compilerOptions"]["jsx"] == "react-jsx"

    def test_tsconfig_with_quote_in_dir(self, renderer):
        context = _context(package_dir='packages/we"ird/pkg')
        tsconfig = json.loads(renderer.render("package/tsconfig.json.j2", context))
        assert tsconfig["extends"] == "../../../tsconfig.base.json"

    def test_entry_stub_lib(self, renderer):
        content = renderer.render("package/src-index.ts.j2", _context())
        assert "export const myUtilsName" in content

    def test_entry_stub_leading_digit(self, renderer):
        context = _context(scoped_name="@biu/3d-utils", folder_name="3d-utils")
        content = renderer.render("package/src-index.ts.j2", context)
        assert "export const _3dUtilsName" in content

    def test_entry_stub_config(self, renderer):
        content = renderer.render("package/src-index.ts.j2", _context(kind="config"))
        assert "export default config" in content

    def test_readme(self, renderer):
        content = renderer.render("package/README.md.j2", _context())
        assert content.startswith("# @biu/my-utils")
        assert "packages/my-utils" in content

    def test_missing_variable_fails(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("package/README.md.j2", {})


# ---------------------------------------------------------------------------
# render_to_file & filters
# ---------------------------------------------------------------------------


class TestRenderToFile:
    async def test_creates_parent_dirs(self, renderer, tmp_path: Path):
        target = tmp_path / "a" / "b" / "README.md"
        written = await renderer.render_to_file("package/README.md.j2", target, _context())
        assert written == target
        assert target.read_text(encoding="utf-8").startswith("# @biu/my-utils")


class TestFilters:
    def test_relative_root(self):
        assert _relative_root_filter("packages/foo") == "../.."
        assert _relative_root_filter("") == "."

    def test_camel_case(self):
        assert _camel_case_filter("my-utils") == "myUtils"
        assert _camel_case_filter("shared_eslint.config") == "sharedEslintConfig"
        assert _camel_case_filter("---") == ""

    def test_camel_case_leading_digit(self):
        assert _camel_case_filter("3d-utils") == "_3dUtils"
