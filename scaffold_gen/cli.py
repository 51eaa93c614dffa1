"""Command-line entry point for the workspace scaffolder.

Usage::

    python -m scaffold_gen                      # interactive, "package" generator
    python -m scaffold_gen package -- --name my-utils --kind lib --react
    scaffold-gen package --name shared-eslint --kind config --yes --no-format
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional

from pydantic import ValidationError

from .config import ScaffoldConfig
from .scaffolder.models import FormatterError, GenerationResult, ScaffoldError
from .scaffolder.registry import DEFAULT_GENERATOR, GENERATORS, get_generator
from .utils import print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    """Parser for ``--help`` and generator selection.

    The generator still reads its own flags by exact token from the raw
    argument list; they are declared here so ``--help`` documents them.
    """
    generators = "\n".join(
        f"  {entry.name:<10} {entry.description}" for entry in GENERATORS.values()
    )
    parser = argparse.ArgumentParser(
        prog="scaffold-gen",
        allow_abbrev=False,
        description="Workspace scaffolder -- creates new packages in a pnpm monorepo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Generators:\n"
            f"{generators}\n\n"
            "Flags pre-fill the interactive prompts; --yes skips the prompts entirely."
        ),
    )
    parser.add_argument(
        "generator",
        nargs="?",
        default=DEFAULT_GENERATOR,
        choices=sorted(GENERATORS),
        help=f"Generator to run (default: {DEFAULT_GENERATOR})",
    )
    parser.add_argument("--name", nargs="?", help="Package name, with or without the scope")
    parser.add_argument("--kind", nargs="?", help="Package kind: lib or config")
    parser.add_argument("--dir", nargs="?", help="Subdirectory under the packages root")
    parser.add_argument(
        "--react",
        nargs="?",
        const="true",
        help="Add React peerDependencies (true/false, bare flag means true)",
    )
    parser.add_argument("--scope", nargs="?", help="Override the organisation scope")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Never prompt; fail when the name is missing",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip the formatting pass",
    )
    return parser


def _report(result: GenerationResult) -> None:
    identity = result.identity
    print_summary_table(
        {
            "Package": identity.scoped_name,
            "Directory": identity.package_dir,
            "Written": str(len(result.written)),
            "Skipped": str(len(result.skipped)),
            "Formatted": "yes" if result.formatted else "no",
        },
        title="Scaffold Summary",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``python -m scaffold_gen``."""
    raw = list(sys.argv[1:] if argv is None else argv)
    # A bare "--" only separates generator flags; argparse would treat what
    # follows it as positionals.
    flags = [token for token in raw if token != "--"]
    args, _ = build_parser().parse_known_args(flags)

    entry = get_generator(args.generator)
    rest = flags[1:] if flags and flags[0] == args.generator else flags

    try:
        config = ScaffoldConfig.from_env()
    except ValidationError as exc:
        print_error(f"Invalid SCAFFOLD_* configuration:\n{exc}")
        return 1

    try:
        result = asyncio.run(entry.run(rest, config, None))
    except FormatterError as exc:
        print_warning(str(exc))
        print_warning("Files were written but could not be formatted.")
        return 1
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return 1
    except KeyboardInterrupt:
        print_error("Aborted.")
        return 130

    _report(result)
    print_success(f"Created {result.identity.scoped_name} in {result.identity.package_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
