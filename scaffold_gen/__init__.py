"""Workspace package scaffolder for the pnpm monorepo."""

__version__ = "0.1.0"
