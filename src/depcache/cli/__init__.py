"""Depcache CLI - Command-line interface for depcache."""

from __future__ import annotations

from depcache.cli.base import cli

__all__ = ["cli"]
