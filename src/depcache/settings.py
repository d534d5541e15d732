from __future__ import annotations

import os
import platform as _platform
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CacheSettings:
    """Configuration settings for a cache coordinator."""

    platform: str
    """Runner platform name, used verbatim as the first segment of every cache key."""

    workspace: str
    """Build workspace root that manifest globs are evaluated against."""

    home: str
    """Home directory under which package-manager artifact directories live."""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> CacheSettings:
        """
        Build settings from runner environment variables.

        Reads ``RUNNER_OS``, ``GITHUB_WORKSPACE`` and ``HOME``, falling back to the
        interpreter's platform name, the current directory and the user's home.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ
        return cls(
            platform=env.get("RUNNER_OS") or _platform.system(),
            workspace=env.get("GITHUB_WORKSPACE") or str(Path.cwd()),
            home=env.get("HOME") or str(Path.home()),
        )
