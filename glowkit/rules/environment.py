"""
Environment adapter for kit rules.
"""

from __future__ import annotations

import os
from typing import Protocol


class EnvironmentPort(Protocol):
    """Read-only access to environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...


class OsEnvironmentAdapter:
    """Adapter for OS environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        return os.environ.get(key, default)


# Default adapter instance
default_environment = OsEnvironmentAdapter()
