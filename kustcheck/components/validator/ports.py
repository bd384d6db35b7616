"""
Validator component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemPort(Protocol):
    """Port for read-only existence probes."""

    def exists(self, path: Path) -> bool:
        """
        Check if a path exists.

        Returns False only when the path is not found.
        Any other failure is raised as OSError.
        """
        ...
