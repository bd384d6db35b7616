"""
File system adapter for the validator component.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path


class LocalFileSystemAdapter:
    """Adapter for local file system probes."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists, raising on errors other than absence."""
        try:
            os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except ValueError as e:
            # e.g. embedded null byte; the port only raises OSError
            raise OSError(errno.EINVAL, str(e), str(path)) from e
        return True


# Default adapter instance
default_filesystem = LocalFileSystemAdapter()
