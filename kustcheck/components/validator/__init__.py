"""
Validator component - Decide whether a directory is a Kustomize component.
"""

from .component import (
    MARKER_FILENAMES,
    candidate_paths,
    is_valid_component,
    run,
)
from .models import (
    ComponentProbeError,
    ErrorPolicy,
    ValidateComponentInput,
    ValidateComponentOutput,
)
from .ports import FileSystemPort

__all__ = [
    # Component entry points
    "run",
    "is_valid_component",
    "candidate_paths",
    # Models
    "ValidateComponentInput",
    "ValidateComponentOutput",
    "ErrorPolicy",
    # Ports
    "FileSystemPort",
    # Exceptions
    "ComponentProbeError",
    # Constants
    "MARKER_FILENAMES",
]
