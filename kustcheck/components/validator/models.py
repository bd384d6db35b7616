"""
Validator component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ErrorPolicy(str, Enum):
    """How probe failures other than "not found" are handled."""

    PROPAGATE = "propagate"
    TREAT_AS_PRESENT = "treat_as_present"


class ComponentProbeError(Exception):
    """Raised when a marker probe fails for a reason other than absence."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to probe {path}: {cause}")


@dataclass(frozen=True)
class ValidateComponentInput:
    """Input for validating a component directory."""

    component_path: Path | str


@dataclass(frozen=True)
class ValidateComponentOutput:
    """Output from validating a component directory."""

    component_path: str
    is_valid: bool
    marker: str | None = None
    probed: list[str] = field(default_factory=list)
