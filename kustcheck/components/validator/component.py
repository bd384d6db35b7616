"""
Validator component - Decide whether a directory is a Kustomize component.

A directory is a component when one of the marker files exists directly
under it. Markers are probed in a fixed order and the first hit wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .models import (
    ComponentProbeError,
    ErrorPolicy,
    ValidateComponentInput,
    ValidateComponentOutput,
)
from .ports import FileSystemPort

logger = logging.getLogger(__name__)

# Probe order matters for reporting, not for the result
MARKER_FILENAMES = ("kustomization.yaml", "kustomization.yml", "Kustomization")


def candidate_paths(component_path: Path | str) -> list[Path]:
    """Pure path construction - no I/O."""
    base = Path(component_path)
    return [base / name for name in MARKER_FILENAMES]


def _probe(fs: FileSystemPort, path: Path, policy: ErrorPolicy) -> bool:
    try:
        found = fs.exists(path)
    except OSError as e:
        if policy is ErrorPolicy.TREAT_AS_PRESENT:
            logger.warning("Probe of %s failed (%s); counting marker as present", path, e)
            return True
        raise ComponentProbeError(path, e) from e

    logger.debug("Probed %s: %s", path, "found" if found else "not found")
    return found


def run(
    inp: ValidateComponentInput,
    *,
    fs: FileSystemPort,
    policy: ErrorPolicy = ErrorPolicy.PROPAGATE,
) -> ValidateComponentOutput:
    """
    Validate a component directory.

    This is the main entry point for the validator component.

    Args:
        inp: Input containing the directory to check.
        fs: File system port used for existence probes.
        policy: Handling of probe errors other than "not found".

    Returns:
        ValidateComponentOutput naming the first marker found, if any.

    Raises:
        ComponentProbeError: A probe failed and policy is PROPAGATE.
    """
    probed: list[str] = []

    for path in candidate_paths(inp.component_path):
        probed.append(str(path))
        if _probe(fs, path, policy):
            return ValidateComponentOutput(
                component_path=str(inp.component_path),
                is_valid=True,
                marker=path.name,
                probed=probed,
            )

    return ValidateComponentOutput(
        component_path=str(inp.component_path),
        is_valid=False,
        probed=probed,
    )


def is_valid_component(
    fs: FileSystemPort,
    component_path: Path | str,
    *,
    policy: ErrorPolicy = ErrorPolicy.PROPAGATE,
) -> bool:
    """Return True if any marker file exists directly under component_path."""
    inp = ValidateComponentInput(component_path=component_path)
    return run(inp, fs=fs, policy=policy).is_valid
