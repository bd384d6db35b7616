"""
kustcheck - Kustomize component directory checks.
"""

__version__ = "0.1.0"
