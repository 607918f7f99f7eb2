"""
Dependency models.

This package provides the Pydantic data models describing a vendored
dependency, the archive type table and the context handed to freshness
predicates.
"""

from .archive_type import ArchiveType, EXTENSIONS, extension_for, resolve_archive_type
from .dependency_config import DependencyConfig
from .ensure_context import (
    EnsureContext,
    NeedsFetch,
    always_fetch,
    binary_missing,
    version_mismatch,
)

__all__ = [
    # Archive types
    "ArchiveType",
    "EXTENSIONS",
    "extension_for",
    "resolve_archive_type",
    # Configuration
    "DependencyConfig",
    # Freshness
    "EnsureContext",
    "NeedsFetch",
    "always_fetch",
    "binary_missing",
    "version_mismatch",
]
