"""
binvendor provisions third-party binaries for a build: it downloads a
platform-specific distribution, extracts it and optionally installs the
binary, re-running only when a freshness check asks for it.
"""

from binvendor.binvendor_exceptions import (
    ArchiveError,
    BinvendorException,
    ConfigurationError,
    DownloadError,
    TemplateError,
)
from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_config import load_dependency_configs
from binvendor.dependency_models import (
    ArchiveType,
    DependencyConfig,
    EnsureContext,
    always_fetch,
    binary_missing,
    version_mismatch,
)
from binvendor.dependency_tasks import DependencyTasks, define_dependencies
from binvendor.platform_names import HostPlatform
from binvendor.template import Template

__all__ = [
    "ArchiveError",
    "ArchiveType",
    "BinvendorException",
    "BinvendorLogger",
    "ConfigurationError",
    "DependencyConfig",
    "DependencyTasks",
    "DownloadError",
    "EnsureContext",
    "HostPlatform",
    "Template",
    "TemplateError",
    "always_fetch",
    "binary_missing",
    "define_dependencies",
    "load_dependency_configs",
    "version_mismatch",
]
