"""
Dependency configuration management.

This package handles loading dependency configurations and resolving them into
download, extraction and installation plans for the host platform.
"""

from .config_loader import configs_from_dict, load_dependency_configs
from .config_manager import DependencyConfigManager, DownloadPlan, ExtractionPlan, InstallPlan

__all__ = [
    "DependencyConfigManager",
    "DownloadPlan",
    "ExtractionPlan",
    "InstallPlan",
    "configs_from_dict",
    "load_dependency_configs",
]
