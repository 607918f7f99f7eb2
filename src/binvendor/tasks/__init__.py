"""
Tasks operating on one dependency: clean, download, extract, install, fetch
and ensure.
"""

from .base import DependencyTask
from .clean import CleanTask
from .download import DownloadTask
from .ensure import EnsureState, EnsureTask
from .extract import ExtractTask
from .fetch import FetchTask
from .install import InstallTask

__all__ = [
    "CleanTask",
    "DependencyTask",
    "DownloadTask",
    "EnsureState",
    "EnsureTask",
    "ExtractTask",
    "FetchTask",
    "InstallTask",
]
