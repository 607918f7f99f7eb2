"""
Dependency downloader.

This package handles:
1. Fetching distributions from http(s) and file URIs
2. Storing them in the dependency's distribution directory
"""

from .downloader import DependencyDownloader
from .fetchers import Fetcher, HttpFetcher, LocalFetcher, fetcher_for

__all__ = ["DependencyDownloader", "Fetcher", "HttpFetcher", "LocalFetcher", "fetcher_for"]
