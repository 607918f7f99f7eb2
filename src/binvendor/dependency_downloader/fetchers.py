"""
Fetchers retrieve the bytes behind a URI into a local temporary file.

Retry and authentication policies are left to the caller, who can supply any
object implementing ``fetch(uri) -> pathlib.Path``.
"""

import logging
import os
import pathlib
import shutil
import tempfile
from typing import Optional, Protocol
from urllib.parse import unquote, urlparse

import requests

from binvendor.binvendor_exceptions import DownloadError
from binvendor.binvendor_logger import BinvendorLogger


class Fetcher(Protocol):
    def fetch(self, uri: str) -> pathlib.Path:
        """Download ``uri`` into a new temporary file and return its path."""
        ...


def _temporary_path(uri: str) -> pathlib.Path:
    suffix = "".join(pathlib.PurePosixPath(urlparse(uri).path).suffixes[-2:])
    with tempfile.NamedTemporaryFile(prefix="binvendor-", suffix=suffix, delete=False) as f:
        return pathlib.Path(f.name)


class HttpFetcher:
    """
    Fetches ``http`` and ``https`` URIs with requests, streaming the body to disk.

    Without an injected session, each fetch opens its own session and closes it
    when the fetch ends.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = 60,
        chunk_size: int = 1024 * 64,
        logger: Optional[BinvendorLogger] = None,
    ):
        self.session = session
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.logger = logger or BinvendorLogger()

    def fetch(self, uri: str) -> pathlib.Path:
        if self.session is not None:
            return self._fetch(self.session, uri)
        with requests.Session() as session:
            return self._fetch(session, uri)

    def _fetch(self, session: requests.Session, uri: str) -> pathlib.Path:
        temporary_path = _temporary_path(uri)
        self.logger.log(f"Fetching {uri} to {temporary_path}", logging.DEBUG)
        try:
            with session.get(uri, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(temporary_path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            f.write(chunk)
        except requests.RequestException as e:
            temporary_path.unlink(missing_ok=True)
            raise DownloadError(f"Failed to download {uri}: {e}", uri) from e
        except BaseException:
            temporary_path.unlink(missing_ok=True)
            raise
        return temporary_path


class LocalFetcher:
    """
    Fetches ``file://`` URIs and plain filesystem paths by copying them.
    """

    def __init__(self, logger: Optional[BinvendorLogger] = None):
        self.logger = logger or BinvendorLogger()

    def fetch(self, uri: str) -> pathlib.Path:
        parsed = urlparse(uri)
        source = unquote(parsed.path) if parsed.scheme == "file" else uri
        if not os.path.isfile(source):
            raise FileNotFoundError(f"No file to fetch at {source}")

        temporary_path = _temporary_path(uri)
        self.logger.log(f"Copying {source} to {temporary_path}", logging.DEBUG)
        try:
            shutil.copyfile(source, temporary_path)
        except BaseException:
            temporary_path.unlink(missing_ok=True)
            raise
        return temporary_path


def fetcher_for(uri: str) -> Fetcher:
    """Returns a fetcher able to retrieve ``uri``."""
    scheme = urlparse(uri).scheme.lower()
    if scheme in ("http", "https"):
        return HttpFetcher()
    if scheme in ("", "file") or (len(scheme) == 1 and os.name == "nt"):
        return LocalFetcher()
    raise DownloadError(f"Unsupported URI scheme '{scheme}'", uri)
