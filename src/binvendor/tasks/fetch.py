"""
Fetch task: download followed by extract.
"""

import logging
from typing import Callable, Optional

from binvendor.binvendor_logger import BinvendorLogger


class FetchTask:
    """
    Downloads and extracts a dependency, whether or not it is already present.
    """

    default_name = "fetch"

    def __init__(
        self,
        dependency: str,
        download: Callable[[], None],
        extract: Callable[[], None],
        logger: Optional[BinvendorLogger] = None,
    ):
        self.dependency = dependency
        self.download = download
        self.extract = extract
        self.logger = logger or BinvendorLogger()

    @property
    def name(self) -> str:
        return self.default_name

    @property
    def description(self) -> str:
        return f"Fetch {self.dependency}"

    def invoke(self) -> None:
        self.logger.log(f"Fetching '{self.dependency}'...", logging.INFO)
        self.download()
        self.extract()

    def __call__(self) -> None:
        self.invoke()
