"""
Download task: renders the distribution URI for the host and stores the
distribution under the dependency's working tree.
"""

import logging
from typing import Optional

from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_downloader import DependencyDownloader, Fetcher
from binvendor.dependency_models import DependencyConfig
from binvendor.platform_names import HostPlatform
from binvendor.tasks.base import DependencyTask


class DownloadTask(DependencyTask):
    """
    Downloads the dependency's distribution into ``path/distribution_directory``.
    """

    default_name = "download"

    def __init__(
        self,
        config: DependencyConfig,
        host: Optional[HostPlatform] = None,
        logger: Optional[BinvendorLogger] = None,
        fetcher: Optional[Fetcher] = None,
    ):
        super().__init__(config, host, logger)
        self.downloader = DependencyDownloader(self.logger, fetcher)

    @property
    def description(self) -> str:
        return f"Download {self.config.name} distribution"

    def invoke(self) -> None:
        plan = self.manager.create_download_plan()
        self.logger.log(f"Using download plan: {plan!r}.", logging.DEBUG)
        self.downloader.download(plan)
