"""
Dependency downloader implementation.

Handles storing a dependency's distribution in its distribution directory.
"""

import logging
import os
import shutil
from typing import Optional

from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_config.config_manager import DownloadPlan
from binvendor.dependency_downloader.fetchers import Fetcher, fetcher_for


class DependencyDownloader:
    """
    Downloads dependency distributions.

    Executes download plans. Failures are not retried or swallowed: any error
    raised by the fetcher or the filesystem reaches the caller.
    """

    def __init__(
        self,
        logger: BinvendorLogger,
        fetcher: Optional[Fetcher] = None,
    ):
        """
        Initialize the dependency downloader.

        Args:
            logger: Logger for progress messages
            fetcher: Retrieves URIs into temporary files; chosen per URI scheme
                when omitted
        """
        self.logger = logger
        self.fetcher = fetcher

    def download(self, plan: DownloadPlan) -> str:
        """
        Download a single distribution.

        Args:
            plan: The download plan to execute

        Returns:
            Path of the stored distribution
        """
        self.logger.log(
            f"Downloading {plan.dependency_name} from {plan.uri}",
            logging.INFO,
        )

        fetcher = self.fetcher or fetcher_for(plan.uri)
        temporary_path = fetcher.fetch(plan.uri)
        try:
            os.makedirs(plan.distribution_directory, exist_ok=True)
            shutil.copyfile(temporary_path, plan.destination_path)
        finally:
            if os.path.exists(temporary_path):
                os.remove(temporary_path)

        self.logger.log(
            f"Downloaded {plan.dependency_name} to {plan.destination_path}",
            logging.INFO,
        )
        return plan.destination_path
