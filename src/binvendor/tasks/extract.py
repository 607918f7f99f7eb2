"""Extract task."""

import logging
from typing import Mapping, Optional, Type

from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_models import ArchiveType, DependencyConfig
from binvendor.extractors import EXTRACTORS, Extractor
from binvendor.platform_names import HostPlatform
from binvendor.tasks.base import DependencyTask


class ExtractTask(DependencyTask):
    """
    Extracts the downloaded distribution into ``path/binary_directory``.
    """

    default_name = "extract"

    def __init__(
        self,
        config: DependencyConfig,
        host: Optional[HostPlatform] = None,
        logger: Optional[BinvendorLogger] = None,
        extractors: Optional[Mapping[ArchiveType, Type[Extractor]]] = None,
    ):
        super().__init__(config, host, logger)
        self.extractors = extractors if extractors is not None else EXTRACTORS

    @property
    def description(self) -> str:
        return f"Extract {self.config.name} archive"

    def invoke(self) -> None:
        plan = self.manager.create_extraction_plan()
        self.logger.log(f"Using extraction plan: {plan!r}.", logging.DEBUG)

        extractor_class = self.extractors[plan.archive_type]
        extractor = extractor_class(
            plan.distribution_path,
            plan.extraction_path,
            plan.options,
            logger=self.logger,
        )
        extractor.extract()
