"""
Base class of the tasks bound to a single dependency configuration.
"""

from typing import Optional

from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_config import DependencyConfigManager
from binvendor.dependency_models import DependencyConfig
from binvendor.platform_names import HostPlatform


class DependencyTask:
    """
    A unit of work on one dependency. Subclasses implement ``invoke``.
    """

    default_name = ""

    def __init__(
        self,
        config: DependencyConfig,
        host: Optional[HostPlatform] = None,
        logger: Optional[BinvendorLogger] = None,
    ):
        self.config = config
        self.manager = DependencyConfigManager(config, host)
        self.logger = logger or BinvendorLogger()

    @property
    def name(self) -> str:
        return self.default_name

    @property
    def description(self) -> str:
        raise NotImplementedError

    def invoke(self) -> None:
        raise NotImplementedError

    def __call__(self) -> None:
        self.invoke()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dependency={self.config.name})"
