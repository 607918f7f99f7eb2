"""
Wiring of all tasks for one dependency.

    tasks = DependencyTasks(
        DependencyConfig(
            name="terraform",
            version="1.6.4",
            path="vendor/terraform",
            uri_template="https://releases.hashicorp.com/terraform/{{ version }}/terraform_{{ version }}_{{ platform_os_name }}_{{ platform_cpu_name }}{{ ext }}",
            file_name_template="terraform{{ ext }}",
            needs_fetch=binary_missing("terraform"),
        )
    )
    tasks.ensure()
"""

from typing import Dict, Iterable, Optional

from binvendor.binvendor_exceptions import ConfigurationError
from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_downloader import Fetcher
from binvendor.dependency_models import DependencyConfig
from binvendor.platform_names import HostPlatform
from binvendor.tasks import (
    CleanTask,
    DownloadTask,
    EnsureTask,
    ExtractTask,
    FetchTask,
    InstallTask,
)


class DependencyTasks:
    """
    The clean, download, extract, install, fetch and ensure tasks of one
    dependency.

    The install task only exists when the configuration names an installation
    directory; the ensure task is built with direct references to the others.
    """

    def __init__(
        self,
        config: DependencyConfig,
        fetcher: Optional[Fetcher] = None,
        host: Optional[HostPlatform] = None,
        logger: Optional[BinvendorLogger] = None,
    ):
        self.config = config
        self.host = host or HostPlatform.local()
        self.logger = logger or BinvendorLogger()

        self.clean_task = CleanTask(config, self.host, self.logger)
        self.download_task = DownloadTask(config, self.host, self.logger, fetcher=fetcher)
        self.extract_task = ExtractTask(config, self.host, self.logger)
        self.install_task: Optional[InstallTask] = (
            InstallTask(config, self.host, self.logger) if config.install_enabled else None
        )
        self.fetch_task = FetchTask(
            config.name,
            self.download_task.invoke,
            self.extract_task.invoke,
            logger=self.logger,
        )
        self.ensure_task = EnsureTask(
            config.name,
            config.path,
            clean=self.clean_task.invoke,
            download=self.download_task.invoke,
            extract=self.extract_task.invoke,
            install=self.install_task.invoke if self.install_task else None,
            needs_fetch=config.needs_fetch,
            version=config.version,
            binary_directory=config.binary_directory,
            logger=self.logger,
        )

    @property
    def name(self) -> str:
        return self.config.name

    def clean(self) -> None:
        self.clean_task.invoke()

    def download(self) -> None:
        self.download_task.invoke()

    def extract(self) -> None:
        self.extract_task.invoke()

    def install(self) -> None:
        if self.install_task is None:
            raise ConfigurationError(
                f"Dependency '{self.config.name}' has no installation_directory configured"
            )
        self.install_task.invoke()

    def fetch(self) -> None:
        self.fetch_task.invoke()

    def ensure(self) -> bool:
        return self.ensure_task.invoke()

    def __repr__(self) -> str:
        return f"DependencyTasks(dependency={self.config.name}, install={self.install_task is not None})"


def define_dependencies(
    configs: Iterable[DependencyConfig],
    fetcher: Optional[Fetcher] = None,
    host: Optional[HostPlatform] = None,
    logger: Optional[BinvendorLogger] = None,
) -> Dict[str, DependencyTasks]:
    """
    Build the tasks of every dependency in ``configs``, keyed by dependency name.

    Raises:
        ConfigurationError: if two dependencies share a name
    """
    defined: Dict[str, DependencyTasks] = {}
    for config in configs:
        if config.name in defined:
            raise ConfigurationError(f"Dependency '{config.name}' is defined more than once")
        defined[config.name] = DependencyTasks(config, fetcher=fetcher, host=host, logger=logger)
    return defined
