"""
The ensure task: fetch a dependency again only when it is missing or stale.

The task is handed its clean, download, extract and optional install steps
directly. When the freshness predicate reports that a fetch is needed, the
steps run once each, in that order. Any exception raised by a step stops the
sequence and reaches the caller; steps that already ran are not undone.
"""

import logging
from typing import Callable, List, Optional, Tuple

from binvendor.binvendor_logger import BinvendorLogger
from binvendor.dependency_models import EnsureContext, NeedsFetch, always_fetch

Operation = Callable[[], None]


class EnsureState:
    """Enumeration of ensure task states."""

    IDLE = "idle"
    CHECKING = "checking"
    SKIPPED = "skipped"
    RUNNING = "running"
    DONE = "done"


class EnsureTask:
    """
    Ensures a dependency is present.
    """

    default_name = "ensure"

    def __init__(
        self,
        dependency: str,
        path: str,
        clean: Operation,
        download: Operation,
        extract: Operation,
        install: Optional[Operation] = None,
        needs_fetch: NeedsFetch = always_fetch,
        version: Optional[str] = None,
        binary_directory: str = "bin",
        logger: Optional[BinvendorLogger] = None,
    ):
        """
        Args:
            dependency: Name of the dependency
            path: Root of the dependency's working tree
            clean, download, extract: Steps of the fetch chain
            install: Final step, only run when given
            needs_fetch: Decides from an EnsureContext whether the chain runs
            version: Configured version, exposed to ``needs_fetch``
            binary_directory: Binary directory, exposed to ``needs_fetch``
            logger: Logger for progress messages
        """
        self.dependency = dependency
        self.path = path
        self.version = version
        self.binary_directory = binary_directory
        self.needs_fetch = needs_fetch
        self.logger = logger or BinvendorLogger()

        steps: List[Tuple[str, Operation]] = [
            ("clean", clean),
            ("download", download),
            ("extract", extract),
        ]
        if install is not None:
            steps.append(("install", install))
        self.steps: Tuple[Tuple[str, Operation], ...] = tuple(steps)

        self.state = EnsureState.IDLE
        self.history: List[str] = []

    @property
    def name(self) -> str:
        return self.default_name

    @property
    def description(self) -> str:
        return f"Ensure {self.dependency} present"

    @property
    def install_configured(self) -> bool:
        return any(name == "install" for name, _ in self.steps)

    def context(self) -> EnsureContext:
        return EnsureContext(
            path=self.path,
            version=self.version,
            binary_directory=self.binary_directory,
        )

    def invoke(self) -> bool:
        """
        Run the fetch chain if the dependency needs fetching.

        Returns:
            True if the chain ran, False if it was skipped
        """
        self.history = []
        self.state = EnsureState.CHECKING

        if not self.needs_fetch(self.context()):
            self.state = EnsureState.SKIPPED
            self.logger.log(f"'{self.dependency}' is up to date, nothing to do.", logging.INFO)
            self.state = EnsureState.DONE
            return False

        self.state = EnsureState.RUNNING
        self.logger.log(
            f"Ensuring '{self.dependency}' with steps {[name for name, _ in self.steps]}...",
            logging.INFO,
        )
        for name, operation in self.steps:
            self.history.append(name)
            operation()

        self.state = EnsureState.DONE
        self.logger.log(f"'{self.dependency}' is present.", logging.INFO)
        return True

    def __call__(self) -> bool:
        return self.invoke()
