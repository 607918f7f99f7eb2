"""Clean task."""

import logging
import os
import shutil

from binvendor.tasks.base import DependencyTask


class CleanTask(DependencyTask):
    """
    Removes the dependency's whole working tree.
    """

    default_name = "clean"

    @property
    def description(self) -> str:
        return f"Clean vendored {self.config.name}"

    def invoke(self) -> None:
        path = self.config.path
        self.logger.log(f"Cleaning '{self.config.name}' at {path}...", logging.INFO)

        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        elif os.path.lexists(path):
            os.remove(path)

        self.logger.log("Cleaned.", logging.INFO)
