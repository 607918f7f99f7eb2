"""
Install task: copies the extracted binary into the installation directory.
"""

import logging
import os
import shutil

from binvendor.binvendor_exceptions import ConfigurationError
from binvendor.tasks.base import DependencyTask


class InstallTask(DependencyTask):
    """
    Copies the extracted binary into the installation directory.
    """

    default_name = "install"

    @property
    def description(self) -> str:
        return f"Install {self.config.name}"

    def invoke(self) -> None:
        self.logger.log(f"Installing '{self.config.name}'...", logging.INFO)

        plan = self.manager.create_install_plan()
        if plan is None:
            raise ConfigurationError(
                f"Dependency '{self.config.name}' has no installation_directory configured"
            )

        self.logger.log(f"Using binary file path: {plan.binary_path}.", logging.DEBUG)
        self.logger.log(
            f"Using installation directory: {plan.installation_directory}.", logging.DEBUG
        )

        os.makedirs(plan.installation_directory, exist_ok=True)
        shutil.copy(plan.binary_path, plan.installation_directory)

        self.logger.log("Installed.", logging.INFO)
