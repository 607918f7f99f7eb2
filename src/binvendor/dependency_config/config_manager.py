"""
Dependency configuration manager.

Turns a DependencyConfig into concrete plans: the parameters visible to
templates, the URI and path of the distribution, the extraction options and
the binary to install.
"""

import os
from typing import Any, Dict, Optional

from binvendor.dependency_models import (
    ArchiveType,
    DependencyConfig,
    EnsureContext,
    extension_for,
    resolve_archive_type,
)
from binvendor.platform_names import HostPlatform, resolve_platform_names
from binvendor.template import Template


class DownloadPlan:
    """
    A plan to download a dependency's distribution.

    Captures everything needed to fetch the distribution and store it locally.
    """

    def __init__(
        self,
        dependency_name: str,
        uri: str,
        archive_type: ArchiveType,
        distribution_directory: str,
        file_name: str,
    ):
        """
        Initialize a download plan.

        Args:
            dependency_name: Name of the dependency
            uri: URI to download from
            archive_type: Resolved archive type of the distribution
            distribution_directory: Directory the distribution is stored in
            file_name: Name of the stored distribution file
        """
        self.dependency_name = dependency_name
        self.uri = uri
        self.archive_type = archive_type
        self.distribution_directory = distribution_directory
        self.file_name = file_name

    @property
    def destination_path(self) -> str:
        return os.path.join(self.distribution_directory, self.file_name)

    def __repr__(self) -> str:
        return (
            f"DownloadPlan(dependency={self.dependency_name}, "
            f"uri={self.uri}, destination={self.destination_path})"
        )


class ExtractionPlan:
    """
    A plan to unpack a downloaded distribution into the binary directory.
    """

    def __init__(
        self,
        dependency_name: str,
        archive_type: ArchiveType,
        distribution_path: str,
        extraction_path: str,
        options: Dict[str, str],
    ):
        self.dependency_name = dependency_name
        self.archive_type = archive_type
        self.distribution_path = distribution_path
        self.extraction_path = extraction_path
        self.options = options

    def __repr__(self) -> str:
        return (
            f"ExtractionPlan(dependency={self.dependency_name}, "
            f"type={self.archive_type.value}, from={self.distribution_path}, "
            f"to={self.extraction_path}, options={self.options})"
        )


class InstallPlan:
    """
    A plan to copy an extracted binary into the installation directory.
    """

    def __init__(self, dependency_name: str, binary_path: str, installation_directory: str):
        self.dependency_name = dependency_name
        self.binary_path = binary_path
        self.installation_directory = installation_directory

    def __repr__(self) -> str:
        return (
            f"InstallPlan(dependency={self.dependency_name}, "
            f"binary={self.binary_path}, into={self.installation_directory})"
        )


class DependencyConfigManager:
    """
    Resolves a DependencyConfig against a host platform.

    Nothing is cached: every call re-derives its values from the configuration,
    so a manager can be reused across runs.
    """

    def __init__(self, config: DependencyConfig, host: Optional[HostPlatform] = None):
        """
        Initialize the dependency config manager.

        Args:
            config: Configuration of the dependency
            host: Platform to resolve for, the running host if omitted
        """
        self.config = config
        self.host = host or HostPlatform.local()

    def resolved_type(self) -> ArchiveType:
        """
        Resolve the configured archive type for the host OS.

        Raises:
            ConfigurationError: if the type is unknown for this host
        """
        return resolve_archive_type(self.config.archive_type, self.host.os)

    def parameters(self) -> Dict[str, Any]:
        """
        Build the parameters visible to every template of this dependency.

        Caller supplied ``template_parameters`` are applied first, so the
        built-in parameters always win on a name clash.
        """
        platform_os_name, platform_cpu_name = resolve_platform_names(
            self.host,
            self.config.platform_cpu_names,
            self.config.platform_os_names,
        )
        parameters = dict(self.config.template_parameters)
        parameters.update(
            {
                "version": self.config.version,
                "platform": self.host,
                "platform_cpu_name": platform_cpu_name,
                "platform_os_name": platform_os_name,
                "ext": extension_for(self.resolved_type()),
            }
        )
        return parameters

    def render(self, template: str, parameters: Optional[Dict[str, Any]] = None) -> str:
        if parameters is None:
            parameters = self.parameters()
        return Template(template).with_parameters(parameters).render()

    def relative_to_path(self, other: str) -> str:
        return os.path.join(self.config.path, other)

    def create_download_plan(self) -> DownloadPlan:
        """
        Create the plan for downloading the distribution.

        The archive type is resolved before any template is rendered so that a
        misconfigured type fails before any network activity.
        """
        archive_type = self.resolved_type()
        parameters = self.parameters()
        return DownloadPlan(
            dependency_name=self.config.name,
            uri=self.render(self.config.uri_template, parameters),
            archive_type=archive_type,
            distribution_directory=self.relative_to_path(self.config.distribution_directory),
            file_name=self.render(self.config.file_name_template, parameters),
        )

    def create_extraction_plan(self) -> ExtractionPlan:
        """
        Create the plan for extracting the downloaded distribution.

        Rename options are only produced when both the source and the target
        binary name templates are configured.
        """
        archive_type = self.resolved_type()
        parameters = self.parameters()

        options: Dict[str, str] = {}
        if self.config.strip_path_template:
            options["strip_path"] = self.render(self.config.strip_path_template, parameters)
        if self.config.source_binary_name_template and self.config.target_binary_name_template:
            options["rename_from"] = self.render(self.config.source_binary_name_template, parameters)
            options["rename_to"] = self.render(self.config.target_binary_name_template, parameters)

        distribution_path = os.path.join(
            self.relative_to_path(self.config.distribution_directory),
            self.render(self.config.file_name_template, parameters),
        )
        return ExtractionPlan(
            dependency_name=self.config.name,
            archive_type=archive_type,
            distribution_path=distribution_path,
            extraction_path=self.relative_to_path(self.config.binary_directory),
            options=options,
        )

    def create_install_plan(self) -> Optional[InstallPlan]:
        """
        Create the plan for installing the binary, or None when no installation
        directory is configured.

        The installed binary is named by the target binary name template, or by
        the dependency name when that template is absent.
        """
        if not self.config.install_enabled:
            return None

        binary_name_template = self.config.target_binary_name_template or self.config.name
        binary_name = self.render(binary_name_template)
        return InstallPlan(
            dependency_name=self.config.name,
            binary_path=os.path.join(self.relative_to_path(self.config.binary_directory), binary_name),
            installation_directory=self.config.installation_directory,
        )

    def ensure_context(self) -> EnsureContext:
        return EnsureContext(
            path=self.config.path,
            version=self.config.version,
            binary_directory=self.config.binary_directory,
        )
