"""
Pydantic model describing one vendored binary dependency.

A configuration names the dependency, where its working tree lives, how the
distribution is packaged and the templates that locate the distribution and
the binaries inside it. Example, as it would appear in a ``dependencies.toml``:

    [dependencies.terraform]
    version = "1.6.4"
    path = "vendor/terraform"
    type = "zip"
    uri_template = "https://releases.hashicorp.com/terraform/{{ version }}/terraform_{{ version }}_{{ platform_os_name }}_{{ platform_cpu_name }}{{ ext }}"
    file_name_template = "terraform{{ ext }}"
"""

import os
from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from binvendor.binvendor_exceptions import ConfigurationError
from binvendor.dependency_models.archive_type import ArchiveType
from binvendor.dependency_models.ensure_context import NeedsFetch, always_fetch


class DependencyConfig(BaseModel):
    """
    Configuration of a single dependency.

    Instances are immutable; every task builds its own parameters from it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, description="Logical name of the dependency")
    version: Optional[str] = Field(None, description="Version to provision")
    path: str = Field(..., min_length=1, description="Root of the dependency's working tree")

    archive_type: Union[ArchiveType, Dict[str, ArchiveType]] = Field(
        ArchiveType.ZIP,
        validation_alias=AliasChoices("archive_type", "archiveType", "type"),
        description="Archive type, or a map from raw OS identifier to archive type",
    )

    platform_cpu_names: Optional[Dict[str, str]] = Field(
        None, description="Replaces the default CPU name table when given"
    )
    platform_os_names: Optional[Dict[str, str]] = Field(
        None, description="Replaces the default OS name table when given"
    )

    distribution_directory: str = "dist"
    binary_directory: str = "bin"
    installation_directory: Optional[str] = Field(
        None, description="When set, the binary is copied here after extraction"
    )

    uri_template: str = Field(..., description="Template of the distribution URI")
    file_name_template: str = Field(..., description="Template of the downloaded file name")
    strip_path_template: Optional[str] = None
    source_binary_name_template: Optional[str] = None
    target_binary_name_template: Optional[str] = None

    template_parameters: Dict[str, Any] = Field(
        default_factory=dict, description="Extra parameters visible to every template"
    )

    needs_fetch: NeedsFetch = Field(default=always_fetch, exclude=True)

    @field_validator(
        "path", "installation_directory", "distribution_directory", "binary_directory", mode="before"
    )
    @classmethod
    def _coerce_path_like(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @property
    def install_enabled(self) -> bool:
        return self.installation_directory is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DependencyConfig":
        """
        Create a DependencyConfig from a dictionary, e.g. one entry loaded from a
        configuration file.

        Raises:
            ConfigurationError: if required fields are missing or values are invalid
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            name = data.get("name", "<unnamed>") if isinstance(data, dict) else "<unnamed>"
            raise ConfigurationError(f"Invalid configuration for dependency '{name}': {e}") from e
