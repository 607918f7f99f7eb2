"""
Archive types understood by binvendor and the file extension of each.
"""

from enum import Enum
from typing import Mapping, Union

from binvendor.binvendor_exceptions import ConfigurationError


class ArchiveType(str, Enum):
    """
    Format of a downloaded distribution.
    """

    ZIP = "zip"
    TAR_GZ = "tar_gz"
    TGZ = "tgz"
    UNCOMPRESSED = "uncompressed"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower().replace(".", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


EXTENSIONS: Mapping[ArchiveType, str] = {
    ArchiveType.ZIP: ".zip",
    ArchiveType.TAR_GZ: ".tar.gz",
    ArchiveType.TGZ: ".tgz",
    ArchiveType.UNCOMPRESSED: "",
}

ArchiveTypeSpec = Union[ArchiveType, str, Mapping[str, Union[ArchiveType, str]]]


def resolve_archive_type(type_spec: ArchiveTypeSpec, os_key: str) -> ArchiveType:
    """
    Resolve ``type_spec`` to a single archive type for a host whose raw OS
    identifier is ``os_key``.

    Args:
        type_spec: An archive type, or a mapping from raw OS identifiers
            (``darwin``, ``linux``, ``mswin64``, ...) to archive types
        os_key: Raw OS identifier of the host

    Raises:
        ConfigurationError: if the mapping has no entry for ``os_key`` or the
            value is not a known archive type
    """
    if isinstance(type_spec, Mapping):
        if os_key not in type_spec:
            raise ConfigurationError(
                f"Unknown type: no archive type configured for platform OS '{os_key}' in {dict(type_spec)}"
            )
        value = type_spec[os_key]
    else:
        value = type_spec

    try:
        return ArchiveType(value)
    except ValueError as e:
        raise ConfigurationError(f"Unknown type: {value}") from e


def extension_for(archive_type: ArchiveType) -> str:
    """Returns the file extension, including the leading dot, for ``archive_type``."""
    return EXTENSIONS[archive_type]
