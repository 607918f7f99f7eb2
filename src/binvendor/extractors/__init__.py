"""
Archive extractors.

One extractor class per archive format, all constructed as
``Extractor(file_path, extract_path, options)`` and run with ``extract()``.
"""

from typing import Mapping, Type

from binvendor.dependency_models import ArchiveType

from .base import ArchiveEntry, ArchiveExtractor, Extractor
from .tar_gz_extractor import TarGzExtractor
from .uncompressed_extractor import UncompressedExtractor
from .zip_extractor import ZipExtractor

EXTRACTORS: Mapping[ArchiveType, Type[Extractor]] = {
    ArchiveType.ZIP: ZipExtractor,
    ArchiveType.TAR_GZ: TarGzExtractor,
    ArchiveType.TGZ: TarGzExtractor,
    ArchiveType.UNCOMPRESSED: UncompressedExtractor,
}


def extractor_for(archive_type: ArchiveType) -> Type[Extractor]:
    """Returns the extractor class responsible for ``archive_type``."""
    return EXTRACTORS[ArchiveType(archive_type)]


__all__ = [
    "ArchiveEntry",
    "ArchiveExtractor",
    "EXTRACTORS",
    "Extractor",
    "TarGzExtractor",
    "UncompressedExtractor",
    "ZipExtractor",
    "extractor_for",
]
