"""
Zip extraction.
"""

import stat
import zipfile
import zlib
from typing import Iterator, Optional

from binvendor.extractors.base import ArchiveEntry, ArchiveExtractor

# ZipInfo.create_system value for archives built on Unix.
_UNIX_SYSTEM = 3


def _unix_mode(info: zipfile.ZipInfo) -> int:
    if info.create_system != _UNIX_SYSTEM:
        return 0
    return info.external_attr >> 16


def _entry_mode(info: zipfile.ZipInfo) -> Optional[int]:
    return stat.S_IMODE(_unix_mode(info)) or None


def _is_symlink(info: zipfile.ZipInfo) -> bool:
    return stat.S_ISLNK(_unix_mode(info))


class ZipExtractor(ArchiveExtractor):
    """
    Extracts ``.zip`` distributions, restoring Unix permission bits stored in
    the archive. Symbolic link members are not written.
    """

    format_errors = (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, EOFError)

    def entries(self) -> Iterator[ArchiveEntry]:
        with zipfile.ZipFile(self.file_path, "r") as zip_file:
            for info in zip_file.infolist():
                yield ArchiveEntry(
                    name=info.filename,
                    is_dir=info.is_dir(),
                    is_file=not info.is_dir() and not _is_symlink(info),
                    mode=_entry_mode(info),
                    read=lambda info=info: zip_file.read(info),
                )
