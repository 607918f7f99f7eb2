"""
Extraction of gzip compressed tar archives.
"""

import gzip
import tarfile
import zlib
from typing import Iterator

from binvendor.extractors.base import ArchiveEntry, ArchiveExtractor


class TarGzExtractor(ArchiveExtractor):
    """
    Extracts ``.tar.gz`` and ``.tgz`` distributions.

    The archive is decompressed and read as a stream; only regular files are
    written, each with the mode declared in the archive.
    """

    format_errors = (tarfile.TarError, gzip.BadGzipFile, zlib.error, EOFError)

    def entries(self) -> Iterator[ArchiveEntry]:
        with tarfile.open(self.file_path, "r|gz") as tar_file:
            for member in tar_file:
                yield ArchiveEntry(
                    name=member.name,
                    is_dir=member.isdir(),
                    is_file=member.isfile(),
                    mode=member.mode,
                    read=lambda member=member: tar_file.extractfile(member).read(),
                )
