"""
Behaviour shared by the archive extractors.
"""

import logging
import os
import pathlib
import shutil
from typing import Callable, Iterator, Mapping, Optional, Tuple, Type

from binvendor.binvendor_exceptions import ArchiveError
from binvendor.binvendor_logger import BinvendorLogger


class ArchiveEntry:
    """
    One member of an archive as seen by an extractor.
    """

    def __init__(
        self,
        name: str,
        is_dir: bool,
        is_file: bool,
        mode: Optional[int],
        read: Callable[[], bytes],
    ):
        """
        Args:
            name: Path of the member as stored in the archive
            is_dir: Whether the member is a directory
            is_file: Whether the member is a regular file with content
            mode: Permission bits to apply to the written file, if known
            read: Returns the full content of the member
        """
        self.name = name
        self.is_dir = is_dir
        self.is_file = is_file
        self.mode = mode
        self.read = read

    def __repr__(self) -> str:
        kind = "dir" if self.is_dir else "file" if self.is_file else "other"
        return f"ArchiveEntry(name={self.name}, kind={kind})"


class Extractor:
    """
    Unpacks a distribution file into an extraction directory.

    Supported options:
        strip_path: prefix removed from every member path
        rename_from, rename_to: after extraction, the path ``rename_from`` is
            moved to ``rename_to``; only honoured when both are given
    """

    def __init__(
        self,
        file_path: str,
        extract_path: str,
        options: Optional[Mapping[str, str]] = None,
        logger: Optional[BinvendorLogger] = None,
    ):
        self.file_path = str(file_path)
        self.extract_path = str(extract_path)
        self.options = dict(options or {})
        self.logger = logger or BinvendorLogger()

    def extract(self) -> None:
        raise NotImplementedError

    @property
    def strip_path(self) -> str:
        return self.options.get("strip_path") or ""

    @property
    def rename_from(self) -> Optional[str]:
        return self.options.get("rename_from")

    @property
    def rename_to(self) -> Optional[str]:
        return self.options.get("rename_to")

    def relative_to_extract_directory(self, path: str) -> str:
        return os.path.join(self.extract_path, path)

    def create_extract_directory(self) -> None:
        os.makedirs(self.extract_path, exist_ok=True)


class ArchiveExtractor(Extractor):
    """
    Extractor for formats with a directory structure.

    Members are written in archive order. A file that already exists at its
    target path is left untouched, which makes repeated extraction a no-op.
    """

    # Exceptions raised by the format reader for unreadable or corrupt archives.
    format_errors: Tuple[Type[BaseException], ...] = ()

    def entries(self) -> Iterator[ArchiveEntry]:
        raise NotImplementedError

    def extract(self) -> None:
        self.logger.log(
            f"Extracting {self.file_path} into {self.extract_path} with options {self.options}",
            logging.INFO,
        )
        self.create_extract_directory()
        written = self.extract_files()

        if self.requires_rename():
            self.rename(
                self.relative_to_extract_directory(self.rename_from),
                self.relative_to_extract_directory(self.rename_to),
            )

        self.logger.log(f"Extracted {written} files from {self.file_path}", logging.INFO)

    def extract_files(self) -> int:
        written = 0
        try:
            for entry in self.entries():
                if self.process_entry(entry):
                    written += 1
        except self.format_errors as e:
            raise ArchiveError(f"Failed to read archive {self.file_path}: {e}", self.file_path) from e
        return written

    def process_entry(self, entry: ArchiveEntry) -> bool:
        """
        Write one member below the extraction directory.

        Returns:
            True if file content was written
        """
        target_path = self.target_path(entry.name)
        self.create_base_directory(target_path)

        if entry.is_dir:
            os.makedirs(target_path, exist_ok=True)
            return False
        if not entry.is_file:
            self.logger.log(f"Ignoring non-file member {entry.name}", logging.DEBUG)
            return False
        if os.path.exists(target_path):
            self.logger.log(f"Skipping {entry.name}, {target_path} already exists", logging.DEBUG)
            return False

        content = entry.read()
        with open(target_path, "wb") as f:
            f.write(content)
        if entry.mode is not None:
            os.chmod(target_path, entry.mode)
        return True

    def target_path(self, entry_name: str) -> str:
        """
        Absolute target of the member named ``entry_name`` after stripping.

        Raises:
            ArchiveError: if the member would land outside the extraction directory
        """
        root = os.path.abspath(self.extract_path)
        target = os.path.normpath(os.path.join(root, self.strip(entry_name)))
        if os.path.commonpath([root, target]) != root:
            raise ArchiveError(
                f"Archive member {entry_name!r} resolves outside of {self.extract_path}",
                self.file_path,
            )
        return target

    def strip(self, entry_name: str) -> str:
        entry_path = pathlib.PurePosixPath(entry_name)
        if not self.strip_path:
            return str(entry_path)
        try:
            return str(entry_path.relative_to(pathlib.PurePosixPath(self.strip_path)))
        except ValueError:
            # not below the strip prefix
            return str(entry_path)

    def requires_rename(self) -> bool:
        return bool(self.rename_from and self.rename_to)

    @staticmethod
    def create_base_directory(path: str) -> None:
        os.makedirs(os.path.dirname(path), exist_ok=True)

    def rename(self, source: str, target: str) -> None:
        self.logger.log(f"Renaming {source} to {target}", logging.DEBUG)
        self.create_base_directory(target)
        shutil.move(source, target)
