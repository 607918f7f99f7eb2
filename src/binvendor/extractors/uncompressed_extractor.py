"""
Handling of distributions that are a single executable rather than an archive.
"""

import logging
import os
import shutil

from binvendor.extractors.base import Extractor

EXECUTABLE_MODE = 0o755


class UncompressedExtractor(Extractor):
    """
    "Extracts" a distribution that is the binary itself.

    The file is copied into the extraction directory, named ``rename_to`` when
    given and after the source file otherwise, and made executable. An existing
    target is always overwritten.
    """

    def extract(self) -> None:
        target_name = self.rename_to or os.path.basename(self.file_path)
        target_path = self.relative_to_extract_directory(target_name)

        self.logger.log(f"Copying {self.file_path} to {target_path}", logging.INFO)

        self.create_extract_directory()
        shutil.copyfile(self.file_path, target_path)
        os.chmod(target_path, EXECUTABLE_MODE)
