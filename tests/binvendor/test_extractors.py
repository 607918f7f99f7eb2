"""
Tests for the archive extractors.
"""

import os
import stat
import zipfile

import pytest

from binvendor.binvendor_exceptions import ArchiveError
from binvendor.dependency_models import ArchiveType
from binvendor.extractors import (
    EXTRACTORS,
    TarGzExtractor,
    UncompressedExtractor,
    ZipExtractor,
    extractor_for,
)
from tests.test_utils import write_tar_gz, write_zip


def file_mode(path) -> int:
    return stat.S_IMODE(os.stat(path).st_mode)


def snapshot(root):
    """Map of relative path to content for every file below ``root``."""
    result = {}
    for directory, _, files in os.walk(root):
        for name in files:
            path = os.path.join(directory, name)
            with open(path, "rb") as f:
                result[os.path.relpath(path, root)] = f.read()
    return result


@pytest.fixture(params=["zip", "tar_gz"])
def archive_format(request):
    return request.param


def write_archive(archive_format, directory, files, modes=None):
    if archive_format == "zip":
        return write_zip(directory / "archive.zip", files, modes), ZipExtractor
    return write_tar_gz(directory / "archive.tar.gz", files, modes), TarGzExtractor


class TestArchiveExtractors:
    """Behaviour shared by the zip and tar.gz extractors."""

    def test_creates_extraction_directory(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"file": b"content"})
        destination = tmp_path / "deeply" / "nested" / "bin"

        extractor_class(str(archive), str(destination)).extract()

        assert (destination / "file").read_bytes() == b"content"

    def test_extracts_nested_entries(self, tmp_path, archive_format):
        files = {
            "directory/containing1/file1": b"one",
            "directory/containing2/file2": b"two",
            "file3": b"three",
        }
        archive, extractor_class = write_archive(archive_format, tmp_path, files)
        destination = tmp_path / "bin"

        extractor_class(str(archive), str(destination)).extract()

        assert snapshot(destination) == {
            os.path.join("directory", "containing1", "file1"): b"one",
            os.path.join("directory", "containing2", "file2"): b"two",
            "file3": b"three",
        }

    def test_strip_path(self, tmp_path, archive_format):
        """Entries below the strip path lose the prefix; others keep their path."""
        files = {"a/b/file1": b"1", "a/b2/file2": b"2", "file3": b"3"}
        archive, extractor_class = write_archive(archive_format, tmp_path, files)
        destination = tmp_path / "dest"

        extractor_class(str(archive), str(destination), {"strip_path": "a"}).extract()

        assert snapshot(destination) == {
            os.path.join("b", "file1"): b"1",
            os.path.join("b2", "file2"): b"2",
            "file3": b"3",
        }

    def test_strip_path_with_trailing_slash(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"tool-1.0/tool": b"bin"})
        destination = tmp_path / "dest"

        extractor_class(str(archive), str(destination), {"strip_path": "tool-1.0/"}).extract()

        assert (destination / "tool").read_bytes() == b"bin"

    def test_does_not_overwrite_existing_files(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"dir/file1": b"new", "dir/file2": b"two"})
        destination = tmp_path / "dest"
        (destination / "dir").mkdir(parents=True)
        (destination / "dir" / "file1").write_bytes(b"old")

        extractor_class(str(archive), str(destination)).extract()

        assert (destination / "dir" / "file1").read_bytes() == b"old"
        assert (destination / "dir" / "file2").read_bytes() == b"two"

    def test_extraction_is_idempotent(self, tmp_path, archive_format):
        files = {"a/file1": b"1", "a/b/file2": b"2"}
        archive, extractor_class = write_archive(archive_format, tmp_path, files)
        destination = tmp_path / "dest"

        extractor_class(str(archive), str(destination)).extract()
        first = snapshot(destination)
        extractor_class(str(archive), str(destination)).extract()

        assert snapshot(destination) == first

    def test_restores_permissions(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(
            archive_format, tmp_path, {"bin/tool": b"#!/bin/sh\n", "README": b"docs"}, {"bin/tool": 0o755}
        )
        destination = tmp_path / "dest"

        extractor_class(str(archive), str(destination)).extract()

        assert file_mode(destination / "bin" / "tool") == 0o755
        assert file_mode(destination / "README") == 0o644

    def test_renames_after_extraction(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"tool_linux_amd64": b"bin"})
        destination = tmp_path / "dest"

        extractor_class(
            str(archive),
            str(destination),
            {"rename_from": "tool_linux_amd64", "rename_to": "nested/dir/tool"},
        ).extract()

        assert not (destination / "tool_linux_amd64").exists()
        assert (destination / "nested" / "dir" / "tool").read_bytes() == b"bin"

    def test_rename_applies_after_strip(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"tool-1.0/bin/tool-1.0": b"bin"})
        destination = tmp_path / "dest"

        extractor_class(
            str(archive),
            str(destination),
            {"strip_path": "tool-1.0", "rename_from": "bin/tool-1.0", "rename_to": "tool"},
        ).extract()

        assert (destination / "tool").read_bytes() == b"bin"
        assert not (destination / "bin" / "tool-1.0").exists()

    @pytest.mark.parametrize("options", [{"rename_from": "tool"}, {"rename_to": "renamed"}])
    def test_rename_needs_both_options(self, tmp_path, archive_format, options):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"tool": b"bin"})
        destination = tmp_path / "dest"

        extractor_class(str(archive), str(destination), options).extract()

        assert (destination / "tool").exists()
        assert not (destination / "renamed").exists()

    def test_rejects_entries_escaping_destination(self, tmp_path, archive_format):
        archive, extractor_class = write_archive(archive_format, tmp_path, {"../escaped": b"evil"})
        destination = tmp_path / "dest"

        with pytest.raises(ArchiveError):
            extractor_class(str(archive), str(destination)).extract()

        assert not (tmp_path / "escaped").exists()

    def test_corrupt_archive_raises(self, tmp_path, archive_format):
        archive = tmp_path / "archive"
        archive.write_bytes(b"this is not an archive")
        extractor_class = ZipExtractor if archive_format == "zip" else TarGzExtractor

        with pytest.raises(ArchiveError) as excinfo:
            extractor_class(str(archive), str(tmp_path / "dest")).extract()
        assert excinfo.value.archive_path == str(archive)

    def test_missing_archive_raises(self, tmp_path, archive_format):
        extractor_class = ZipExtractor if archive_format == "zip" else TarGzExtractor

        with pytest.raises(FileNotFoundError):
            extractor_class(str(tmp_path / "missing"), str(tmp_path / "dest")).extract()


class TestZipExtractor:
    """Zip specific behaviour."""

    def test_directory_entries_create_directories(self, tmp_path):
        archive = write_zip(tmp_path / "archive.zip", {"empty/": b"", "full/file": b"x"})

        ZipExtractor(str(archive), str(tmp_path / "dest")).extract()

        assert (tmp_path / "dest" / "empty").is_dir()
        assert (tmp_path / "dest" / "full" / "file").read_bytes() == b"x"

    def test_corrupt_member_data_raises(self, tmp_path):
        """A readable central directory over undecodable member data is still an ArchiveError."""
        archive = write_zip(
            tmp_path / "archive.zip", {"tool": b"payload " * 100}, compression=zipfile.ZIP_DEFLATED
        )
        with zipfile.ZipFile(archive) as zip_file:
            info = zip_file.getinfo("tool")
            data_offset = info.header_offset + 30 + len(info.filename.encode()) + len(info.extra)
        data = bytearray(archive.read_bytes())
        # reserved deflate block type
        data[data_offset] = 0xFF
        archive.write_bytes(bytes(data))

        with pytest.raises(ArchiveError) as excinfo:
            ZipExtractor(str(archive), str(tmp_path / "dest")).extract()
        assert excinfo.value.archive_path == str(archive)

    def test_symlink_members_are_skipped(self, tmp_path):
        archive = tmp_path / "archive.zip"
        with zipfile.ZipFile(archive, "w") as zip_file:
            link = zipfile.ZipInfo("tool-latest")
            link.create_system = 3
            link.external_attr = (stat.S_IFLNK | 0o777) << 16
            zip_file.writestr(link, "tool")
            binary = zipfile.ZipInfo("tool")
            binary.create_system = 3
            binary.external_attr = (stat.S_IFREG | 0o755) << 16
            zip_file.writestr(binary, b"bin")

        ZipExtractor(str(archive), str(tmp_path / "dest")).extract()

        assert not os.path.lexists(tmp_path / "dest" / "tool-latest")
        assert (tmp_path / "dest" / "tool").read_bytes() == b"bin"


class TestTarGzExtractor:
    """Tar.gz specific behaviour."""

    def test_keeps_existing_file_content(self, tmp_path):
        archive = write_tar_gz(tmp_path / "archive.tar.gz", {"dir/file1": b"new"}, directories=["dir"])
        destination = tmp_path / "dest"
        (destination / "dir").mkdir(parents=True)
        (destination / "dir" / "file1").write_text("old")

        TarGzExtractor(str(archive), str(destination)).extract()

        assert (destination / "dir" / "file1").read_text() == "old"

    def test_directory_members_produce_directories(self, tmp_path):
        archive = write_tar_gz(tmp_path / "archive.tar.gz", {}, directories=["share", "share/man"])

        TarGzExtractor(str(archive), str(tmp_path / "dest")).extract()

        assert (tmp_path / "dest" / "share" / "man").is_dir()

    def test_truncated_archive_raises(self, tmp_path):
        archive = write_tar_gz(tmp_path / "archive.tar.gz", {"file": os.urandom(4096)})
        data = archive.read_bytes()
        archive.write_bytes(data[: len(data) // 2])

        with pytest.raises(ArchiveError):
            TarGzExtractor(str(archive), str(tmp_path / "dest")).extract()


class TestUncompressedExtractor:
    """Tests for UncompressedExtractor."""

    def test_copies_file_with_its_own_name(self, tmp_path):
        source = tmp_path / "dist" / "tool-x"
        source.parent.mkdir()
        source.write_bytes(b"binary")

        UncompressedExtractor(str(source), str(tmp_path / "dest")).extract()

        target = tmp_path / "dest" / "tool-x"
        assert target.read_bytes() == b"binary"
        assert file_mode(target) == 0o755
        assert source.exists()

    def test_uses_rename_to(self, tmp_path):
        source = tmp_path / "tool-x-linux-amd64"
        source.write_bytes(b"binary")

        UncompressedExtractor(str(source), str(tmp_path / "dest"), {"rename_to": "tool"}).extract()

        assert (tmp_path / "dest" / "tool").read_bytes() == b"binary"
        assert not (tmp_path / "dest" / "tool-x-linux-amd64").exists()

    def test_overwrites_existing_target(self, tmp_path):
        source = tmp_path / "tool"
        source.write_bytes(b"fresh")
        (tmp_path / "dest").mkdir()
        (tmp_path / "dest" / "tool").write_bytes(b"stale")

        UncompressedExtractor(str(source), str(tmp_path / "dest")).extract()

        assert (tmp_path / "dest" / "tool").read_bytes() == b"fresh"

    def test_missing_source_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            UncompressedExtractor(str(tmp_path / "missing"), str(tmp_path / "dest")).extract()


class TestExtractorRegistry:
    """Tests for the archive type to extractor registry."""

    @pytest.mark.parametrize(
        "archive_type, extractor_class",
        [
            (ArchiveType.ZIP, ZipExtractor),
            (ArchiveType.TAR_GZ, TarGzExtractor),
            (ArchiveType.TGZ, TarGzExtractor),
            (ArchiveType.UNCOMPRESSED, UncompressedExtractor),
        ],
    )
    def test_extractor_for(self, archive_type, extractor_class):
        assert extractor_for(archive_type) is extractor_class

    def test_every_archive_type_has_an_extractor(self):
        assert set(EXTRACTORS) == set(ArchiveType)
