"""Tests for the QEMU system tar file reader."""

import pytest

from qemu_builder.exceptions import TarReadError
from qemu_builder.tar.reader import TarFile, archive_name, normalize_path
from tests.helpers import add_directory, add_symlink, create_tar


def test_archive_name():
    """Test archive file names are derived from architecture and host."""
    assert archive_name("x86_64", "linux") == "qemu-system-x86_64-linux.tar"
    assert archive_name("aarch64", "macos") == "qemu-system-aarch64-macos.tar"


def test_for_target_filename(tmp_path):
    """Test TarFile.for_target builds the file name."""
    assert TarFile.for_target("x86_64", "linux").filename == (
        "qemu-system-x86_64-linux.tar"
    )

    tar_file = TarFile.for_target("aarch64", "macos", directory=tmp_path)
    assert tar_file.filename == str(tmp_path / "qemu-system-aarch64-macos.tar")


def test_normalize_path():
    """Test only a single leading ./ is stripped."""
    assert normalize_path("./bin/qemu") == "bin/qemu"
    assert normalize_path("bin/qemu") == "bin/qemu"
    assert normalize_path("././bin/qemu") == "./bin/qemu"
    assert normalize_path("share/../bin/qemu") == "share/../bin/qemu"


def test_paths_sorted(tmp_path):
    """Test paths are returned sorted."""
    tar_path = create_tar(
        tmp_path / "test.tar",
        ["share/qemu/uefi.fd", "bin/qemu", "share/qemu/efi-e1000.rom"],
    )

    assert TarFile(tar_path).paths == [
        "bin/qemu",
        "share/qemu/efi-e1000.rom",
        "share/qemu/uefi.fd",
    ]


def test_paths_strip_dot_prefix(tmp_path):
    """Test ./bin/qemu is treated like bin/qemu."""
    tar_path = create_tar(
        tmp_path / "test.tar", ["bin/qemu", "share/qemu/uefi.fd"], prefix="./"
    )
    tar_file = TarFile(tar_path)

    assert tar_file.paths == ["bin/qemu", "share/qemu/uefi.fd"]
    assert tar_file.qemu_binary == ["bin/qemu"]
    assert tar_file.firmwares == ["uefi.fd"]


def test_paths_only_regular_files(tmp_path):
    """Test directories and symlinks are excluded."""
    tar_path = create_tar(tmp_path / "test.tar", ["bin/qemu"])
    add_directory(tar_path, "./share/qemu")
    add_symlink(tar_path, "./share/qemu/link.fd", "uefi.fd")

    assert TarFile(tar_path).paths == ["bin/qemu"]


def test_firmware_classification(tmp_path):
    """Test firmware and qemu binary entries are classified by prefix."""
    tar_path = create_tar(
        tmp_path / "test.tar",
        [
            "bin/qemu",
            "bin/qemu-img",
            "bin/other",
            "share/qemu/bios-256k.bin",
            "share/qemu/efi-virtio.rom",
            "share/doc/README",
        ],
    )
    tar_file = TarFile(tar_path)

    assert tar_file.qemu_binary == ["bin/qemu", "bin/qemu-img"]
    assert tar_file.firmware_paths == [
        "share/qemu/bios-256k.bin",
        "share/qemu/efi-virtio.rom",
    ]
    assert tar_file.firmwares == ["bios-256k.bin", "efi-virtio.rom"]


def test_duplicate_entries_pass_through(tmp_path):
    """Test duplicate entries are not deduplicated."""
    tar_path = create_tar(
        tmp_path / "test.tar", ["share/qemu/uefi.fd", "share/qemu/uefi.fd"]
    )

    assert TarFile(tar_path).firmwares == ["uefi.fd", "uefi.fd"]


def test_paths_idempotent(tmp_path):
    """Test repeated and fresh reads give identical results."""
    tar_path = create_tar(
        tmp_path / "test.tar", ["bin/qemu", "share/qemu/uefi.fd"], prefix="./"
    )
    tar_file = TarFile(tar_path)
    first = (tar_file.paths, tar_file.firmwares, tar_file.qemu_binary)

    assert (tar_file.paths, tar_file.firmwares, tar_file.qemu_binary) == first
    assert tar_file.paths is tar_file.paths

    fresh = TarFile(tar_path)
    assert (fresh.paths, fresh.firmwares, fresh.qemu_binary) == first


def test_paths_cached(tmp_path):
    """Test the archive is read only once per instance."""
    tar_path = create_tar(tmp_path / "test.tar", ["bin/qemu"])
    tar_file = TarFile(tar_path)
    paths = tar_file.paths

    tar_path.unlink()

    assert tar_file.paths == paths
    assert tar_file.qemu_binary == ["bin/qemu"]


def test_missing_file(tmp_path):
    """Test reading a nonexistent archive raises FileNotFoundError."""
    tar_file = TarFile(tmp_path / "does_not_exist.tar")

    with pytest.raises(FileNotFoundError):
        tar_file.paths


def test_malformed_file(tmp_path):
    """Test reading a non-tar file raises TarReadError."""
    not_tar = tmp_path / "not_a_tar.tar"
    not_tar.write_text("This is not a tar file")

    with pytest.raises(TarReadError, match="Cannot read tar file"):
        TarFile(not_tar).paths


def test_to_full_path():
    """Test firmware names are prefixed with the firmware directory."""
    tar_file = TarFile("unused.tar")

    assert tar_file.to_full_path(["uefi.fd", "efi-e1000.rom"]) == [
        "share/qemu/uefi.fd",
        "share/qemu/efi-e1000.rom",
    ]
