"""Test helper functions for building tar files and asserting structure."""

import io
import tarfile
from pathlib import Path

from qemu_builder.utils.validator import QemuSystemValidator


def firmware_entries(firmwares: list[str]) -> list[str]:
    """Get tar entry names for firmware files."""
    return [f"share/qemu/{firmware}" for firmware in firmwares]


def create_tar(tar_path: Path, entries: list[str], prefix: str = "") -> Path:
    """Create tar file with a small regular file for every entry name."""
    with tarfile.open(tar_path, "w") as tar:
        for entry in entries:
            info = tarfile.TarInfo(f"{prefix}{entry}")
            content = f"content of {entry}".encode("utf-8")
            info.size = len(content)
            tar.addfile(info, fileobj=io.BytesIO(content))
    return tar_path


def add_directory(tar_path: Path, name: str) -> None:
    """Append a directory entry to an existing tar file."""
    with tarfile.open(tar_path, "a") as tar:
        info = tarfile.TarInfo(name)
        info.type = tarfile.DIRTYPE
        tar.addfile(info)


def add_symlink(tar_path: Path, name: str, target: str) -> None:
    """Append a symlink entry to an existing tar file."""
    with tarfile.open(tar_path, "a") as tar:
        info = tarfile.TarInfo(name)
        info.type = tarfile.SYMTYPE
        info.linkname = target
        tar.addfile(info)


def assert_qemu_system(architecture: str, firmwares: list[str], **kwargs) -> None:
    """Assert the archive of an architecture has the expected structure."""
    validator = QemuSystemValidator(architecture, firmwares, **kwargs)
    assert validator.valid, validator.message
