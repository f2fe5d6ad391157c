"""Firmware image helpers."""

import bz2
import shutil
from pathlib import Path


def strip_trailing_zeros(path: Path) -> int:
    """Truncate a firmware image after its last non-zero byte.

    EDK2 images shipped with QEMU are zero padded to the flash size; the
    padding is dropped before bundling.

    Args:
        path: Firmware image to truncate in place

    Returns:
        New size of the file in bytes
    """
    data = path.read_bytes()
    size = len(data.rstrip(b"\0"))
    with path.open("r+b") as file:
        file.truncate(size)
    return size


def decompress_bz2(archive: Path, destination: Path) -> Path:
    """Decompress a ``.bz2`` file, replacing the archive like ``bzip2 -d``.

    Args:
        archive: Compressed file
        destination: Path of the decompressed file

    Returns:
        Path to the decompressed file
    """
    destination.unlink(missing_ok=True)
    with bz2.open(archive, "rb") as source, destination.open("wb") as target:
        shutil.copyfileobj(source, target)
    archive.unlink()
    return destination
