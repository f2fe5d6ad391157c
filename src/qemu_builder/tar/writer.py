"""Tar file creation for bundled build output."""

import asyncio
import tarfile
from pathlib import Path

from ..exceptions import BundleError


def _write_archive(source_dir: Path, destination: Path) -> None:
    with tarfile.open(destination, "w") as tar:
        tar.add(source_dir, arcname=".")


async def create_archive(source_dir: Path, destination: Path) -> Path:
    """Pack the contents of a directory into an uncompressed tar file.

    Entries are rooted at ``.``, so a file ``<source_dir>/bin/qemu`` is
    stored as ``./bin/qemu``.

    Args:
        source_dir: Directory whose contents are archived
        destination: Path of the tar file to write

    Returns:
        Path to the written tar file

    Raises:
        BundleError: If the source directory does not exist
    """
    if not source_dir.is_dir():
        raise BundleError(f"Directory to archive not found: {source_dir}")

    destination.parent.mkdir(parents=True, exist_ok=True)
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, _write_archive, source_dir, destination)
    return destination
