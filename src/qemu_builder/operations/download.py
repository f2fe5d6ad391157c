"""Remote asset downloads."""

import asyncio
import logging
import shutil
import tarfile
from pathlib import Path

import aiofiles
import aiohttp

from ..core.session import create_session
from ..core.types import BuildConfig
from ..exceptions import DownloadError, TarReadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB


async def download_file(
    session: aiohttp.ClientSession,
    url: str,
    destination: Path,
    chunk_size: int = CHUNK_SIZE,
) -> Path:
    """Stream a remote file to disk.

    Args:
        session: HTTP client session
        url: URL to download
        destination: Path to write the response body to
        chunk_size: Size of chunks read from the response

    Returns:
        Path to the downloaded file

    Raises:
        DownloadError: If the request fails or returns a non-2xx status
    """
    logger.info(f"Downloading {url} -> {destination}")
    try:
        async with session.get(url) as resp:
            resp.raise_for_status()
            async with aiofiles.open(destination, "wb") as file:
                async for chunk in resp.content.iter_chunked(chunk_size):
                    await file.write(chunk)
    except aiohttp.ClientError as e:
        raise DownloadError(f"Failed to download {url}: {e}") from e

    return destination


def _extract_archive(archive: Path, destination: Path) -> None:
    try:
        with tarfile.open(archive, "r:*") as tar:
            tar.extractall(destination, filter="tar")
    except tarfile.TarError as e:
        raise TarReadError(f"Cannot extract {archive}: {e}") from e


async def fetch_qemu(config: BuildConfig) -> Path:
    """Download and unpack the QEMU source tree.

    The tree is extracted to ``qemu-<version>`` and ``config.source_directory``
    is replaced by a symlink pointing at it.

    Args:
        config: Build configuration

    Returns:
        Path to the source directory symlink

    Raises:
        DownloadError: If the source tarball cannot be downloaded
        TarReadError: If the source tarball cannot be extracted
    """
    parent = config.source_directory.parent
    archive = parent / config.qemu_archive

    async with await create_session(config.timeout) as session:
        await download_file(session, config.qemu_url, archive)

    logger.info(f"Extracting {archive}")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, _extract_archive, archive, parent)

    source = config.source_directory
    if source.is_symlink() or source.is_file():
        source.unlink()
    elif source.exists():
        shutil.rmtree(source)
    archive.unlink()

    source.symlink_to(f"qemu-{config.qemu_version}")
    return source


async def fetch_remote_firmware(config: BuildConfig, destination: Path) -> Path:
    """Download the Linaro UEFI image bundled with aarch64.

    Args:
        config: Build configuration
        destination: Path to write the firmware image to

    Returns:
        Path to the downloaded firmware
    """
    async with await create_session(config.timeout) as session:
        return await download_file(session, config.linaro_uefi_url, destination)
