"""Bundling of build output into per-architecture tar files."""

import asyncio
import logging
import shutil
from pathlib import Path

from ..core.matrix import LINARO_UEFI_FIRMWARE, UEFI_FIRMWARE, enabled_architectures
from ..core.types import ArchitectureConfig, BuildConfig, HostConfig
from ..exceptions import BundleError
from ..tar.reader import archive_name
from ..tar.writer import create_archive
from ..utils.firmware import decompress_bz2, strip_trailing_zeros
from .download import fetch_remote_firmware

logger = logging.getLogger(__name__)


def _copy(source: Path, destination: Path) -> None:
    if not source.is_file():
        raise BundleError(f"Build output not found: {source}")
    shutil.copy2(source, destination)


def architecture_directory(config: BuildConfig, architecture: ArchitectureConfig) -> Path:
    return config.target_directory / architecture.qemu_name


async def bundle_uefi(
    config: BuildConfig,
    host: HostConfig,
    architecture: ArchitectureConfig,
    firmware_dir: Path,
) -> None:
    """Place the UEFI images for an architecture into *firmware_dir*.

    Architectures with their own UEFI source use the EDK2 image shipped in
    QEMU's ``pc-bios``; others use the image provided by the host, if any.
    """
    target = firmware_dir / UEFI_FIRMWARE

    if architecture.uefi_source:
        source = config.firmware_source_directory / architecture.uefi_source
        compressed = source.with_name(source.name + ".bz2")
        if compressed.exists():
            logger.info(f"Decompressing {compressed}")
            decompress_bz2(compressed, source)
        _copy(source, target)
        if architecture.truncate_uefi:
            size = strip_trailing_zeros(target)
            logger.debug(f"Truncated {target} to {size} bytes")
    elif host.uefi_source:
        _copy(host.uefi_source, target)

    if architecture.linaro_uefi:
        await fetch_remote_firmware(config, firmware_dir / LINARO_UEFI_FIRMWARE)


async def bundle_architecture(
    config: BuildConfig, host: HostConfig, architecture: ArchitectureConfig
) -> Path:
    """Lay out and archive the QEMU binary and firmware of one architecture.

    Args:
        config: Build configuration
        host: Host configuration
        architecture: Architecture to bundle

    Returns:
        Path to ``qemu-system-<architecture>-<host>.tar``

    Raises:
        BundleError: If the QEMU binary or a firmware file is missing
    """
    arch_dir = architecture_directory(config, architecture)
    binary_dir = arch_dir / "bin"
    firmware_dir = arch_dir / "share" / "qemu"
    binary_dir.mkdir(parents=True, exist_ok=True)
    firmware_dir.mkdir(parents=True, exist_ok=True)

    await bundle_uefi(config, host, architecture, firmware_dir)
    _copy(config.build_directory / architecture.qemu_name, binary_dir / "qemu")
    for firmware in architecture.firmwares:
        _copy(config.firmware_source_directory / firmware, firmware_dir / firmware)

    destination = config.output_directory / archive_name(architecture.name, host.name)
    logger.info(f"Creating {destination}")
    return await create_archive(arch_dir, destination)


async def bundle_qemu(config: BuildConfig, host: HostConfig) -> list[Path]:
    """Bundle every architecture enabled on the host, one after another."""
    config.target_directory.mkdir(parents=True, exist_ok=True)
    return [
        await bundle_architecture(config, host, architecture)
        for architecture in enabled_architectures(host)
    ]


async def bundle_resources(config: BuildConfig, host: HostConfig) -> Path:
    """Archive ``qemu-img`` into ``resources-<host>.tar``."""
    work_dir = config.work_directory
    work_dir.mkdir(parents=True, exist_ok=True)
    try:
        _copy(config.build_directory / "qemu-img", work_dir / "qemu-img")
        destination = config.output_directory / f"resources-{host.name}.tar"
        logger.info(f"Creating {destination}")
        return await create_archive(work_dir, destination)
    finally:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, shutil.rmtree, work_dir)
