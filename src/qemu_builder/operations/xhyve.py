"""xhyve installation and bundling for macOS hosts."""

import json
import logging
import shutil
from pathlib import Path
from typing import Optional

from ..core.command import capture, execute
from ..core.matrix import UEFI_FIRMWARE
from ..core.types import BuildConfig, HostConfig
from ..exceptions import BundleError
from ..tar.writer import create_archive

logger = logging.getLogger(__name__)

USERBOOT_PATH = Path("share/xhyve/test/userboot.so")


async def install_xhyve() -> None:
    await execute("brew", "install", "--HEAD", "xhyve")


def installed_version(info: str) -> str:
    """Get the installed xhyve version from ``brew info --json`` output.

    Raises:
        BundleError: If xhyve is not installed
    """
    for formula in json.loads(info):
        for installed in formula.get("installed", []):
            return installed["version"]
    raise BundleError("xhyve is not installed")


async def bundle_xhyve(config: BuildConfig, host: HostConfig) -> Optional[Path]:
    """Archive the xhyve binary and its userboot library.

    Args:
        config: Build configuration
        host: Host configuration

    Returns:
        Path to ``xhyve-<host>.tar``, or None if the host does not bundle xhyve
    """
    if not host.bundle_xhyve:
        logger.debug(f"Skipping xhyve on {host.name} ({host.cpu})")
        return None

    await install_xhyve()

    work_dir = config.work_directory
    binary_dir = work_dir / "bin"
    binary_dir.mkdir(parents=True, exist_ok=True)

    uefi = Path(UEFI_FIRMWARE)
    if config.github_actions and uefi.exists():
        shutil.move(str(uefi), work_dir / UEFI_FIRMWARE)

    xhyve = shutil.which("xhyve")
    if xhyve is None:
        raise BundleError("xhyve executable not found on PATH")
    shutil.copy2(xhyve, binary_dir)

    cellar = Path(await capture("brew", "--cellar", "xhyve"))
    version = installed_version(await capture("brew", "info", "xhyve", "--json"))
    shutil.copy2(cellar / version / USERBOOT_PATH, work_dir)

    destination = config.output_directory / f"xhyve-{host.name}.tar"
    logger.info(f"Creating {destination}")
    await create_archive(work_dir, destination)
    shutil.rmtree(work_dir)
    return destination
