"""Host prerequisite installation."""

from ..core.command import execute
from ..core.types import HostConfig


async def install_prerequisites(host: HostConfig) -> None:
    """Install the packages needed to build QEMU on a host."""
    manager = host.package_manager
    await execute(*manager.command, *manager.packages, env=manager.env)
