"""Host platform detection."""

import platform
import sys
from typing import Optional

from ..exceptions import UnsupportedPlatformError

# sys.platform prefix -> host OS name used in archive file names
HOST_OS_NAMES = {
    "darwin": "macos",
    "linux": "linux",
}

# Canonical host CPU names
CPU_ALIASES = {
    "aarch64": "arm64",
    "amd64": "x86_64",
}


def detect_host_os(system: Optional[str] = None) -> str:
    """Map the running platform to a host OS name.

    Args:
        system: Platform identifier (defaults to ``sys.platform``)

    Returns:
        ``"macos"`` or ``"linux"``

    Raises:
        UnsupportedPlatformError: If the platform is not supported
    """
    system = sys.platform if system is None else system
    for prefix, name in HOST_OS_NAMES.items():
        if system.startswith(prefix):
            return name
    raise UnsupportedPlatformError(f"Unsupported platform: {system}")


def canonical_cpu(machine: str) -> str:
    """Normalize a machine name to the CPU key used by the host matrix."""
    machine = machine.lower()
    return CPU_ALIASES.get(machine, machine)


def detect_cpu(machine: Optional[str] = None) -> str:
    """Get the canonical CPU name of the running host."""
    return canonical_cpu(platform.machine() if machine is None else machine)
