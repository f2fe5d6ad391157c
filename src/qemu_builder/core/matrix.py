"""Host and architecture configuration tables."""

from pathlib import Path
from typing import Optional

from ..exceptions import UnsupportedPlatformError
from .platform import detect_cpu, detect_host_os
from .types import ArchitectureConfig, HostConfig, PackageManager

ARCHITECTURES: dict[str, ArchitectureConfig] = {
    "x86_64": ArchitectureConfig(
        name="x86_64",
        firmwares=(
            "bios-256k.bin",
            "efi-e1000.rom",
            "efi-virtio.rom",
            "kvmvapic.bin",
            "vgabios-stdvga.bin",
        ),
    ),
    "aarch64": ArchitectureConfig(
        name="aarch64",
        firmwares=(
            "efi-e1000.rom",
            "efi-virtio.rom",
        ),
        uefi_source="edk2-aarch64-code.fd",
        truncate_uefi=True,
        linaro_uefi=True,
    ),
}

UEFI_FIRMWARE = "uefi.fd"
LINARO_UEFI_FIRMWARE = "linaro_uefi.fd"

BREW = PackageManager(
    command=("brew", "install"),
    packages=("ninja", "pixman", "glib"),
    env={"HOMEBREW_NO_INSTALL_CLEANUP": "1"},
)

APK = PackageManager(
    command=("apk", "add", "--no-cache"),
    packages=(
        "bash",
        "curl",
        "g++",
        "gcc",
        "glib-dev",
        "glib-static",
        "make",
        "musl-dev",
        "ninja",
        "ovmf",
        "perl",
        "pixman-dev",
        "pixman-static",
        "pkgconf",
        "python3",
        "xz",
        "zlib-static",
    ),
)

# "{brew_prefix}" is substituted with the output of `brew --prefix`
MACOS_LDFLAGS = (
    "-framework",
    "Foundation",
    "-liconv",
    "-lpcre",
    "-lresolv",
    "-dead_strip",
    "{brew_prefix}/opt/gettext/lib/libintl.a",
    "{brew_prefix}/opt/glib/lib/libgio-2.0.a",
    "{brew_prefix}/opt/glib/lib/libglib-2.0.a",
    "{brew_prefix}/opt/glib/lib/libgmodule-2.0.a",
    "{brew_prefix}/opt/glib/lib/libgobject-2.0.a",
    "{brew_prefix}/opt/pixman/lib/libpixman-1.a",
)

OVMF_PATH = Path("/usr/share/OVMF/OVMF.fd")

HOSTS: dict[tuple[str, str], HostConfig] = {
    ("macos", "x86_64"): HostConfig(
        name="macos",
        cpu="x86_64",
        package_manager=BREW,
        architectures=("x86_64", "aarch64"),
        ldflags=MACOS_LDFLAGS,
        bundle_xhyve=True,
    ),
    ("macos", "arm64"): HostConfig(
        name="macos",
        cpu="arm64",
        package_manager=BREW,
        architectures=("aarch64",),
        ldflags=MACOS_LDFLAGS,
    ),
    ("linux", "x86_64"): HostConfig(
        name="linux",
        cpu="x86_64",
        package_manager=APK,
        architectures=("x86_64", "aarch64"),
        build_flags=("--static",),
        ldflags=("-s",),
        uefi_source=OVMF_PATH,
    ),
    ("linux", "arm64"): HostConfig(
        name="linux",
        cpu="arm64",
        package_manager=APK,
        architectures=("aarch64",),
        build_flags=("--static",),
        ldflags=("-s",),
        uefi_source=OVMF_PATH,
    ),
}


def get_host_config(
    host_os: Optional[str] = None, cpu: Optional[str] = None
) -> HostConfig:
    """Look up the host configuration for an (OS, CPU) pair.

    Args:
        host_os: Host OS name (defaults to the running platform)
        cpu: Canonical CPU name (defaults to the running CPU)

    Returns:
        Matching HostConfig

    Raises:
        UnsupportedPlatformError: If the pair is not in the matrix
    """
    host_os = detect_host_os() if host_os is None else host_os
    cpu = detect_cpu() if cpu is None else cpu
    try:
        return HOSTS[(host_os, cpu)]
    except KeyError:
        raise UnsupportedPlatformError(
            f"Unsupported host: {host_os} ({cpu})"
        ) from None


def get_architecture(name: str) -> ArchitectureConfig:
    """Look up a QEMU target architecture by name."""
    try:
        return ARCHITECTURES[name]
    except KeyError:
        raise UnsupportedPlatformError(f"Unsupported architecture: {name}") from None


def enabled_architectures(host: HostConfig) -> list[ArchitectureConfig]:
    """Get the QEMU architectures bundled on a host."""
    return [get_architecture(name) for name in host.architectures]


def expected_firmwares(architecture: ArchitectureConfig, host: HostConfig) -> list[str]:
    """Get the firmware file names the bundle stage places in an archive.

    Args:
        architecture: QEMU target architecture
        host: Host the archive is built on

    Returns:
        Sorted firmware file names
    """
    firmwares = list(architecture.firmwares)
    if architecture.uefi_source or host.uefi_source:
        firmwares.append(UEFI_FIRMWARE)
    if architecture.linaro_uefi:
        firmwares.append(LINARO_UEFI_FIRMWARE)
    return sorted(firmwares)
