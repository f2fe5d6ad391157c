"""Core data types for the QEMU builder."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

QEMU_VERSION = "6.2.0"
QEMU_DOWNLOAD_URL = "https://download.qemu.org/qemu-{version}.tar.xz"
LINARO_UEFI_URL = (
    "https://releases.linaro.org/components/kernel/uefi-linaro/latest/"
    "release/qemu64/QEMU_EFI.fd"
)


@dataclass(frozen=True)
class BuildConfig:
    """Build pipeline configuration."""

    qemu_version: str = QEMU_VERSION
    download_url: str = QEMU_DOWNLOAD_URL
    linaro_uefi_url: str = LINARO_UEFI_URL
    source_directory: Path = Path("qemu")
    work_directory: Path = Path("work")
    output_directory: Path = Path(".")
    install_prefix: str = "/tmp/cross-platform-actions"
    timeout: int = 600
    github_actions: bool = False

    @property
    def qemu_url(self) -> str:
        """Get the download URL of the QEMU source tarball."""
        return self.download_url.format(version=self.qemu_version)

    @property
    def qemu_archive(self) -> str:
        """Get the file name of the QEMU source tarball."""
        return f"qemu-{self.qemu_version}.tar.xz"

    @property
    def target_directory(self) -> Path:
        """Get the directory QEMU architectures are laid out in."""
        return self.work_directory / "qemus"

    @property
    def build_directory(self) -> Path:
        return self.source_directory / "build"

    @property
    def firmware_source_directory(self) -> Path:
        return self.source_directory / "pc-bios"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BuildConfig":
        """Create configuration from environment variables.

        Args:
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            BuildConfig with overrides from ``QEMU_VERSION``,
            ``LINARO_UEFI_URL`` and ``GITHUB_ACTIONS`` applied
        """
        environ = os.environ if environ is None else environ
        return cls(
            qemu_version=environ.get("QEMU_VERSION", QEMU_VERSION),
            linaro_uefi_url=environ.get("LINARO_UEFI_URL", LINARO_UEFI_URL),
            github_actions="GITHUB_ACTIONS" in environ,
        )


@dataclass(frozen=True)
class PackageManager:
    """Package manager invocation for installing host prerequisites."""

    command: tuple[str, ...]
    packages: tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ArchitectureConfig:
    """QEMU target architecture and the firmware bundled with it."""

    name: str
    firmwares: tuple[str, ...]
    uefi_source: Optional[str] = None
    truncate_uefi: bool = False
    linaro_uefi: bool = False

    @property
    def qemu_name(self) -> str:
        return f"qemu-system-{self.name}"

    @property
    def softmmu_target(self) -> str:
        return f"{self.name}-softmmu"


@dataclass(frozen=True)
class HostConfig:
    """Host platform settings selected by (operating system, CPU)."""

    name: str
    cpu: str
    package_manager: PackageManager
    architectures: tuple[str, ...]
    build_flags: tuple[str, ...] = ()
    ldflags: tuple[str, ...] = ()
    uefi_source: Optional[Path] = None
    bundle_xhyve: bool = False
