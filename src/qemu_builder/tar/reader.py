"""QEMU system tar file reader implementation."""

import tarfile
from functools import cached_property
from pathlib import Path
from typing import Union

from ..exceptions import TarReadError

FIRMWARE_DIRECTORY = "share/qemu/"
QEMU_BINARY_PREFIX = "bin/qemu"


def archive_name(architecture: str, host_os: str) -> str:
    """Get the file name of the archive bundled for an architecture."""
    return f"qemu-system-{architecture}-{host_os}.tar"


def normalize_path(name: str) -> str:
    """Strip a leading ``./`` from a tar entry name."""
    return name[2:] if name.startswith("./") else name


class TarFile:
    """Read-only view over the regular files in a bundled QEMU tar file.

    Every attribute is computed once per instance; the archive is not
    expected to change after it has been bundled.
    """

    firmware_directory = FIRMWARE_DIRECTORY

    def __init__(self, filename: Union[str, Path]) -> None:
        """Initialize tar file view.

        Args:
            filename: Path to the tar file
        """
        self.filename = str(filename)

    @classmethod
    def for_target(
        cls,
        architecture: str,
        host_os: str,
        directory: Union[str, Path, None] = None,
    ) -> "TarFile":
        """Create a view of the archive bundled for an architecture.

        Args:
            architecture: QEMU target architecture (e.g. ``x86_64``)
            host_os: Host OS name (``macos`` or ``linux``)
            directory: Directory holding the archive; when omitted the
                file name is relative to the current working directory

        Returns:
            TarFile for ``qemu-system-<architecture>-<host_os>.tar``
        """
        name = archive_name(architecture, host_os)
        if directory is None:
            return cls(name)
        return cls(Path(directory) / name)

    @cached_property
    def paths(self) -> list[str]:
        """Sorted, normalized names of all regular files in the archive.

        Raises:
            FileNotFoundError: If the archive does not exist
            TarReadError: If the archive cannot be parsed
        """
        try:
            with tarfile.open(self.filename, "r") as tar:
                return sorted(
                    normalize_path(member.name)
                    for member in tar.getmembers()
                    if member.isfile()
                )
        except tarfile.TarError as e:
            raise TarReadError(f"Cannot read tar file {self.filename}: {e}") from e

    @cached_property
    def firmware_paths(self) -> list[str]:
        return [path for path in self.paths if path.startswith(self.firmware_directory)]

    @cached_property
    def firmwares(self) -> list[str]:
        return [
            path[len(self.firmware_directory) :] for path in self.firmware_paths
        ]

    @cached_property
    def qemu_binary(self) -> list[str]:
        return [path for path in self.paths if path.startswith(QEMU_BINARY_PREFIX)]

    def to_full_path(self, firmwares: list[str]) -> list[str]:
        """Prefix firmware file names with the firmware directory."""
        return [f"{self.firmware_directory}{firmware}" for firmware in firmwares]

    def __repr__(self) -> str:
        return f"TarFile({self.filename!r})"
