"""Custom exceptions for the QEMU builder."""


class QemuBuilderError(Exception):
    """Base exception for all builder-related errors."""

    pass


class UnsupportedPlatformError(QemuBuilderError):
    """Raised when the host operating system or CPU is not supported."""

    pass


class TarReadError(QemuBuilderError):
    """Raised when unable to read or parse tar file."""

    pass


class ValidationError(QemuBuilderError):
    """Raised when a bundled tar file does not have the expected structure."""

    pass


class CommandError(QemuBuilderError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command {' '.join(command)!r} failed with exit code {returncode}"
        )


class DownloadError(QemuBuilderError):
    """Raised when a remote asset cannot be downloaded."""

    pass


class BundleError(QemuBuilderError):
    """Raised when a build output required for bundling is missing."""

    pass
