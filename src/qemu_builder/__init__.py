"""QEMU Builder - Build, bundle and validate QEMU system tar files."""

__version__ = "0.1.0"

from .core.matrix import expected_firmwares, get_architecture, get_host_config
from .core.types import ArchitectureConfig, BuildConfig, HostConfig
from .exceptions import (
    BundleError,
    CommandError,
    DownloadError,
    QemuBuilderError,
    TarReadError,
    UnsupportedPlatformError,
    ValidationError,
)
from .pipeline import run_pipeline
from .tar.reader import TarFile
from .utils.validator import QemuSystemValidator, validate_qemu_system

__all__ = [
    "ArchitectureConfig",
    "BuildConfig",
    "HostConfig",
    "QemuSystemValidator",
    "TarFile",
    "expected_firmwares",
    "get_architecture",
    "get_host_config",
    "run_pipeline",
    "validate_qemu_system",
    "QemuBuilderError",
    "UnsupportedPlatformError",
    "TarReadError",
    "ValidationError",
    "CommandError",
    "DownloadError",
    "BundleError",
]
