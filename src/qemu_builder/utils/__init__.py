"""Utility functions for the QEMU builder."""

from .firmware import decompress_bz2, strip_trailing_zeros
from .validator import QemuSystemValidator, validate_qemu_system

__all__ = [
    "QemuSystemValidator",
    "decompress_bz2",
    "strip_trailing_zeros",
    "validate_qemu_system",
]
