"""Structure checks for the tar files produced by a build.

These run against ``qemu-system-<architecture>-<host_os>.tar`` in the current
working directory and are skipped unless ``ARTIFACTS_AVAILABLE=true``.
"""

import sys

import pytest

from tests.helpers import assert_qemu_system

pytestmark = pytest.mark.artifacts


class TestQemuSystem:
    """Test the qemu-system archives."""

    def test_x86_64(self):
        """Test x86_64 contains the correct file structure."""
        uefi = [] if sys.platform == "darwin" else ["uefi.fd"]

        assert_qemu_system(
            "x86_64",
            firmwares=[
                "bios-256k.bin",
                "efi-e1000.rom",
                "efi-virtio.rom",
                "kvmvapic.bin",
                "vgabios-stdvga.bin",
                *uefi,
            ],
        )

    def test_aarch64(self):
        """Test aarch64 contains the correct file structure."""
        assert_qemu_system(
            "aarch64",
            firmwares=[
                "efi-e1000.rom",
                "efi-virtio.rom",
                "uefi.fd",
                "linaro_uefi.fd",
            ],
        )
