"""Test configuration and fixtures."""

import os

import pytest

from tests.helpers import create_tar, firmware_entries


@pytest.fixture
def x86_64_firmwares():
    """Expected x86_64 firmware on a Linux host."""
    return [
        "bios-256k.bin",
        "efi-e1000.rom",
        "efi-virtio.rom",
        "kvmvapic.bin",
        "vgabios-stdvga.bin",
        "uefi.fd",
    ]


@pytest.fixture
def x86_64_tar(tmp_path, x86_64_firmwares):
    """Create a complete qemu-system-x86_64-linux.tar."""
    entries = ["bin/qemu", *firmware_entries(x86_64_firmwares)]
    return create_tar(tmp_path / "qemu-system-x86_64-linux.tar", entries)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers",
        "artifacts: mark test as checking tar files produced by a build",
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    # Skip artifact tests unless a build has produced the tar files
    skip_artifacts = pytest.mark.skip(reason="Build artifacts not available")

    for item in items:
        if (
            "artifacts" in item.keywords
            and os.getenv("ARTIFACTS_AVAILABLE", "false").lower() != "true"
        ):
            item.add_marker(skip_artifacts)
