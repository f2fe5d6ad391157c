"""Example validation of bundled QEMU system tar files."""

import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from qemu_builder import (
    QemuBuilderError,
    expected_firmwares,
    get_host_config,
    validate_qemu_system,
)
from qemu_builder.core.matrix import enabled_architectures

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> int:
    """Validate every archive the current host builds."""
    try:
        host = get_host_config()
        logger.info(f"Host: {host.name} ({host.cpu})")

        failures = 0
        for architecture in enabled_architectures(host):
            firmwares = expected_firmwares(architecture, host)
            validator = validate_qemu_system(architecture.name, firmwares)

            if validator.valid:
                logger.info(f"✓ {validator.tar_file.filename}")
            else:
                failures += 1
                logger.error(f"✗ {validator.tar_file.filename}\n{validator.message}")

        return 1 if failures else 0

    except FileNotFoundError as e:
        logger.error(f"Archive not found: {e.filename}")
        return 1
    except QemuBuilderError as e:
        logger.error(f"Validation error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
