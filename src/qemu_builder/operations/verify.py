"""Post-bundle verification of QEMU system tar files."""

import logging

from ..core.matrix import enabled_architectures, expected_firmwares
from ..core.types import BuildConfig, HostConfig
from ..exceptions import ValidationError
from ..utils.validator import QemuSystemValidator

logger = logging.getLogger(__name__)


def verify_bundles(config: BuildConfig, host: HostConfig) -> list[QemuSystemValidator]:
    """Validate the archive of every architecture enabled on the host.

    Args:
        config: Build configuration
        host: Host configuration

    Returns:
        Validators of the checked archives

    Raises:
        ValidationError: If an archive does not have the expected structure
    """
    validators = []
    for architecture in enabled_architectures(host):
        validator = QemuSystemValidator(
            architecture.name,
            expected_firmwares(architecture, host),
            host_os=host.name,
            directory=config.output_directory,
        )
        if not validator.valid:
            raise ValidationError(validator.message)
        logger.info(f"{validator.tar_file.filename} is valid")
        validators.append(validator)
    return validators
