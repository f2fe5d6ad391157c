"""QEMU configure and compile step."""

import logging

from ..core.command import capture, execute
from ..core.matrix import enabled_architectures
from ..core.types import BuildConfig, HostConfig

logger = logging.getLogger(__name__)

CONFIGURE_FLAGS = (
    "--disable-auth-pam",
    "--disable-bochs",
    "--disable-bsd-user",
    "--disable-cfi-debug",
    "--disable-cocoa",
    "--disable-curses",
    "--disable-debug-info",
    "--disable-debug-mutex",
    "--disable-dmg",
    "--disable-docs",
    "--disable-gcrypt",
    "--disable-gnutls",
    "--disable-gtk",
    "--disable-guest-agent",
    "--disable-guest-agent-msi",
    "--disable-hax",
    "--disable-kvm",
    "--disable-libiscsi",
    "--disable-libssh",
    "--disable-libusb",
    "--disable-linux-user",
    "--disable-nettle",
    "--disable-parallels",
    "--disable-qcow1",
    "--disable-qed",
    "--disable-replication",
    "--disable-sdl",
    "--disable-smartcard",
    "--disable-snappy",
    "--disable-usb-redir",
    "--disable-user",
    "--disable-vde",
    "--disable-vdi",
    "--disable-vnc",
    "--disable-vvfat",
    "--disable-xen",
    "--disable-lzo",
    "--disable-zstd",
    "--enable-lto",
    "--enable-slirp=git",
    "--enable-tools",
)


def configure_args(config: BuildConfig, host: HostConfig) -> list[str]:
    """Build the argument list passed to QEMU's ``configure`` script.

    Args:
        config: Build configuration
        host: Host configuration

    Returns:
        Arguments for ``configure``
    """
    target_list = ",".join(
        architecture.softmmu_target for architecture in enabled_architectures(host)
    )
    return [
        f"--prefix={config.install_prefix}",
        *CONFIGURE_FLAGS,
        f"--target-list={target_list}",
        *host.build_flags,
    ]


async def resolve_ldflags(host: HostConfig) -> str:
    """Render the host linker flags into an ``LDFLAGS`` value.

    Flags referring to ``{brew_prefix}`` are resolved with ``brew --prefix``.
    """
    flags = " ".join(host.ldflags)
    if "{brew_prefix}" in flags:
        brew_prefix = await capture("brew", "--prefix")
        flags = flags.format(brew_prefix=brew_prefix)
    return flags


async def build_qemu(config: BuildConfig, host: HostConfig) -> None:
    """Configure and compile QEMU for the host's enabled architectures."""
    build_dir = config.build_directory
    build_dir.mkdir(parents=True, exist_ok=True)

    ldflags = await resolve_ldflags(host)
    logger.debug(f"LDFLAGS={ldflags}")

    await execute(
        "../configure",
        *configure_args(config, host),
        env={"LDFLAGS": ldflags},
        cwd=build_dir,
    )
    await execute("make", cwd=build_dir)
    await execute("ls", "-lh", cwd=build_dir)
