"""Structure validation for bundled QEMU system tar files."""

from functools import cached_property
from pathlib import Path
from typing import Iterable, Optional, Union

from ..core.platform import detect_host_os
from ..tar.reader import TarFile
from .formatter import MessageFormatter


def difference(items: list[str], other: list[str]) -> list[str]:
    """Items not present in *other*, keeping their original order."""
    excluded = set(other)
    return [item for item in items if item not in excluded]


class QemuSystemValidator:
    """Validate one ``qemu-system-<architecture>`` archive.

    An archive is valid when it contains a qemu binary and exactly the
    expected firmware files.
    """

    def __init__(
        self,
        architecture: str,
        firmwares: Iterable[str],
        host_os: Optional[str] = None,
        directory: Union[str, Path, None] = None,
    ) -> None:
        """Initialize validator.

        Args:
            architecture: QEMU target architecture (e.g. ``x86_64``)
            firmwares: Expected firmware file names
            host_os: Host OS name; detected from the running platform
                when omitted
            directory: Directory holding the archive (defaults to the
                current working directory)
        """
        self.architecture = architecture
        self.firmwares = sorted(firmwares)
        self._host_os = host_os
        self._directory = directory

    @cached_property
    def host_os(self) -> str:
        """Host OS name used in the archive file name.

        Raises:
            UnsupportedPlatformError: If the running platform is not supported
        """
        return self._host_os or detect_host_os()

    @cached_property
    def tar_file(self) -> TarFile:
        return TarFile.for_target(
            architecture=self.architecture,
            host_os=self.host_os,
            directory=self._directory,
        )

    @cached_property
    def extra(self) -> list[str]:
        """Firmware present in the archive but not expected."""
        return difference(self.tar_file.firmwares, self.firmwares)

    @cached_property
    def missing(self) -> list[str]:
        """Firmware expected but absent from the archive."""
        return difference(self.firmwares, self.tar_file.firmwares)

    @property
    def has_qemu_binary(self) -> bool:
        return bool(self.tar_file.qemu_binary)

    @property
    def firmware_matching(self) -> bool:
        return not self.extra and not self.missing

    @cached_property
    def valid(self) -> bool:
        return self.has_qemu_binary and self.firmware_matching

    @property
    def message(self) -> str:
        """Diagnostic describing expected and actual archive contents."""
        return self._message_formatter.format()

    @cached_property
    def _message_formatter(self) -> MessageFormatter:
        return MessageFormatter(self)


def validate_qemu_system(
    architecture: str,
    firmwares: Iterable[str],
    host_os: Optional[str] = None,
    directory: Union[str, Path, None] = None,
) -> QemuSystemValidator:
    """QEMU 시스템 tar 파일의 구조를 검증합니다.

    Args:
        architecture: QEMU 대상 아키텍처 (예: "x86_64", "aarch64")
        firmwares: 포함되어야 하는 펌웨어 파일 이름 목록
        host_os: 호스트 OS 이름 ("macos", "linux"), 생략 시 현재 플랫폼에서 감지
        directory: tar 파일이 있는 디렉터리 (기본값: 현재 작업 디렉터리)

    Returns:
        QemuSystemValidator: 검증 결과 (valid, extra, missing, message)

    Raises:
        UnsupportedPlatformError: 지원하지 않는 플랫폼인 경우
        FileNotFoundError: tar 파일이 존재하지 않는 경우
        TarReadError: tar 파일이 손상된 경우

    Examples:
        # x86_64 tar 파일 검증
        validator = validate_qemu_system(
            "x86_64", ["bios-256k.bin", "efi-e1000.rom"], host_os="linux"
        )
        if not validator.valid:
            print(validator.message)
    """
    validator = QemuSystemValidator(
        architecture, firmwares, host_os=host_os, directory=directory
    )
    # Evaluate eagerly so read errors surface here
    validator.valid
    return validator
