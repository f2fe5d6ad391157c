"""Diagnostic messages for QEMU system tar validation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validator import QemuSystemValidator


class MessageFormatter:
    """Format the expected, actual and diff listing of a validation run."""

    def __init__(self, validator: "QemuSystemValidator") -> None:
        self.validator = validator

    @property
    def tar_file(self):
        return self.validator.tar_file

    def format(self) -> str:
        return "\n".join(
            self.expected() + [""] + self.actual() + [""] + self.diff()
        )

    def expected(self) -> list[str]:
        return [
            f"Expected '{self.tar_file.filename}' to contain:",
            *self.tar_file.qemu_binary,
            *self.tar_file.to_full_path(self.validator.firmwares),
        ]

    def actual(self) -> list[str]:
        return ["Actual:", *self.tar_file.paths]

    def diff(self) -> list[str]:
        """Union of expected and actual firmware paths, annotated.

        Missing entries are prefixed with ``-`` and extra entries with ``+``.
        """
        missing = set(self.tar_file.to_full_path(self.validator.missing))
        extra = set(self.tar_file.to_full_path(self.validator.extra))

        paths = self.tar_file.to_full_path(
            self.validator.firmwares
        ) + self.tar_file.to_full_path(self.tar_file.firmwares)

        lines = []
        for path in dict.fromkeys(paths):
            line = f"-{path}" if path in missing else path
            line = f"+{line}" if line in extra else line
            lines.append(line)

        return ["Diff:"] + lines
