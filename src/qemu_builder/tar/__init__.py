"""Tar file reading and writing."""

from .reader import TarFile, archive_name
from .writer import create_archive

__all__ = ["TarFile", "archive_name", "create_archive"]
