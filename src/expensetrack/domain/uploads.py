"""Uploaded file abstraction consumed by the import pipeline."""

import shutil
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path


class UploadError(Enum):
    """Transfer status of an uploaded file."""

    OK = 0
    TOO_LARGE = 1
    PARTIAL = 2
    NO_FILE = 3
    CANT_WRITE = 4


class UploadedFile(ABC):
    """A file handed over by the outer surface (web form, CLI argument, ...)."""

    @property
    @abstractmethod
    def error(self) -> UploadError:
        """Transfer status; only ``UploadError.OK`` files may be imported."""
        pass

    @abstractmethod
    def move_to(self, target_path: str) -> None:
        """Materialize the uploaded content at ``target_path``."""
        pass


class LocalUploadedFile(UploadedFile):
    """Uploaded file backed by a path on the local filesystem.

    The source file is copied, never moved, so the user's file stays intact.
    """

    def __init__(self, source_path: str):
        self.source_path = Path(source_path)

    @property
    def error(self) -> UploadError:
        if not self.source_path.is_file():
            return UploadError.NO_FILE
        return UploadError.OK

    def move_to(self, target_path: str) -> None:
        shutil.copyfile(self.source_path, target_path)
