"""Custom exception types for helpdoc."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class HelpdocError(Exception):
    """Base class for all helpdoc errors."""


class MissingDependencyError(HelpdocError):
    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        names = ", ".join(self.missing)
        super().__init__(f"Missing presentation assets: {names}")


class ModuleNotFoundHelpError(HelpdocError):
    def __init__(self, module_name: str, reason: str) -> None:
        self.module_name = module_name
        super().__init__(f"Module '{module_name}' not found: {reason}")


class UnexpectedMetadataShapeError(HelpdocError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class WriteFailureError(HelpdocError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write '{path}': {reason}")


class StartupValidationError(HelpdocError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class PathMappingError(HelpdocError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
