"""Loader error types."""
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .image_size import ImageSize


class LoaderError(Exception):
    """Base error for everything that aborts a load."""

    def __init__(self, message: str, code: str = "loader", context: str = ""):
        super().__init__(message)
        self.code = code
        self.context = context


class OptionsValidationError(LoaderError):
    """Options failed validation; raised before any path computation or I/O."""

    def __init__(self, message: str, key: str = ""):
        super().__init__(f"Invalid options object. {message}", code="options", context=key)
        self.key = key


class ProbeError(LoaderError):
    """Image dimensions could not be read."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"Unable to read image size of {path}: {cause}", code="probe", context=str(path))
        self.path = path
        self.cause = cause


class DimensionMismatchError(LoaderError):
    """Light and dark variants have different pixel dimensions."""

    def __init__(self, primary_path: str, primary_size: "ImageSize",
                 dark_path: str, dark_size: "ImageSize"):
        message = (
            f"Images don't have the same size: "
            f"{dark_size.width}x{dark_size.height} != {primary_size.width}x{primary_size.height}\n"
            f"{dark_path} - {primary_path}"
        )
        super().__init__(message, code="dimension-mismatch", context=primary_path)
        self.primary_path = primary_path
        self.primary_size = primary_size
        self.dark_path = dark_path
        self.dark_size = dark_size


class EmitError(LoaderError):
    """The output store refused an asset."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Cannot emit '{name}': {reason}", code="emit", context=name)
        self.name = name
