"""Exception classes for rmdslides.

Provides standardized exceptions for error handling throughout rmdslides.
Only conditions that must stop a run before anything is written raise;
everything detected mid-run is logged and reported on the result.
"""

from __future__ import annotations

from pathlib import Path


class RmdSlidesError(Exception):
    """Base exception for all rmdslides errors.

    Subclass this for specific error categories.
    """

    pass


class OutputExistsError(RmdSlidesError):
    """Destination deck already exists.

    Raised before any file is opened, so neither the deck nor the
    exercise file is touched.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with the offending path.

        Args:
            path: Destination deck path that already exists
        """
        self.path = Path(path)
        super().__init__(
            f"{self.path} file exists. Pick a different filename or remove the file."
        )


class InputReadError(RmdSlidesError):
    """Input chapter could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Initialize with the input path and the underlying reason.

        Args:
            path: Input path
            reason: Description of the failure (usually from OSError)
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class ConfigError(RmdSlidesError):
    """Invalid configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize configuration error.

        Args:
            field: Name of the offending SlideConfig field
            message: Description of the violation
        """
        self.field = field
        super().__init__(f"Invalid {field}: {message}")
