"""Package exceptions.

Errors are grouped in three families so callers can tell apart a bad request
(`ConfigurationError`), a tool that could not be run (`ToolExecutionError`)
and a tool whose output could not be understood (`ToolOutputError`).
"""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


class ConfigurationError(PackageError):
    """Base class for invalid caller input or configuration."""


class ToolExecutionError(PackageError):
    """Base class for failures while running an external tool."""


class ToolOutputError(PackageError):
    """Base class for external tool output that cannot be interpreted."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class AsyncExecutionError(PackageError):
    """Raised when an async operation fails in compatibility runner."""

    result: BaseException
    message: str = "Async operation failed"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.result}"


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when runtime dependencies or poppler executables are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass(frozen=True)
class InvalidConfigurationError(ConfigurationError):
    """Raised when render or text options are contradictory or out of range."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Invalid configuration: {self.message}"


@dataclass(frozen=True)
class NoPasswordForEncryptedPDFError(ConfigurationError):
    """Raised when an encrypted document is processed without a password."""

    def __str__(self) -> str:
        """Return error message payload."""
        return "The PDF is encrypted and no password was provided"


@dataclass(frozen=True)
class SpawnFailureError(ToolExecutionError):
    """Raised when an external executable cannot be started."""

    executable: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        message = f"Failed to spawn '{self.executable}'"
        return f"{message}: {self.exc}" if self.exc else message


@dataclass(frozen=True)
class IoFailureError(ToolExecutionError):
    """Raised when piping data to or from an external process fails."""

    executable: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        message = f"I/O failure while talking to '{self.executable}'"
        return f"{message}: {self.exc}" if self.exc else message


@dataclass(frozen=True)
class UnableToExtractPageCountError(ToolOutputError):
    """Raised when the info report carries no parsable `Pages:` line."""

    def __str__(self) -> str:
        """Return error message payload."""
        return "Unable to extract page count from pdfinfo output"


@dataclass(frozen=True)
class UnableToExtractEncryptionStatusError(ToolOutputError):
    """Raised when the info report carries no parsable `Encrypted:` line."""

    def __str__(self) -> str:
        """Return error message payload."""
        return "Unable to extract encryption status from pdfinfo output"


@dataclass(frozen=True)
class DecodeFailureError(ToolOutputError):
    """Raised when rendered bytes are not a valid image."""

    image_format: str
    page: int | None = None
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        target = f"page {self.page}" if self.page is not None else "rendered output"
        message = f"Failed to decode {self.image_format} image for {target}"
        return f"{message}: {self.exc}" if self.exc else message
