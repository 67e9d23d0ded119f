"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value.lower())
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class PopplerTool(_EnumMixin):
    """External poppler executables driven by the package."""

    PDFINFO = "pdfinfo"
    PDFTOPPM = "pdftoppm"
    PDFTOCAIRO = "pdftocairo"
    PDFTOTEXT = "pdftotext"


class RenderBackend(_EnumMixin):
    """Rendering executable used for page images."""

    PDFTOPPM = "pdftoppm"
    PDFTOCAIRO = "pdftocairo"

    @property
    def tool(self) -> PopplerTool:
        """Return the poppler tool backing this renderer."""
        return PopplerTool(self.value)


class RasterFormat(_EnumMixin):
    """Raster format requested from the renderer and used to decode its output."""

    JPEG = "jpeg"
    PNG = "png"

    @property
    def cli_flag(self) -> str:
        """Return the renderer flag selecting this format."""
        return f"-{self.value}"

    @property
    def pillow_format(self) -> str:
        """Return the Pillow format name used for decoding."""
        return self.value.upper()

    @property
    def extension(self) -> str:
        """Return the conventional file extension."""
        return "jpg" if self is RasterFormat.JPEG else self.value


class PasswordKind(_EnumMixin):
    """Which PDF password is supplied."""

    OWNER = "owner"  # noqa: S105
    USER = "user"  # noqa: S105

    @property
    def cli_flag(self) -> str:
        """Return the poppler flag carrying this password."""
        return "-opw" if self is PasswordKind.OWNER else "-upw"
