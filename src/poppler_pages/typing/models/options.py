"""Render and text extraction options."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, model_validator

from poppler_pages.exceptions import InvalidConfigurationError
from poppler_pages.typing.enums import PasswordKind, RasterFormat, RenderBackend


class Resolution(BaseModel):
    """Render resolution in dots per inch."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int = Field(gt=0)
    y: int = Field(gt=0)

    @classmethod
    def uniform(cls, dpi: int) -> Resolution:
        """Build a resolution with the same DPI on both axes."""
        return cls(x=dpi, y=dpi)

    def to_cli_args(self) -> list[str]:
        """Return renderer resolution flags."""
        if self.x == self.y:
            return ["-r", str(self.x)]
        return ["-rx", str(self.x), "-ry", str(self.y)]


class ScaleDimensions(BaseModel):
    """Scale output to explicit pixel dimensions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)


class Crop(BaseModel):
    """Crop rectangle in output pixels."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int = Field(ge=0)
    y: int = Field(ge=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def to_cli_args(self) -> list[str]:
        """Return renderer crop flags."""
        return ["-x", str(self.x), "-y", str(self.y), "-W", str(self.width), "-H", str(self.height)]


class Password(BaseModel):
    """Owner or user password for an encrypted PDF."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: PasswordKind = PasswordKind.USER
    value: SecretStr

    @classmethod
    def owner(cls, value: str) -> Password:
        """Build an owner password."""
        return cls(kind=PasswordKind.OWNER, value=SecretStr(value))

    @classmethod
    def user(cls, value: str) -> Password:
        """Build a user password."""
        return cls(kind=PasswordKind.USER, value=SecretStr(value))

    def to_cli_args(self) -> list[str]:
        """Return the poppler password flag and value."""
        return [self.kind.cli_flag, self.value.get_secret_value()]


class RenderOptions(BaseModel):
    """Options controlling how a page is rendered to an image."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    resolution: Resolution | None = None
    scale_to: int | None = Field(default=None, gt=0)
    scale_dimensions: ScaleDimensions | None = None
    crop: Crop | None = None
    greyscale: bool = False
    password: Password | None = None
    backend: RenderBackend = RenderBackend.PDFTOPPM
    image_format: RasterFormat = RasterFormat.JPEG

    @model_validator(mode="after")
    def _check_single_scale_mode(self) -> Self:
        if self.scale_to is not None and self.scale_dimensions is not None:
            raise ValueError("scale_to and scale_dimensions are mutually exclusive")
        return self

    def to_cli_args(self) -> list[str]:
        """Serialize options into renderer flags.

        Returns:
            list[str]: Flags shared by `pdftoppm` and `pdftocairo`.
        """
        args: list[str] = []
        if self.resolution is not None:
            args.extend(self.resolution.to_cli_args())
        if self.scale_to is not None:
            args.extend(["-scale-to", str(self.scale_to)])
        if self.scale_dimensions is not None:
            args.extend(
                [
                    "-scale-to-x",
                    str(self.scale_dimensions.width),
                    "-scale-to-y",
                    str(self.scale_dimensions.height),
                ],
            )
        if self.crop is not None:
            args.extend(self.crop.to_cli_args())
        if self.greyscale:
            args.append("-gray")
        if self.password is not None:
            args.extend(self.password.to_cli_args())
        return args


class TextOptions(BaseModel):
    """Options controlling text extraction."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    password: Password | None = None
    layout: bool = False

    def to_cli_args(self) -> list[str]:
        """Serialize options into `pdftotext` flags."""
        args = ["-enc", "UTF-8"]
        if self.layout:
            args.append("-layout")
        if self.password is not None:
            args.extend(self.password.to_cli_args())
        return args


def build_render_options(**kwargs: Any) -> RenderOptions:
    """Build render options, reporting any invalid combination uniformly.

    Args:
        **kwargs: `RenderOptions` fields.

    Raises:
        InvalidConfigurationError: If the options fail validation.

    Returns:
        RenderOptions: Validated options.
    """
    try:
        return RenderOptions(**kwargs)
    except ValidationError as exc:
        details = "; ".join(_format_error(error) for error in exc.errors())
        raise InvalidConfigurationError(message=details) from exc


def build_text_options(**kwargs: Any) -> TextOptions:
    """Build text options, reporting validation failures as `InvalidConfigurationError`."""
    try:
        return TextOptions(**kwargs)
    except ValidationError as exc:
        details = "; ".join(_format_error(error) for error in exc.errors())
        raise InvalidConfigurationError(message=details) from exc


def _format_error(error: Any) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "invalid value"))
    return f"{location}: {message}" if location else message
