"""Typing-centric domain modules."""

from poppler_pages.typing.enums import PasswordKind, PopplerTool, RasterFormat, RenderBackend
from poppler_pages.typing.models import (
    AllPages,
    Crop,
    DocumentInfo,
    PageRange,
    PageSelector,
    Password,
    ProcessResult,
    RenderOptions,
    Resolution,
    ScaleDimensions,
    SpecificPages,
    TextOptions,
)
from poppler_pages.typing.protocol import ExecutableResolver, ProcessRunner

__all__ = [
    "AllPages",
    "Crop",
    "DocumentInfo",
    "ExecutableResolver",
    "PageRange",
    "PageSelector",
    "Password",
    "PasswordKind",
    "PopplerTool",
    "ProcessResult",
    "ProcessRunner",
    "RasterFormat",
    "RenderBackend",
    "RenderOptions",
    "Resolution",
    "ScaleDimensions",
    "SpecificPages",
    "TextOptions",
]
