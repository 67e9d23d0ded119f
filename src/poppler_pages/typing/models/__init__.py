"""Core domain model exports."""

from poppler_pages.typing.models.document import DocumentInfo, ProcessResult
from poppler_pages.typing.models.options import (
    Crop,
    Password,
    RenderOptions,
    Resolution,
    ScaleDimensions,
    TextOptions,
    build_render_options,
    build_text_options,
)
from poppler_pages.typing.models.page_selection import AllPages, PageRange, PageSelector, SpecificPages

__all__ = [
    "AllPages",
    "Crop",
    "DocumentInfo",
    "PageRange",
    "PageSelector",
    "Password",
    "ProcessResult",
    "RenderOptions",
    "Resolution",
    "ScaleDimensions",
    "SpecificPages",
    "TextOptions",
    "build_render_options",
    "build_text_options",
]
