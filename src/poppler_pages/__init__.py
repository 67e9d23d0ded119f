"""poppler-pages package."""

from poppler_pages.async_runner import run_async
from poppler_pages.converter import PdfConverter
from poppler_pages.exceptions import (
    AsyncExecutionError,
    ConfigurationError,
    DecodeFailureError,
    DependencyError,
    InvalidConfigurationError,
    IoFailureError,
    NoPasswordForEncryptedPDFError,
    PackageError,
    SettingsError,
    SpawnFailureError,
    ToolExecutionError,
    ToolOutputError,
    UnableToExtractEncryptionStatusError,
    UnableToExtractPageCountError,
)
from poppler_pages.logging import configure_logging, get_logger
from poppler_pages.page_selection import parse_page_selector, resolve_pages
from poppler_pages.settings import Settings, get_settings
from poppler_pages.typing.enums import PasswordKind, RasterFormat, RenderBackend
from poppler_pages.typing.models import (
    AllPages,
    Crop,
    DocumentInfo,
    PageRange,
    Password,
    RenderOptions,
    Resolution,
    ScaleDimensions,
    SpecificPages,
    TextOptions,
    build_render_options,
    build_text_options,
)

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("poppler_pages")

__all__ = [
    "AllPages",
    "AsyncExecutionError",
    "ConfigurationError",
    "Crop",
    "DecodeFailureError",
    "DependencyError",
    "DocumentInfo",
    "InvalidConfigurationError",
    "IoFailureError",
    "NoPasswordForEncryptedPDFError",
    "PackageError",
    "PageRange",
    "Password",
    "PasswordKind",
    "PdfConverter",
    "RasterFormat",
    "RenderBackend",
    "RenderOptions",
    "Resolution",
    "ScaleDimensions",
    "Settings",
    "SettingsError",
    "SpawnFailureError",
    "SpecificPages",
    "TextOptions",
    "ToolExecutionError",
    "ToolOutputError",
    "UnableToExtractEncryptionStatusError",
    "UnableToExtractPageCountError",
    "__version__",
    "build_render_options",
    "build_text_options",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
    "parse_page_selector",
    "resolve_pages",
    "run_async",
]
