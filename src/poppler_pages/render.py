"""Page rendering through `pdftoppm` / `pdftocairo`."""

from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING

from PIL import Image, UnidentifiedImageError

from poppler_pages.async_runner import gather_ordered
from poppler_pages.exceptions import DecodeFailureError, NoPasswordForEncryptedPDFError
from poppler_pages.logging import get_logger
from poppler_pages.page_selection import resolve_pages
from poppler_pages.typing.enums import RasterFormat, RenderBackend

if TYPE_CHECKING:
    from poppler_pages.process import ProcessInvoker
    from poppler_pages.typing.models import DocumentInfo, PageSelector, Password, RenderOptions

logger = get_logger(__name__)


def ensure_password_for(info: DocumentInfo, password: Password | None) -> None:
    """Reject encrypted documents processed without a password.

    Raises:
        NoPasswordForEncryptedPDFError: If `info` is encrypted and `password` is missing.
    """
    if info.is_encrypted and password is None:
        raise NoPasswordForEncryptedPDFError


def build_render_args(options: RenderOptions, page: int) -> list[str]:
    """Build the renderer command line for one page.

    Args:
        options: Render options.
        page: 1-based page number.

    Returns:
        list[str]: Arguments, excluding the executable.
    """
    args = [
        *options.to_cli_args(),
        options.image_format.cli_flag,
        "-singlefile",
        "-f",
        str(page),
        "-l",
        str(page),
    ]
    if options.backend is RenderBackend.PDFTOCAIRO:
        # pdftocairo needs explicit stdin/stdout file arguments.
        args.extend(["-", "-"])
    return args


def decode_image(data: bytes, image_format: RasterFormat, *, page: int | None = None) -> Image.Image:
    """Decode rendered bytes into a fully loaded Pillow image.

    Args:
        data: Renderer stdout.
        image_format: Format the renderer was asked to produce.
        page: Page number, for error reporting.

    Raises:
        DecodeFailureError: If the bytes are empty, truncated, oversized or not of `image_format`.

    Returns:
        Image.Image: Decoded image.
    """
    if not data:
        raise DecodeFailureError(image_format=image_format.value, page=page)
    try:
        image = Image.open(BytesIO(data), formats=[image_format.pillow_format])
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as exc:
        raise DecodeFailureError(image_format=image_format.value, page=page, exc=exc) from exc
    return image


async def _render(invoker: ProcessInvoker, data: bytes, page: int, options: RenderOptions) -> Image.Image:
    output = await invoker.invoke(options.backend.tool, build_render_args(options, page), data)
    return decode_image(output, options.image_format, page=page)


async def render_page(
    invoker: ProcessInvoker,
    data: bytes,
    info: DocumentInfo,
    page: int,
    options: RenderOptions,
) -> Image.Image:
    """Render one page of a document.

    The page number is not checked against `info.page_count`.

    Args:
        invoker: Process invoker.
        data: Raw PDF bytes.
        info: Document facts.
        page: 1-based page number.
        options: Render options.

    Raises:
        NoPasswordForEncryptedPDFError: If the document is encrypted and no password is set.

    Returns:
        Image.Image: Rendered page.
    """
    ensure_password_for(info, options.password)
    return await _render(invoker, data, page, options)


async def render_pages(
    invoker: ProcessInvoker,
    data: bytes,
    info: DocumentInfo,
    selector: PageSelector,
    options: RenderOptions,
    *,
    max_concurrency: int,
) -> list[Image.Image]:
    """Render the selected pages concurrently, keeping selector order.

    Any page failure fails the whole call.

    Args:
        invoker: Process invoker.
        data: Raw PDF bytes.
        info: Document facts.
        selector: Pages to render.
        options: Render options.
        max_concurrency: Maximum renderer processes running at once.

    Raises:
        NoPasswordForEncryptedPDFError: If the document is encrypted and no password is set.

    Returns:
        list[Image.Image]: One image per valid selected page.
    """
    ensure_password_for(info, options.password)
    pages = resolve_pages(selector, info.page_count)
    if not pages:
        return []

    images = await gather_ordered(
        [lambda page=page: _render(invoker, data, page, options) for page in pages],
        limit=max_concurrency,
    )
    logger.info(
        "PDF rendered",
        extra={"pages": len(images), "backend": options.backend.value, "format": options.image_format.value},
    )
    return images
