"""Text extraction through `pdftotext`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from poppler_pages.async_runner import gather_ordered
from poppler_pages.logging import get_logger
from poppler_pages.page_selection import resolve_pages
from poppler_pages.render import ensure_password_for
from poppler_pages.typing.enums import PopplerTool

if TYPE_CHECKING:
    from poppler_pages.process import ProcessInvoker
    from poppler_pages.typing.models import DocumentInfo, PageSelector, TextOptions

logger = get_logger(__name__)


def build_text_args(options: TextOptions, page: int | None = None) -> list[str]:
    """Build the `pdftotext` command line.

    Args:
        options: Text options.
        page: 1-based page number, or `None` for the whole document.

    Returns:
        list[str]: Arguments, excluding the executable.
    """
    args = options.to_cli_args()
    if page is not None:
        args.extend(["-f", str(page), "-l", str(page)])
    args.extend(["-", "-"])
    return args


async def _extract(invoker: ProcessInvoker, data: bytes, options: TextOptions, page: int | None) -> str:
    output = await invoker.invoke(PopplerTool.PDFTOTEXT, build_text_args(options, page), data)
    return output.decode("utf-8", errors="replace")


async def extract_page_text(
    invoker: ProcessInvoker,
    data: bytes,
    info: DocumentInfo,
    page: int,
    options: TextOptions,
) -> str:
    """Extract the text of one page, without bounds checks.

    Raises:
        NoPasswordForEncryptedPDFError: If the document is encrypted and no password is set.
    """
    ensure_password_for(info, options.password)
    return await _extract(invoker, data, options, page)


async def extract_pages_text(
    invoker: ProcessInvoker,
    data: bytes,
    info: DocumentInfo,
    selector: PageSelector,
    options: TextOptions,
    *,
    max_concurrency: int,
) -> list[str]:
    """Extract text per selected page, keeping selector order.

    Args:
        invoker: Process invoker.
        data: Raw PDF bytes.
        info: Document facts.
        selector: Pages to extract.
        options: Text options.
        max_concurrency: Maximum `pdftotext` processes running at once.

    Raises:
        NoPasswordForEncryptedPDFError: If the document is encrypted and no password is set.

    Returns:
        list[str]: One string per valid selected page.
    """
    ensure_password_for(info, options.password)
    pages = resolve_pages(selector, info.page_count)
    if not pages:
        return []

    texts = await gather_ordered(
        [lambda page=page: _extract(invoker, data, options, page) for page in pages],
        limit=max_concurrency,
    )
    logger.info("PDF text extracted", extra={"pages": len(texts)})
    return texts


async def extract_all_text(
    invoker: ProcessInvoker,
    data: bytes,
    info: DocumentInfo,
    options: TextOptions,
) -> str:
    """Extract the text of the whole document with a single `pdftotext` run.

    Raises:
        NoPasswordForEncryptedPDFError: If the document is encrypted and no password is set.
    """
    ensure_password_for(info, options.password)
    return await _extract(invoker, data, options, None)
