"""High-level converter combining info lookup, page selection and rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from poppler_pages.async_runner import run_async
from poppler_pages.info import read_document_info
from poppler_pages.process import ProcessInvoker, make_executable_resolver
from poppler_pages.render import render_page, render_pages
from poppler_pages.settings import get_settings
from poppler_pages.text import extract_all_text, extract_page_text, extract_pages_text
from poppler_pages.typing.models import AllPages, RenderOptions, TextOptions

if TYPE_CHECKING:
    from PIL import Image

    from poppler_pages.settings import Settings
    from poppler_pages.typing.models import DocumentInfo, PageSelector, Password


class PdfConverter:
    """Converts PDF bytes into page images or text using poppler tools.

    Async methods are prefixed with `a`; the plain methods run them through
    `run_async` for synchronous callers.
    """

    def __init__(self, invoker: ProcessInvoker | None = None, *, max_concurrency: int | None = None) -> None:
        """Initialize the converter.

        Args:
            invoker: Process invoker. Defaults to one built from settings.
            max_concurrency: Process concurrency limit. Defaults to the settings value.
        """
        if invoker is None or max_concurrency is None:
            settings = get_settings()
            if invoker is None:
                invoker = ProcessInvoker(resolver=make_executable_resolver(settings.poppler_path))
            if max_concurrency is None:
                max_concurrency = settings.effective_concurrency
        self._invoker = invoker
        self._max_concurrency = max_concurrency

    @classmethod
    def from_settings(cls, settings: Settings) -> PdfConverter:
        """Build a converter honouring `POPPLER_PATH` and the concurrency limit."""
        invoker = ProcessInvoker(resolver=make_executable_resolver(settings.poppler_path))
        return cls(invoker, max_concurrency=settings.effective_concurrency)

    @property
    def max_concurrency(self) -> int:
        """Return the process concurrency limit."""
        return self._max_concurrency

    async def aread_info(self, data: bytes, password: Password | None = None) -> DocumentInfo:
        """Return page count and encryption status of `data`, unlocking it with `password`."""
        return await read_document_info(self._invoker, data, password)

    async def arender_page(
        self,
        data: bytes,
        page: int,
        options: RenderOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> Image.Image:
        """Render one page, reading document info first when not supplied."""
        options = options or RenderOptions()
        if info is None:
            info = await self.aread_info(data, options.password)
        return await render_page(self._invoker, data, info, page, options)

    async def arender_pages(
        self,
        data: bytes,
        selector: PageSelector | None = None,
        options: RenderOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> list[Image.Image]:
        """Render selected pages (all by default) in selector order."""
        options = options or RenderOptions()
        if info is None:
            info = await self.aread_info(data, options.password)
        return await render_pages(
            self._invoker,
            data,
            info,
            selector or AllPages(),
            options,
            max_concurrency=self._max_concurrency,
        )

    async def aextract_page_text(
        self,
        data: bytes,
        page: int,
        options: TextOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> str:
        """Extract text from one page."""
        options = options or TextOptions()
        if info is None:
            info = await self.aread_info(data, options.password)
        return await extract_page_text(self._invoker, data, info, page, options)

    async def aextract_pages_text(
        self,
        data: bytes,
        selector: PageSelector | None = None,
        options: TextOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> list[str]:
        """Extract text per selected page (all by default)."""
        options = options or TextOptions()
        if info is None:
            info = await self.aread_info(data, options.password)
        return await extract_pages_text(
            self._invoker,
            data,
            info,
            selector or AllPages(),
            options,
            max_concurrency=self._max_concurrency,
        )

    async def aextract_all_text(
        self,
        data: bytes,
        options: TextOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> str:
        """Extract the whole document text in one `pdftotext` run."""
        options = options or TextOptions()
        if info is None:
            info = await self.aread_info(data, options.password)
        return await extract_all_text(self._invoker, data, info, options)

    def read_info(self, data: bytes, password: Password | None = None) -> DocumentInfo:
        """Sync variant of `aread_info`."""
        return run_async(self.aread_info(data, password))

    def render_page(
        self,
        data: bytes,
        page: int,
        options: RenderOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> Image.Image:
        """Sync variant of `arender_page`."""
        return run_async(self.arender_page(data, page, options, info=info))

    def render_pages(
        self,
        data: bytes,
        selector: PageSelector | None = None,
        options: RenderOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> list[Image.Image]:
        """Sync variant of `arender_pages`."""
        return run_async(self.arender_pages(data, selector, options, info=info))

    def extract_page_text(
        self,
        data: bytes,
        page: int,
        options: TextOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> str:
        """Sync variant of `aextract_page_text`."""
        return run_async(self.aextract_page_text(data, page, options, info=info))

    def extract_pages_text(
        self,
        data: bytes,
        selector: PageSelector | None = None,
        options: TextOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> list[str]:
        """Sync variant of `aextract_pages_text`."""
        return run_async(self.aextract_pages_text(data, selector, options, info=info))

    def extract_all_text(
        self,
        data: bytes,
        options: TextOptions | None = None,
        *,
        info: DocumentInfo | None = None,
    ) -> str:
        """Sync variant of `aextract_all_text`."""
        return run_async(self.aextract_all_text(data, options, info=info))
