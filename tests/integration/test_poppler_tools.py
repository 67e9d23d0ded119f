from __future__ import annotations

import shutil
from io import BytesIO

import pytest
from PIL import Image

from poppler_pages.converter import PdfConverter
from poppler_pages.process import ProcessInvoker
from poppler_pages.typing.enums import RasterFormat, RenderBackend
from poppler_pages.typing.models import AllPages, PageRange, Resolution, SpecificPages, build_render_options

pytestmark = pytest.mark.skipif(
    any(shutil.which(tool) is None for tool in ("pdfinfo", "pdftoppm", "pdftocairo", "pdftotext")),
    reason="poppler tools are not installed",
)


def _make_pdf(page_count: int) -> bytes:
    pages = [Image.new("RGB", (200 + 20 * index, 100), color=(255, 255, 255)) for index in range(page_count)]
    buffer = BytesIO()
    pages[0].save(buffer, format="PDF", save_all=True, append_images=pages[1:], resolution=72.0)
    return buffer.getvalue()


@pytest.fixture
def converter() -> PdfConverter:
    return PdfConverter(ProcessInvoker(), max_concurrency=2)


def test_read_info_reports_page_count(converter: PdfConverter) -> None:
    info = converter.read_info(_make_pdf(3))

    assert info.page_count == 3
    assert info.is_encrypted is False


def test_render_pages_keeps_requested_order(converter: PdfConverter) -> None:
    data = _make_pdf(3)
    options = build_render_options(resolution=Resolution.uniform(72))

    images = converter.render_pages(data, SpecificPages(pages=(3, 1)), options)

    assert [image.size[0] for image in images] == [240, 200]


def test_render_pages_with_cairo_backend(converter: PdfConverter) -> None:
    options = build_render_options(
        resolution=Resolution.uniform(72),
        backend=RenderBackend.PDFTOCAIRO,
        image_format=RasterFormat.PNG,
    )

    images = converter.render_pages(_make_pdf(2), AllPages(), options)

    assert len(images) == 2
    assert all(image.format == "PNG" for image in images)


def test_range_beyond_document_is_clamped(converter: PdfConverter) -> None:
    images = converter.render_pages(_make_pdf(2), PageRange(low=0, high=10))

    assert len(images) == 2


def test_extract_text_returns_one_string_per_page(converter: PdfConverter) -> None:
    data = _make_pdf(2)

    texts = converter.extract_pages_text(data, AllPages())
    whole = converter.extract_all_text(data)

    assert len(texts) == 2
    assert isinstance(whole, str)
