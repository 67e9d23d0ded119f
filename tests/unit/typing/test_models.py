from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from poppler_pages.typing.models import AllPages, DocumentInfo, PageRange, PageSelector, SpecificPages


def test_document_info_is_frozen() -> None:
    info = DocumentInfo(page_count=3, is_encrypted=False)
    with pytest.raises(ValidationError):
        info.page_count = 4  # type: ignore[misc]


def test_document_info_rejects_negative_page_count() -> None:
    with pytest.raises(ValidationError):
        DocumentInfo(page_count=-1, is_encrypted=False)


def test_page_selector_is_discriminated_on_kind() -> None:
    adapter = TypeAdapter(PageSelector)

    assert adapter.validate_python({"kind": "all"}) == AllPages()
    assert adapter.validate_python({"kind": "range", "low": 2, "high": 4}) == PageRange(low=2, high=4)
    assert adapter.validate_python({"kind": "specific", "pages": [3, 1, 3]}) == SpecificPages(pages=(3, 1, 3))


def test_specific_pages_reject_negative_numbers() -> None:
    with pytest.raises(ValidationError):
        SpecificPages(pages=(1, -2))
