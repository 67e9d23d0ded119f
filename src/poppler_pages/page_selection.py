"""Page selector resolution and parsing."""

from __future__ import annotations

from poppler_pages.exceptions import InvalidConfigurationError
from poppler_pages.typing.models import AllPages, PageRange, PageSelector, SpecificPages


def resolve_pages(selector: PageSelector, page_count: int) -> list[int]:
    """Resolve a selector into concrete 1-based page numbers.

    Out-of-range pages are dropped silently. `SpecificPages` keeps caller
    order and duplicates; ranges come out ascending.

    Args:
        selector: Page selector.
        page_count: Number of pages in the document.

    Returns:
        list[int]: Page numbers to process, possibly empty.
    """
    match selector:
        case AllPages():
            return list(range(1, page_count + 1))
        case PageRange(low=low, high=high):
            return list(range(max(low, 1), min(high, page_count) + 1))
        case SpecificPages(pages=pages):
            return [page for page in pages if 1 <= page <= page_count]
    raise TypeError(f"Unsupported page selector: {selector!r}")  # noqa: TRY003


def parse_page_selector(value: str) -> PageSelector:
    """Parse a user-facing page selector expression.

    Accepted forms are `all`, `N-M` (inclusive range) and a comma-separated
    list such as `3,1,3`. A single number selects that page.

    Args:
        value: Selector expression.

    Raises:
        InvalidConfigurationError: If the expression cannot be parsed.

    Returns:
        PageSelector: Parsed selector.
    """
    text = value.strip().lower()
    if text in {"", "all"}:
        return AllPages()

    try:
        if "-" in text and "," not in text:
            low, _, high = text.partition("-")
            return PageRange(low=int(low), high=int(high))
        return SpecificPages(pages=tuple(int(part) for part in text.split(",") if part.strip()))
    except ValueError as exc:
        raise InvalidConfigurationError(message=f"invalid page selector '{value}'") from exc
