"""Pytest marker auto-assignment by folder and shared fakes."""

from __future__ import annotations

import asyncio
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from PIL import Image

from poppler_pages import logger
from poppler_pages.process import ProcessInvoker
from poppler_pages.typing.models import ProcessResult

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


def make_image_bytes(width: int, height: int = 8, image_format: str = "JPEG") -> bytes:
    """Encode a solid image whose width identifies the page it stands for."""
    buffer = BytesIO()
    Image.new("RGB", (width, height), color=(200, 30, 30)).save(buffer, format=image_format)
    return buffer.getvalue()


def page_from_args(args: Sequence[str]) -> int | None:
    """Return the `-f` page number of a poppler command line."""
    args = list(args)
    if "-f" not in args:
        return None
    return int(args[args.index("-f") + 1])


class FakeRunner:
    """Deterministic `ProcessRunner` recording every spawn."""

    def __init__(
        self,
        respond: Callable[[str, list[str]], bytes],
        *,
        delays: dict[int, float] | None = None,
    ) -> None:
        self._respond = respond
        self._delays = delays or {}
        self.calls: list[tuple[str, list[str], bytes]] = []
        self.completed: list[int | None] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def spawn_count(self) -> int:
        return len(self.calls)

    async def run(self, executable: str, args: Sequence[str], input_data: bytes) -> ProcessResult:
        args = list(args)
        self.calls.append((executable, args, input_data))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            page = page_from_args(args)
            await asyncio.sleep(self._delays.get(page, 0) if page is not None else 0)
            self.completed.append(page)
            return ProcessResult(stdout=self._respond(executable, args))
        finally:
            self.in_flight -= 1


def default_respond(executable: str, args: list[str]) -> bytes:
    """Answer like poppler would for a 10-page unencrypted document."""
    if executable == "pdfinfo":
        return b"Title:          sample\nPages:          10\nEncrypted:      no\n"
    page = page_from_args(args)
    if executable == "pdftotext":
        return f"text of page {page}\f".encode() if page is not None else b"whole document\f"
    image_format = "PNG" if "-png" in args else "JPEG"
    return make_image_bytes(page * 10 if page else 5, image_format=image_format)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(default_respond)


@pytest.fixture
def invoker(fake_runner: FakeRunner) -> ProcessInvoker:
    return ProcessInvoker(runner=fake_runner, resolver=lambda tool: tool)
