from __future__ import annotations

import pytest

from poppler_pages.dependencies import ensure_cli_dependencies_for_render, ensure_poppler_tools
from poppler_pages.exceptions import DependencyError
from poppler_pages.typing.enums import PopplerTool


def test_ensure_cli_dependencies_for_render_succeeds(monkeypatch) -> None:
    monkeypatch.setattr("poppler_pages.dependencies._is_module_available", lambda module_name: True)
    ensure_cli_dependencies_for_render()


def test_ensure_cli_dependencies_for_render_raises(monkeypatch) -> None:
    monkeypatch.setattr("poppler_pages.dependencies._is_module_available", lambda module_name: False)
    with pytest.raises(DependencyError, match="pillow"):
        ensure_cli_dependencies_for_render()


def test_ensure_poppler_tools_succeeds(monkeypatch) -> None:
    monkeypatch.setattr("poppler_pages.dependencies._is_executable_available", lambda executable: True)
    ensure_poppler_tools(lambda tool: tool, [PopplerTool.PDFINFO, PopplerTool.PDFTOPPM])


def test_ensure_poppler_tools_lists_resolved_missing_executables(monkeypatch) -> None:
    monkeypatch.setattr(
        "poppler_pages.dependencies._is_executable_available",
        lambda executable: executable.endswith("pdfinfo"),
    )

    with pytest.raises(DependencyError, match="/opt/poppler/pdftotext") as exc_info:
        ensure_poppler_tools(lambda tool: f"/opt/poppler/{tool}", [PopplerTool.PDFINFO, PopplerTool.PDFTOTEXT])

    assert exc_info.value.missing_package == ["/opt/poppler/pdftotext"]
