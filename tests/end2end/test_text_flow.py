from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import pytest

from poppler_pages.cli import main
from poppler_pages.settings import Settings

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="fake tools are POSIX shell scripts")

_PDFINFO = """#!/bin/sh
cat > /dev/null
printf 'Producer:       fake\\nPages:          3\\nEncrypted:      no\\n'
"""

_PDFTOTEXT = """#!/bin/sh
cat > /dev/null
page=all
while [ $# -gt 0 ]; do
  if [ "$1" = "-f" ]; then page=$2; fi
  shift
done
printf 'text of page %s\\f' "$page"
"""


def _install_tool(directory: Path, name: str, script: str) -> None:
    tool = directory / name
    tool.write_text(script, encoding="utf-8")
    tool.chmod(0o755)


@pytest.fixture
def poppler_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    _install_tool(directory, "pdfinfo", _PDFINFO)
    _install_tool(directory, "pdftotext", _PDFTOTEXT)
    return directory


def test_text_command_runs_tools_from_poppler_path(monkeypatch, tmp_path: Path, poppler_dir: Path, capsys) -> None:
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF-1.4 fake")
    monkeypatch.setattr(
        "poppler_pages.cli.get_settings",
        lambda: Settings(poppler_path=str(poppler_dir), max_concurrency=2, log_json=False),
    )

    assert main(["text", "--input", str(pdf), "--pages", "3,1,7"]) == 0
    assert capsys.readouterr().out == "text of page 3\ftext of page 1\f"


def test_text_command_extracts_whole_document(monkeypatch, tmp_path: Path, poppler_dir: Path) -> None:
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF-1.4 fake")
    output = tmp_path / "doc.txt"
    monkeypatch.setattr(
        "poppler_pages.cli.get_settings",
        lambda: Settings(poppler_path=str(poppler_dir), log_json=False),
    )

    assert main(["text", "--input", str(pdf), "--output", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == "text of page all\f"


def test_missing_tool_fails_before_running(monkeypatch, tmp_path: Path) -> None:
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF-1.4 fake")
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setattr(
        "poppler_pages.cli.get_settings",
        lambda: Settings(poppler_path=str(empty), log_json=False),
    )

    assert main(["info", "--input", str(pdf)]) == 1
