from __future__ import annotations

import asyncio

import pytest

from poppler_pages.exceptions import UnableToExtractEncryptionStatusError, UnableToExtractPageCountError
from poppler_pages.info import parse_info_report, read_document_info
from poppler_pages.typing.models import DocumentInfo, Password

_REPORT = b"""Producer:       pdfTeX-1.40.25
CreationDate:   Mon Jan  1 10:00:00 2024 UTC
Tagged:         no
Form:           none
Pages:          12
Encrypted:      no
Page size:      612 x 792 pts (letter)
PDF version:    1.5
"""


def test_parse_info_report() -> None:
    assert parse_info_report(_REPORT) == DocumentInfo(page_count=12, is_encrypted=False)


def test_parse_info_report_is_order_independent() -> None:
    report = b"Encrypted: yes\nPages: 3\n"
    assert parse_info_report(report) == DocumentInfo(page_count=3, is_encrypted=True)


def test_parse_info_report_uses_first_matching_line() -> None:
    report = b"Pages: 4\nPages: 9\nEncrypted: no\nEncrypted: yes\n"
    assert parse_info_report(report) == DocumentInfo(page_count=4, is_encrypted=False)


def test_parse_info_report_handles_permission_suffix() -> None:
    report = b"Pages: 2\nEncrypted:      yes (print:yes copy:no change:no addNotes:no algorithm:AES)\n"
    assert parse_info_report(report).is_encrypted is True


def test_parse_info_report_handles_crlf() -> None:
    assert parse_info_report(b"Pages: 7\r\nEncrypted: no\r\n").page_count == 7


def test_missing_pages_line() -> None:
    with pytest.raises(UnableToExtractPageCountError):
        parse_info_report(b"Title: x\nEncrypted: no\n")


@pytest.mark.parametrize("line", [b"Pages:", b"Pages: many", b"Pages: -3", b"Pages: 1.5"])
def test_unparsable_page_count(line: bytes) -> None:
    with pytest.raises(UnableToExtractPageCountError):
        parse_info_report(line + b"\nEncrypted: no\n")


@pytest.mark.parametrize("report", [b"Pages: 3\n", b"Pages: 3\nEncrypted: maybe\n", b"Pages: 3\nEncrypted:\n"])
def test_unparsable_encryption_status(report: bytes) -> None:
    with pytest.raises(UnableToExtractEncryptionStatusError):
        parse_info_report(report)


def test_empty_report_reports_page_count_first() -> None:
    with pytest.raises(UnableToExtractPageCountError):
        parse_info_report(b"")


def test_read_document_info_pipes_document_to_pdfinfo(invoker, fake_runner) -> None:
    info = asyncio.run(read_document_info(invoker, b"%PDF-1.7 data"))

    assert info == DocumentInfo(page_count=10, is_encrypted=False)
    assert fake_runner.calls == [("pdfinfo", ["-"], b"%PDF-1.7 data")]


def test_read_document_info_passes_password_to_pdfinfo(invoker, fake_runner) -> None:
    asyncio.run(read_document_info(invoker, b"pdf", Password.user("pw")))

    assert fake_runner.calls == [("pdfinfo", ["-upw", "pw", "-"], b"pdf")]
