"""Document metadata extraction through `pdfinfo`."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from poppler_pages.exceptions import UnableToExtractEncryptionStatusError, UnableToExtractPageCountError
from poppler_pages.logging import get_logger
from poppler_pages.typing.enums import PopplerTool
from poppler_pages.typing.models import DocumentInfo

if TYPE_CHECKING:
    from poppler_pages.process import ProcessInvoker
    from poppler_pages.typing.models import Password

logger = get_logger(__name__)

_PAGES_LABEL = "Pages:"
_ENCRYPTED_LABEL = "Encrypted:"
_PERMISSIONS_SUFFIX = re.compile(r"\s*\(.*\)\s*$")
_UNSIGNED = re.compile(r"[0-9]+")


def _info_args(password: Password | None) -> list[str]:
    if password is None:
        return ["-"]
    return [*password.to_cli_args(), "-"]


def _find_line(lines: list[str], label: str) -> str | None:
    """Return the first line starting with `label`, if any."""
    return next((line for line in lines if line.startswith(label)), None)


def _parse_page_count(line: str | None) -> int:
    """Parse the trailing token of a `Pages:` line.

    Raises:
        UnableToExtractPageCountError: If the line is missing or its value is not an unsigned integer.
    """
    if line is None:
        raise UnableToExtractPageCountError
    tokens = line.split()
    if len(tokens) < 2 or not _UNSIGNED.fullmatch(tokens[-1]):  # noqa: PLR2004
        raise UnableToExtractPageCountError
    return int(tokens[-1])


def _parse_encryption_status(line: str | None) -> bool:
    """Parse the status token of an `Encrypted:` line.

    Raises:
        UnableToExtractEncryptionStatusError: If the line is missing or the status is not `yes`/`no`.
    """
    if line is None:
        raise UnableToExtractEncryptionStatusError
    value = _PERMISSIONS_SUFFIX.sub("", line.removeprefix(_ENCRYPTED_LABEL))
    tokens = value.split()
    if not tokens:
        raise UnableToExtractEncryptionStatusError
    match tokens[-1]:
        case "yes":
            return True
        case "no":
            return False
        case _:
            raise UnableToExtractEncryptionStatusError


def parse_info_report(report: bytes) -> DocumentInfo:
    """Parse a `pdfinfo` report into document facts.

    Lines are matched by label in any order; the first match of each label
    wins.

    Args:
        report: Raw `pdfinfo` stdout.

    Raises:
        UnableToExtractPageCountError: If no usable `Pages:` line exists.
        UnableToExtractEncryptionStatusError: If no usable `Encrypted:` line exists.

    Returns:
        DocumentInfo: Parsed page count and encryption flag.
    """
    lines = [line.rstrip() for line in report.decode("utf-8", errors="replace").split("\n")]
    page_count = _parse_page_count(_find_line(lines, _PAGES_LABEL))
    is_encrypted = _parse_encryption_status(_find_line(lines, _ENCRYPTED_LABEL))
    return DocumentInfo(page_count=page_count, is_encrypted=is_encrypted)


async def read_document_info(
    invoker: ProcessInvoker,
    data: bytes,
    password: Password | None = None,
) -> DocumentInfo:
    """Run `pdfinfo` over document bytes and parse its report.

    Args:
        invoker: Process invoker used to run `pdfinfo`.
        data: Raw PDF bytes.
        password: Password unlocking the document. A document locked with a user
            password yields no report without it.

    Returns:
        DocumentInfo: Page count and encryption flag.
    """
    report = await invoker.invoke(PopplerTool.PDFINFO, _info_args(password), data)
    info = parse_info_report(report)
    logger.debug(
        "Read document info",
        extra={"page_count": info.page_count, "is_encrypted": info.is_encrypted},
    )
    return info
