from __future__ import annotations

from poppler_pages import logger as package_logger
from poppler_pages.logging import configure_logging, get_logger
from poppler_pages.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_json_logs_carry_message_key(capsys) -> None:
    configure_logging(settings=Settings(log_json=True, log_level="INFO"), force=True)
    get_logger("tests.json").info("rendered", pages=3)

    captured = capsys.readouterr()
    assert '"message": "rendered"' in captured.err
    assert '"pages": 3' in captured.err


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))


def test_password_arguments_are_masked(capsys) -> None:
    configure_logging(settings=Settings(log_json=True, log_level="DEBUG"), force=True)
    get_logger("tests.redact").debug(
        "Spawning poppler process",
        extra={"args": ["-r", "150", "-opw", "s3cret", "-f", "1"]},
    )

    captured = capsys.readouterr()
    assert "s3cret" not in captured.err
    assert '"-opw", "***", "-f"' in captured.err
    configure_logging(settings=Settings(log_json=True, log_level="INFO"), force=True)
