"""Tests for the loguru-backed reporter."""

import pytest
from loguru import logger

from html_creator.logging_config import configure_logging
from html_creator.protocols import ReporterProtocol
from html_creator.reporter import LoguruReporter, Severity, parse_severity


@pytest.fixture
def records() -> list[str]:
    """Capture loguru output as 'LEVEL|message' strings."""
    captured: list[str] = []
    logger.remove()
    logger.add(lambda m: captured.append(m.rstrip("\n")), format="{level.name}|{message}")
    return captured


def test_reporter_satisfies_protocol() -> None:
    assert isinstance(LoguruReporter(), ReporterProtocol)


@pytest.mark.parametrize(
    ("kind", "level"),
    [("default", "INFO"), ("success", "SUCCESS"), ("error", "ERROR")],
)
def test_report_maps_severity_to_level(records: list[str], kind: str, level: str) -> None:
    LoguruReporter().report(kind, "hello")

    assert records == [f"{level}|HTML-Creator >> hello"]


def test_report_unknown_kind_falls_back_to_default(records: list[str]) -> None:
    LoguruReporter().report("shouting", "hello")

    assert records == ["INFO|HTML-Creator >> hello"]


def test_report_accepts_severity_members(records: list[str]) -> None:
    LoguruReporter(prefix="").report(Severity.ERROR, "{braces} stay")

    assert records == ["ERROR|{braces} stay"]


def test_parse_severity() -> None:
    assert parse_severity("success") is Severity.SUCCESS
    assert parse_severity(Severity.ERROR) is Severity.ERROR
    assert parse_severity("nope") is Severity.DEFAULT


def test_configure_logging_verbose_enables_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True)
    logger.debug("debug line")

    assert "debug line" in capsys.readouterr().err


def test_configure_logging_default_hides_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()
    logger.debug("debug line")

    assert "debug line" not in capsys.readouterr().err


def test_configure_logging_prefixes_level_name(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()
    LoguruReporter().report("success", "done")

    assert capsys.readouterr().err == "SUCCESS  HTML-Creator >> done\n"
