"""Diagnostic reporter backed by loguru."""

from enum import Enum

from loguru import logger

from html_creator.config import LOG_PREFIX


class Severity(str, Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    ERROR = "error"


_LEVELS: dict[Severity, str] = {
    Severity.DEFAULT: "INFO",
    Severity.SUCCESS: "SUCCESS",
    Severity.ERROR: "ERROR",
}


def parse_severity(kind: str) -> Severity:
    """Map a severity name to a Severity, falling back to DEFAULT for unknown names."""
    try:
        return Severity(kind)
    except ValueError:
        return Severity.DEFAULT


class LoguruReporter:
    """Report diagnostics through loguru, prefixed with the tool name."""

    def __init__(self, prefix: str = LOG_PREFIX) -> None:
        self.prefix = prefix

    def report(self, kind: str, message: str) -> None:
        level = _LEVELS[parse_severity(kind)]
        logger.log(level, "{}{}", self.prefix, message)
