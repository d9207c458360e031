"""Structured logging for authkit.

Modules obtain loggers through ``get_logger(__name__)`` and attach
structured data as ``extra={"context": {...}}``. Applications embedding the
library may call ``setup_logging()`` once at startup; without it, records
propagate to whatever handlers the host process configured.

Credential code logs actions and outcomes only. ``SensitiveDataFilter``
redacts anything that still looks like a secret or a bcrypt hash before a
handler writes it.
"""

from __future__ import annotations

import copy
import json
import logging
import re
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import ClassVar

from authkit.core.config import get_settings

_PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SensitiveDataFilter(logging.Filter):
    """Redact secrets and password hashes from log messages.

    Examples:
        >>> logger = logging.getLogger("authkit")
        >>> logger.addFilter(SensitiveDataFilter())
        >>> logger.info("password=Secret123")
        # Logs: "password: [REDACTED]"
    """

    SENSITIVE_KEYS: ClassVar[tuple[str, ...]] = (
        "password",
        "passwd",
        "pwd",
        "secret",
        "token",
        "api_key",
        "authorization",
        "credential",
    )

    _KEY_PATTERNS: ClassVar[list[tuple[str, re.Pattern[str]]]] = [
        (key, re.compile(rf"{key}[:=]\s*[\"']?[^\s\"']+", re.IGNORECASE))
        for key in SENSITIVE_KEYS
    ]
    _BCRYPT_HASH_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}"
    )

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the record in place; never drops it."""
        record.msg = self.redact(str(record.msg))
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self.redact(v) if isinstance(v, str) else v
                    for k, v in record.args.items()
                }
            else:
                record.args = tuple(
                    self.redact(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )
        return True

    def redact(self, text: str) -> str:
        """Return ``text`` with secrets and bcrypt hashes replaced."""
        text = self._BCRYPT_HASH_PATTERN.sub("[REDACTED_HASH]", text)
        for key, pattern in self._KEY_PATTERNS:
            text = pattern.sub(f"{key}: [REDACTED]", text)
        return text


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation.

    Format:
        {
            "timestamp": "2025-01-12T10:30:45.123Z",
            "level": "WARNING",
            "logger": "authkit.core.security",
            "message": "Stored password hash is malformed",
            "service": "authkit",
            "context": {"action": "verify_password", "status": "failed"}
        }
    """

    def __init__(self, service_name: str = "authkit") -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        context = getattr(record, "context", None)
        if context:
            log_entry["context"] = context

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        if record.levelno >= logging.ERROR:
            log_entry["source"] = {
                "function": record.funcName,
                "line": record.lineno,
                "file": record.pathname,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ColoredConsoleFormatter(logging.Formatter):
    """Human-readable colored output for development consoles."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self) -> None:
        super().__init__(fmt=_PLAIN_FORMAT, datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record; color a copy.
        record = copy.copy(record)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"

        context = getattr(record, "context", None)
        if context:
            record.msg = f"{record.msg} | Context: {json.dumps(context, default=str)}"

        return super().format(record)


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    enable_json: bool | None = None,
) -> logging.Logger:
    """Configure the ``authkit`` logger hierarchy.

    Installs a console handler (colored when ``DEBUG`` is set, JSON
    otherwise) and, if a log file is configured, a rotating file handler
    (10MB max, 5 backups). Both handlers redact sensitive data.

    Args:
        log_level: Logging level name. Defaults to ``Settings.LOG_LEVEL``
        log_file: Path to a log file. Defaults to ``Settings.LOG_FILE``;
            no file handler when neither is set
        enable_json: JSON-format the file handler. Defaults to
            ``Settings.LOG_JSON_FORMAT``

    Returns:
        The configured ``authkit`` logger

    Examples:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Ready", extra={"context": {"rounds": 12}})
    """
    settings = get_settings()
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    log_file = log_file if log_file is not None else settings.LOG_FILE
    if enable_json is None:
        enable_json = settings.LOG_JSON_FORMAT

    logger = logging.getLogger("authkit")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    if settings.DEBUG:
        console_handler.setFormatter(ColoredConsoleFormatter())
    else:
        console_handler.setFormatter(JSONFormatter(service_name=settings.SERVICE_NAME))
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file_path),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        if enable_json:
            file_handler.setFormatter(
                JSONFormatter(service_name=settings.SERVICE_NAME)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(_PLAIN_FORMAT, datefmt=_DATE_FORMAT)
            )
        file_handler.addFilter(sensitive_filter)
        logger.addHandler(file_handler)

    logger.debug(
        "Logging initialized",
        extra={
            "context": {
                "log_level": level_name,
                "log_file": log_file,
                "bcrypt_rounds": settings.BCRYPT_ROUNDS,
            }
        },
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    Examples:
        >>> from authkit.core.logging import get_logger
        >>> logger = get_logger(__name__)
    """
    return logging.getLogger(name)


__all__ = [
    "ColoredConsoleFormatter",
    "JSONFormatter",
    "SensitiveDataFilter",
    "get_logger",
    "setup_logging",
]
