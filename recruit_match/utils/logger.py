"""
Logging for Recruit Match.

Loguru sinks for the console and a rotating log file, plus an audit file
that receives only records bound with an ``audit_type``.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from recruit_match.utils.config import LoggingSettings, get_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {message}"

REDACTED = "***REDACTED***"
SENSITIVE_KEY_PARTS = frozenset(
    {"password", "passwd", "secret", "token", "api_key", "apikey", "credential", "private_key"}
)

# Records logged through the bare loguru logger have no bound name
logger.configure(extra={"name": "recruit_match"})


def _is_audit_record(record: dict[str, Any]) -> bool:
    return "audit_type" in record["extra"]


def _add_file_sinks(log_settings: LoggingSettings, diagnose: bool) -> Path:
    log_file = log_settings.file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )
    logger.add(
        log_file.parent / "audit.log",
        format=AUDIT_FORMAT,
        level="INFO",
        filter=_is_audit_record,
        rotation="1 week",
        retention="1 year",
        enqueue=True,
    )
    return log_file


def setup_logging() -> None:
    """
    Replace loguru's default handler with the configured sinks.

    Console output goes to stderr. When file output is enabled, a rotating
    log file and an audit file are written next to each other.
    """
    settings = get_settings()
    log_settings = settings.logging

    # Variable values in tracebacks only while developing locally
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )

    if log_settings.file_output:
        log_file = _add_file_sinks(log_settings, diagnose)
        logger.debug(f"Writing logs to {log_file}")


def get_logger(name: str) -> Any:
    """Get the shared loguru logger bound to a module name."""
    return logger.bind(name=name)


def _sanitize_for_logging(data: Any) -> Any:
    """Mask values whose key looks like a credential, at any depth."""
    if isinstance(data, dict):
        return {
            key: REDACTED
            if any(part in key.lower() for part in SENSITIVE_KEY_PARTS)
            else _sanitize_for_logging(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_sanitize_for_logging(item) for item in data]
    return data


def audit_log(
    action: str,
    details: dict[str, Any],
    audit_type: str = "DECISION",
) -> None:
    """
    Record a matching decision in the audit trail.

    Args:
        action: What happened (e.g. "matches_computed")
        details: Context for the entry; credential-like keys are masked
        audit_type: Audit category
    """
    logger.bind(audit_type=audit_type).info(f"{action} | {_sanitize_for_logging(details)}")
