"""Centralized logging configuration using Loguru with Pino-compatible output.

lincol is a library first: importing it never touches the host application's
handlers, and its own records are disabled until an application opts in with
``logger.enable("lincol")``. The CLI calls configure_logging() to install its
handlers.

Usage:
    from lincol.utils.logging import logger
    logger.debug("Debug message")  # Only shows if LINCOL_LOG_LEVEL=DEBUG

Environment Variables (read by configure_logging):
    LINCOL_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    LINCOL_LOG_JSON: 0|1 (default: 0, human-readable)
    LINCOL_LOG_FILE: path to log file (optional)

Library code only logs at DEBUG; WARNING is used for ignored configuration.
"""

import json
import os
import sys
from pathlib import Path

from loguru import logger

logger.disable("lincol")

# Pino-compatible numeric levels
PINO_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}


def to_pino(record) -> dict:
    """Convert a loguru record to a Pino log object.

    {"level":30,"time":1715629847123,"msg":"...","pid":12345}
    """
    pino_log = {
        "level": PINO_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }

    # Extra context fields (format kwargs and bind())
    for key, value in record["extra"].items():
        pino_log[key] = value

    if record["exception"]:
        pino_log["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return pino_log


def pino_compatible_sink(message):
    """Write log records to stderr as Pino-compatible NDJSON.

    stderr keeps the records apart from command output such as ``dump --json``.
    """
    # Never call logger.* inside a sink
    sys.stderr.write(json.dumps(to_pino(message.record), default=str) + "\n")
    sys.stderr.flush()


# Human-readable format (no emojis - Windows CP1252 compatibility)
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(
    level: str | None = None, json_mode: bool | None = None, log_file: str | None = None
) -> list[int]:
    """Replace loguru's handlers with lincol's and enable lincol's records.

    Meant for applications that own the process, such as the lincol CLI.
    Arguments left as None are read from the LINCOL_LOG_* variables.

    Returns:
        The ids of the handlers added, for logger.remove()
    """
    level = (level or os.environ.get("LINCOL_LOG_LEVEL", "WARNING")).upper()
    if json_mode is None:
        json_mode = os.environ.get("LINCOL_LOG_JSON", "0") == "1"
    if log_file is None:
        log_file = os.environ.get("LINCOL_LOG_FILE")

    # Remove default handler
    logger.remove()

    logger.level("DEBUG", color="<blue>")
    logger.level("WARNING", color="<yellow>")
    logger.level("ERROR", color="<red>")

    handler_ids = []
    if json_mode:
        handler_ids.append(logger.add(pino_compatible_sink, level=level, colorize=False))
    else:
        handler_ids.append(
            logger.add(
                sys.stderr,
                level=level,
                format=_human_format,
                colorize=None,  # Auto-detect: colors if TTY, plain if piped
            )
        )

    # Optional file handler (always NDJSON for machine parsing)
    if log_file:
        def _file_pino_sink(message):
            """Append Pino-format JSON to the configured log file."""
            with open(log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(to_pino(message.record), default=str) + "\n")

        handler_ids.append(logger.add(_file_pino_sink, level="DEBUG"))  # File always captures everything

    logger.enable("lincol")
    return handler_ids


def configure_file_logging(log_dir: Path, level: str = "DEBUG") -> int:
    """Add a rotating, human-readable log file under log_dir.

    Enables lincol's records, so the file is useful without configure_logging().

    Returns:
        The loguru handler id, for logger.remove()
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    handler_id = logger.add(
        log_dir / "lincol.log",
        rotation="10 MB",
        retention="7 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )
    logger.enable("lincol")
    return handler_id


__all__ = [
    "logger",
    "configure_file_logging",
    "configure_logging",
    "pino_compatible_sink",
    "to_pino",
]
