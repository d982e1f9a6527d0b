"""Logging configuration and setup for Gloveflash."""

import logging
import shutil
import sys
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, TextIO

import structlog
from rich.console import Console
from rich.traceback import Traceback
from structlog.stdlib import BoundLogger
from structlog.typing import ExcInfo, Processor


NOISY_LOGGERS = [
    "urllib3",
    "urllib3.connectionpool",
    "requests",
    "charset_normalizer",
]


def format_timestamp_ms(
    logger: Any, log_method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Format timestamp with milliseconds instead of microseconds."""
    if "timestamp_raw" in event_dict:
        # Truncate microseconds to milliseconds (6 digits to 3)
        timestamp_raw = event_dict.pop("timestamp_raw")
        event_dict["timestamp"] = timestamp_raw[:-3]
    return event_dict


def _callsite_adder() -> Processor:
    return structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.LINENO,
        ]
    )


def _console_timestamper(log_level: int) -> Processor:
    return structlog.processors.TimeStamper(
        fmt="%H:%M:%S.%f" if log_level < logging.INFO else "%Y-%m-%d %H:%M:%S.%f",
        key="timestamp_raw",
    )


def configure_structlog(log_level: int = logging.INFO) -> None:
    """Configure structlog with shared processors following canonical pattern.

    Timestamps are added per handler so the console and the JSON log file
    can each use their own format.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    # Dev mode (DEBUG): add callsite information
    if log_level < logging.INFO:
        processors.append(_callsite_adder())

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            # This MUST be the last processor - allows different renderers per handler
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
    )

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _json_processors() -> list[Processor]:
    return [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def rich_traceback(sio: TextIO, exc_info: ExcInfo) -> None:
    """Pretty-print *exc_info* to *sio* using the *Rich* package."""
    term_width, _height = shutil.get_terminal_size((80, 123))
    sio.write("\n")
    Console(file=sio, color_system="truecolor").print(
        Traceback.from_exception(
            *exc_info,
            extra_lines=1,
            width=term_width,
            max_frames=5,
            suppress=["click", "typer", "requests", "urllib3"],
        ),
    )


def setup_logging(
    level: int = logging.WARNING,
    log_file: str | Path | None = None,
    json_logs: bool = False,
) -> BoundLogger:
    """Setup logging for the entire application.

    Console output goes to stderr so that it never mixes with command
    output; the optional log file always receives JSON lines.

    Args:
        level: Log level for the root logger and all handlers
        log_file: Optional path of a file receiving JSON log lines
        json_logs: Render console logs as JSON instead of key=value

    Returns:
        A structlog logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    configure_structlog(log_level=level)

    root_logger.handlers = []  # Clear any existing handlers

    # Shared processors for foreign (stdlib) logs
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.dev.set_exc_info,
    ]
    if level < logging.INFO:
        shared_processors.append(_callsite_adder())

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_processors: list[Processor] = (
        _json_processors()
        if json_logs
        else [
            _console_timestamper(level),
            format_timestamp_ms,
            structlog.dev.ConsoleRenderer(exception_formatter=rich_traceback),
        ]
    )
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *console_processors,
            ],
        )
    )
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared_processors,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    *_json_processors(),
                ],
            )
        )
        root_logger.addHandler(file_handler)

    # HTTP libraries only report warnings and errors
    noisy_log_level = logging.WARNING if level <= logging.WARNING else level
    for logger_name in NOISY_LOGGERS:
        noisy_logger = logging.getLogger(logger_name)
        noisy_logger.handlers = []
        noisy_logger.propagate = True
        noisy_logger.setLevel(noisy_log_level)

    return structlog.get_logger()  # type: ignore[no-any-return]


def level_from_flags(verbose: int = 0, debug: bool = False) -> int:
    """Map CLI verbosity flags to a logging level."""
    if debug or verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
