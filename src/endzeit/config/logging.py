"""structlog configuration for endzeit.

Only the ``endzeit`` logger hierarchy is configured. It gets its own
stderr handler and stops propagating, so the root logger and other
libraries' loggers are left exactly as the host process set them up.

Two renderers:
- Human (default): ConsoleRenderer, colored when stderr is a TTY
- JSON (--log-json): one JSON object per line

stdlib records (``logging.getLogger(__name__)``) and structlog events
share one ProcessorFormatter, so both come out in the same shape.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "endzeit"
_HANDLER_NAME = "endzeit.stderr"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Logger:
    """Route endzeit's log output to stderr and return the package logger.

    Safe to call more than once: a handler installed by an earlier call
    is replaced, never stacked.

    Args:
        verbose: DEBUG level for endzeit loggers. When False, WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(handler)
    logger.addHandler(_stderr_handler(log_json))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
