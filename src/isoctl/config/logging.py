"""Logging for isoctl: stdlib loggers rendered by structlog on stderr.

Modules log with ``logging.getLogger(__name__)``; :func:`configure_logging`
installs one handler on the root logger whose formatter runs the structlog
chain, so stdout carries nothing but command results.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "isoctl"


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


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """(Re)install the isoctl stderr handler.

    ``verbose`` lowers the ``isoctl`` logger to DEBUG (WARNING otherwise);
    ``log_json`` swaps the console renderer for one JSON object per line.
    Calling this again replaces the previous isoctl handler.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("isoctl").setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_command(command_path: str) -> None:
    """Tag every log line of this invocation with ``command=<path>``."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command_path)
