"""Log routing for the goldenratio CLI and embedders.

The resize core only emits: stdlib loggers for step-by-step detail and
structlog events (``resize.applied``, ``resize.suppressed``) from the
orchestrator. Nothing is printed until :func:`configure_logging` installs a
stderr handler, which the CLI does once per invocation. Both kinds of
record then go through the same structlog renderer, so ``--log-json``
yields one JSON object per line with ``event``, ``level``, ``logger`` and
``timestamp`` keys plus any event fields.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "goldenratio"
QUIET_LOGGERS = ("pluggy",)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send goldenratio log records to stderr.

    Args:
        verbose: Show resize decisions (DEBUG) instead of warnings only.
        log_json: Render JSON lines instead of the console format.

    Calling it again replaces the previous handler.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
