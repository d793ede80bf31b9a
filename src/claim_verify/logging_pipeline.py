"""Structured JSON logging for the verifier command line.

Records are rendered with an allowlist of context keys. Anything else a
caller passes through ``extra`` is dropped, so key, signature and digest
material cannot reach the log stream by accident.
"""

from __future__ import annotations

import copy
import json
import logging
import logging.handlers
from dataclasses import dataclass
from datetime import datetime, timezone
from queue import Full, Queue
from typing import Iterable, TextIO, override
from uuid import uuid4

LOGGER = logging.getLogger(__name__)

CONTEXT_KEYS: frozenset[str] = frozenset({"stage", "field", "error_type"})

_QUEUE_SIZE = 1024


class JsonFormatter(logging.Formatter):
    """Render log records as JSON carrying only allowlisted context."""

    def __init__(
        self,
        *,
        default_trace_id: str | None = None,
        context_keys: Iterable[str] = CONTEXT_KEYS,
    ) -> None:
        super().__init__()
        self._default_trace_id = default_trace_id
        self._context_keys = frozenset(context_keys)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited
        trace_id = getattr(record, "trace_id", None) or self._default_trace_id

        context: dict[str, str] = {}
        for key in sorted(self._context_keys):
            value = record.__dict__.get(key)
            if value is not None:
                context[key] = str(value)

        payload: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "trace_id": trace_id,
            "context": context,
        }

        # Exception text may quote input values; only the type is emitted.
        if record.exc_info and record.exc_info[0] is not None:
            payload["exception_type"] = record.exc_info[0].__name__

        return json.dumps(payload)


class BoundedQueueHandler(logging.handlers.QueueHandler):
    """Queue handler that drops records when the queue is full."""

    @override
    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        """Resolve the message and strip traceback and stack text."""
        prepared = copy.copy(record)
        prepared.msg = record.getMessage()
        prepared.args = None
        if record.exc_info:
            prepared.exc_info = (record.exc_info[0], None, None)
        prepared.exc_text = None
        prepared.stack_info = None
        return prepared

    @override
    def enqueue(self, record: logging.LogRecord) -> None:
        try:
            self.queue.put_nowait(record)
        except Full:
            self.handleError(record)

    @override
    def handleError(self, record: logging.LogRecord) -> None:
        return


@dataclass(slots=True)
class StructuredLogging:
    """Handle on an installed JSON logging pipeline.

    Attributes:
        logger: Logger the queue handler is attached to.
        handler: Queue handler feeding ``listener``.
        listener: Listener draining records to the JSON stream handler.
    """

    logger: logging.Logger
    handler: BoundedQueueHandler
    listener: logging.handlers.QueueListener

    def close(self) -> None:
        """Drain pending records and detach the handler from ``logger``."""
        shutdown_listeners([self.listener])
        self.logger.removeHandler(self.handler)


def configure_structured_logging(
    logger: logging.Logger,
    *,
    trace_id: str | None = None,
    level: int = logging.WARNING,
    stream: TextIO | None = None,
) -> StructuredLogging:
    """Attach a queue-backed JSON handler to ``logger``.

    Args:
        logger: Target logger to configure.
        trace_id: Static trace identifier for every record. A random one is
            generated when omitted.
        level: Logging verbosity level. Defaults to ``logging.WARNING``.
        stream: Output stream; ``sys.stderr`` when omitted.

    Returns:
        The running pipeline; call :meth:`StructuredLogging.close` when done.
    """
    logger.setLevel(level)

    record_queue: Queue[logging.LogRecord] = Queue(maxsize=_QUEUE_SIZE)
    handler = BoundedQueueHandler(record_queue)
    logger.addHandler(handler)

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setFormatter(JsonFormatter(default_trace_id=trace_id or str(uuid4())))

    listener = logging.handlers.QueueListener(record_queue, stream_handler)
    listener.start()
    return StructuredLogging(logger=logger, handler=handler, listener=listener)


def shutdown_listeners(listeners: Iterable[logging.handlers.QueueListener]) -> None:
    """Stop all queue listeners while suppressing shutdown errors."""
    for listener in listeners:
        try:
            listener.stop()
        except Exception as exc:  # pragma: no cover - cleanup path
            LOGGER.warning("Failed to stop logging listener", exc_info=exc)
