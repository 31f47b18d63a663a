"""Contextual logging for twitter_auth.

Wraps the standard library ``logging`` module with a ``LoggerAdapter`` that
carries key/value dimensions (e.g. ``handshake_id``) through every call site.
Dimensions are appended to text output or emitted as fields in JSON output.
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

import structlog

_ROOT_LOGGER_NAME = "twitter_auth"


class _TextFormatter(logging.Formatter):
    """Render ``message key=value ...`` lines."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        dimensions = getattr(record, "dimensions", None)
        if dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in sorted(dimensions.items()))
            line = f"{line} | {rendered}"
        return line


def _add_dimensions(
    _logger: Any, _method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Lift ``ContextualLogger`` dimensions from the stdlib record into the event."""
    record = event_dict.get("_record")
    for key, value in (getattr(record, "dimensions", None) or {}).items():
        event_dict.setdefault(key, value)
    return event_dict


def _json_formatter() -> logging.Formatter:
    """Render one JSON object per record through structlog."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_dimensions,
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(default=str),
        ],
    )


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches dimensions and an optional prefix to records."""

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[Dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap ``logger`` with the given dimensions and message prefix."""
        super().__init__(logger, {})
        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        kwargs["extra"] = extra
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional dimensions."""
        return ContextualLogger(
            self.logger, {**self.dimensions, **dimensions}, prefix=self.prefix
        )

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to every message."""
        return ContextualLogger(self.logger, self.dimensions, prefix=prefix)


class LoggerConfigurator:
    """Builds contextual loggers and installs the package handler."""

    @staticmethod
    def setup(level: str = "INFO", log_format: str = "text") -> None:
        """Install a stream handler on the package root logger.

        Calling it again replaces the handler, so the latest settings win.
        """
        root = logging.getLogger(_ROOT_LOGGER_NAME)
        for handler in list(root.handlers):
            root.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_json_formatter() if log_format == "json" else _TextFormatter())
        root.addHandler(handler)
        root.setLevel(level.upper())
        root.propagate = False

    @staticmethod
    def configure_logger(
        name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a contextual logger named ``name`` with ``dimensions`` attached."""
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger(_ROOT_LOGGER_NAME)
