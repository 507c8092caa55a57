"""Structured JSON logging for action providers.

Provides consistent, structured logging across providers and the invocation
pipeline. API keys and response bodies are never included in log output.
"""

import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class ActionJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding standard fields to every record."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    use_stderr: bool = True,
) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON records instead of plain text
        use_stderr: Log to stderr so stdout stays free for action output
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    stream = sys.stderr if use_stderr else sys.stdout
    handler = logging.StreamHandler(stream)
    if json_format:
        handler.setFormatter(ActionJsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(message)s"
        ))
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers = [handler]

    # Request lines from httpx would include query strings (API keys)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class ActionInvocationLogger:
    """Logs one action invocation with consistent structure.

    Every invocation is logged with:
    - Action and provider name
    - Duration
    - Success/failure status and failure kind

    Never logs action output, which may be large, or credentials.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._start: Optional[float] = None
        self._action_name: Optional[str] = None
        self._context: Dict[str, Any] = {}

    def start(self, action_name: str, **context) -> "ActionInvocationLogger":
        """Start timing an invocation.

        Args:
            action_name: Name of the action being invoked
            **context: Additional context (provider, network, etc.)

        Returns:
            Self for chaining
        """
        self._start = time.perf_counter()
        self._action_name = action_name
        self._context = self._safe(context)

        self.logger.info(
            "Action invocation started",
            extra={
                "action_name": action_name,
                "event": "action_start",
                **self._context,
            }
        )
        return self

    def success(self, **result_info) -> None:
        """Log successful completion."""
        self.logger.info(
            "Action invocation succeeded",
            extra={
                "action_name": self._action_name,
                "event": "action_success",
                "duration_ms": self._duration_ms(),
                **self._context,
                **self._safe(result_info),
            }
        )

    def failure(self, error: str, **result_info) -> None:
        """Log failed completion.

        Args:
            error: Error message (must not contain secrets)
            **result_info: Non-sensitive result information (kind, status)
        """
        self.logger.warning(
            "Action invocation failed",
            extra={
                "action_name": self._action_name,
                "event": "action_failure",
                "duration_ms": self._duration_ms(),
                "error": error,
                **self._context,
                **self._safe(result_info),
            }
        )

    def _duration_ms(self) -> int:
        if self._start is None:
            return 0
        return int((time.perf_counter() - self._start) * 1000)

    @classmethod
    def _safe(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in values.items() if not cls._is_sensitive(k)}

    @staticmethod
    def _is_sensitive(key: str) -> bool:
        """Check if a key might contain sensitive data."""
        sensitive_patterns = [
            "secret", "password", "token", "key", "credential",
            "output", "response_body",
        ]
        key_lower = key.lower()
        return any(pattern in key_lower for pattern in sensitive_patterns)
