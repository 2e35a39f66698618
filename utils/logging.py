"""
Enhanced Logging Utilities

Provides structured logging with contextual information for webhook request debugging.
Implements hybrid approach: human-readable console + structured JSON files.
"""
import contextvars
import json
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Dict, Any, Optional

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured file logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line with context information."""
        log_obj: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_obj['exception'] = {
                'type': exc_type.__name__ if exc_type else 'Unknown',
                'message': str(exc_value) if exc_value else 'No message',
                'traceback': self.formatException(record.exc_info)
            }

        context = log_context.get()
        if context:
            log_obj['context'] = dict(context)
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        extra_data = {}
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            try:
                json.dumps(value)
                extra_data[key] = value
            except (TypeError, ValueError):
                extra_data[key] = str(value)

        if extra_data:
            log_obj['extra'] = extra_data

        return json.dumps(log_obj, ensure_ascii=False)


class ContextualLogger:
    """
    Logger wrapper that adds request context and operation timing.

    Each webhook request calls start_operation() to get a trace id; every
    later log line carries the elapsed time until end_operation().
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._start_time: Optional[float] = None

    def start_operation(self, operation_name: Optional[str] = None) -> str:
        """
        Start timing an operation and generate a trace ID.

        Args:
            operation_name: Optional name for the operation being tracked

        Returns:
            Generated trace ID for this operation
        """
        self._start_time = time.time()
        trace_id = uuid.uuid4().hex[:8]

        context = dict(log_context.get())
        context['trace_id'] = trace_id
        if operation_name:
            context['operation'] = operation_name
        log_context.set(context)

        return trace_id

    def end_operation(self, trace_id: str, operation_result: str = "completed") -> None:
        """
        End an operation and log the final duration.

        Args:
            trace_id: The trace ID returned by start_operation
            operation_result: Result label (e.g. "drafted", "ignored", "failed")
        """
        if self._start_time is None:
            self.warning("end_operation called without corresponding start_operation")
            return

        duration_ms = int((time.time() - self._start_time) * 1000)
        self._start_time = None
        self.logger.info(f"Operation {operation_result}", extra={
            'trace_id': trace_id,
            'final_duration_ms': duration_ms,
            'operation_result': operation_result,
        })

        context = dict(log_context.get())
        context.pop('operation', None)
        if context.get('trace_id') == trace_id:
            context.pop('trace_id')
        log_context.set(context)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        if self._start_time is not None:
            kwargs['duration_ms'] = int((time.time() - self._start_time) * 1000)
        self.logger.log(level, message, exc_info=exc_info, extra=kwargs)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """
        Log error message with context and exception information.

        Args:
            message: Error message
            error: Optional exception object (adds its traceback)
            **kwargs: Additional context
        """
        if error is not None:
            kwargs['error'] = {'type': type(error).__name__, 'message': str(error)}
        self._log(logging.ERROR, message, exc_info=error is not None, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback and context."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


def set_request_context(
    payload: Optional[Any] = None,
    event_id: Optional[str] = None,
    channel: Optional[str] = None,
    user: Optional[str] = None,
    **additional_context
):
    """
    Set Slack-specific context for logging.

    Args:
        payload: Slack payload object (will extract event id/channel/user)
        event_id: Slack event ID
        channel: Slack channel ID
        user: Slack user ID of the message author
        **additional_context: Any additional context to include
    """
    context = dict(log_context.get())

    if payload is not None:
        if getattr(payload, 'event_id', None):
            context['event_id'] = payload.event_id
        event = getattr(payload, 'event', None)
        if event is not None:
            if event.channel:
                context['channel'] = event.channel
            if event.user:
                context['user'] = event.user

    # Explicit values win over the payload
    if event_id:
        context['event_id'] = event_id
    if channel:
        context['channel'] = channel
    if user:
        context['user'] = user

    context.update(additional_context)
    log_context.set(context)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    """
    Get a contextual logger instance.

    Args:
        logger_name: Name for the logger (typically __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logger_name)
