"""
Simple loguru-backed logging for dc-http.
"""

import os
import sys
import time
from contextlib import contextmanager
from typing import Any, List, Optional
from loguru import logger as loguru_logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[component]} | {message}"


def _has_component(record) -> bool:
    return "component" in record["extra"]


class AsyncLogger:
    """
    Logger with flat formatting.

    Format: timestamp | level | component | message
    Context keyword arguments are appended as key=value pairs.
    """

    # Handler ids added by dc-http, shared between all instances
    _handler_ids: Optional[List[int]] = None

    def __init__(self, component: str, debug_mode: bool = False):
        self.component = component
        self.debug_mode = debug_mode
        self._setup_async_handler()

    def _setup_async_handler(self):
        """
        Add the shared sinks once per process.

        - stderr: DEBUG in debug mode, WARNING otherwise
        - DC_HTTP_LOG_FILE (optional): rotated at 10MB, enqueued writes

        Both sinks only take records logged through AsyncLogger. Sinks
        installed by the host application are left in place.
        """
        if AsyncLogger._handler_ids is not None:
            return

        # loguru's own preinstalled stderr sink (id 0), if still present
        try:
            loguru_logger.remove(0)
        except ValueError:
            pass

        handler_ids = [
            loguru_logger.add(
                sys.stderr,
                level="DEBUG" if self.debug_mode else "WARNING",
                format=LOG_FORMAT,
                filter=_has_component,
            )
        ]

        log_file = os.getenv("DC_HTTP_LOG_FILE")
        if log_file:
            handler_ids.append(
                loguru_logger.add(
                    log_file,
                    level="DEBUG",
                    format=LOG_FORMAT,
                    filter=_has_component,
                    rotation="10 MB",
                    compression="zip",
                    enqueue=True,
                )
            )
        AsyncLogger._handler_ids = handler_ids

    @classmethod
    def remove_handlers(cls) -> None:
        """Remove the sinks added by dc-http; the next instance adds them again."""
        for handler_id in cls._handler_ids or []:
            loguru_logger.remove(handler_id)
        cls._handler_ids = None

    def log(self, level: str, message: str, **context: Any):
        """Record a message, appending context as key=value pairs."""
        if context:
            rendered = " ".join(f"{key}={value}" for key, value in context.items())
            message = f"{message} | {rendered}"
        loguru_logger.bind(component=self.component).log(level, message)

    def debug(self, message: str, **context: Any):
        """Log at DEBUG level."""
        self.log("DEBUG", message, **context)

    def info(self, message: str, **context: Any):
        """Log at INFO level."""
        self.log("INFO", message, **context)

    def warning(self, message: str, **context: Any):
        """Log at WARNING level."""
        self.log("WARNING", message, **context)

    def error(self, message: str, include_trace: Optional[bool] = None, **context: Any):
        """
        Log at ERROR level with an optional stack trace.

        Args:
            message: Error message
            include_trace: Whether to include the stack trace (None = follow debug_mode)
            **context: Extra context
        """
        should_include_trace = include_trace if include_trace is not None else self.debug_mode

        if should_include_trace:
            import traceback

            context["stack_trace"] = traceback.format_exc()

        self.log("ERROR", message, **context)


class PerformanceLogger:
    """
    Logger specialized in timing operations.
    """

    def __init__(self):
        self.logger = AsyncLogger("performance", debug_mode=_get_debug_mode())

    @contextmanager
    def measure(self, operation: str, **context: Any):
        """
        Context manager that logs how long a block took.

        Usage:
        ```
        with perf_logger.measure("resolve_config"):
            cfg = resolver.resolve(args)
        ```
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start
            self.logger.debug(
                "Operation completed", operation=operation, duration_ms=round(duration * 1000, 3), **context
            )


def _get_debug_mode() -> bool:
    """Read debug mode from the DC_HTTP_DEBUG environment variable."""
    return os.getenv("DC_HTTP_DEBUG", "false").strip().lower() in {"1", "true", "yes"}


logger = AsyncLogger("dc_http", debug_mode=_get_debug_mode())
perf_logger = PerformanceLogger()
