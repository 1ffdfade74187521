"""Buffered single-threaded logger used by the harness and the CLI."""

import sys

from opbench.logging.config import LoggerConfig, LogLevel
from opbench.logging.handlers import BaseLogHandler
from opbench.time.time import time_iso8601, time_s


class Logger:
    """A synchronous logger that buffers messages and pushes them to
    configured handlers when the buffer fills, the flush interval elapses,
    or an error is logged.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stderr, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler type; expected BaseLogHandler but got {type(handler).__name__}"
                )

        self._buffer: list[str] = []
        self._buffer_start_time_s = time_s()
        self._is_running = True

    def _flush_buffer(self) -> None:
        """Flushes the log message buffer to stderr and all handlers."""
        if not self._buffer:
            return

        buffer = self._buffer
        self._buffer = []
        self._buffer_start_time_s = time_s()

        if self._config.do_stderr:
            sys.stderr.write("\n".join(buffer) + "\n")
            sys.stderr.flush()

        for handler in self._handlers:
            handler.push(buffer)

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Formats and buffers a log message, flushing when required.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        if not self._is_running or level < self._config.base_level:
            return

        log_msg = self._config.str_format % {
            "asctime": time_iso8601(),
            "name": self._name,
            "levelname": level.name,
            "message": msg,
        }
        self._buffer.append(log_msg)

        if (
            level >= LogLevel.ERROR
            or len(self._buffer) >= self._config.buffer_size
            or (time_s() - self._buffer_start_time_s) >= self._config.flush_interval_s
        ):
            self._flush_buffer()

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message. Errors are flushed immediately."""
        self._process_log(LogLevel.ERROR, msg)

    def flush(self) -> None:
        """Push any buffered messages to stderr and the handlers."""
        self._flush_buffer()

    def shutdown(self) -> None:
        """Flushes remaining messages, closes handlers and stops accepting logs."""
        self._flush_buffer()
        self._is_running = False
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        """Check if the logger is accepting messages."""
        return self._is_running

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config
