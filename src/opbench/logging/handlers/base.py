from abc import ABC, abstractmethod


class BaseLogHandler(ABC):
    """
    Abstract base class for log handlers, defining how buffered log
    messages should be pushed to their respective destinations.
    """

    def close(self) -> None:
        """Release any resources held by the handler. Default: no-op."""

    @abstractmethod
    def push(self, buffer: list[str]) -> None:
        """
        Flushes the given buffer of log entries in some way.

        Args:
            buffer (list[str]): The list of formatted log messages to push.
        """
        pass
