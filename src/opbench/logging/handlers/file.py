import os
from pathlib import Path

from opbench.errors import ConfigurationError
from opbench.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """
    Appends benchmark log lines to a file kept open until the logger shuts down.

    Lines from earlier runs are kept, so one file can hold the history of
    several suite runs.
    """

    def __init__(self, filepath: str | os.PathLike) -> None:
        """
        Args:
            filepath (str | os.PathLike): Log file path. Missing parent
                directories are created.

        Raises:
            ConfigurationError: If the path names a directory or cannot be opened.
        """
        self.path = Path(filepath)
        if self.path.is_dir():
            raise ConfigurationError(
                f"Invalid log file; expected a file path but {self.path} is a directory"
            )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, "a")
        except OSError as exc:
            raise ConfigurationError(f"Cannot open log file {self.path}; {exc}") from exc

    def push(self, buffer: list[str]) -> None:
        if self._file.closed:
            return
        self._file.write("\n".join(buffer) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()
