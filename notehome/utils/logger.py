"""
Logger - Central logging for Note Home

Usage:
    from notehome.utils.logger import logger

    logger.info("Seeded recent list", component="CORE")
    logger.error("Settings write failed", component="SETTINGS", details=str(e))
    logger.core("Pruned missing notes")          # DEBUG, component CORE

Component and details travel on the LogRecord (not baked into the message),
so the console, the log file and the status bar each format them their own
way. Warnings and errors are also emitted as a Qt signal for the status bar.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

LOGGER_NAME = "note_home"
DEFAULT_COMPONENT = "APP"
STATUS_BAR_LEVEL = logging.WARNING


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG      # 10
    INFO = logging.INFO        # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR      # 40


class LogSignalEmitter(QObject):
    """Qt signal emitter for status bar messages."""
    log_message = pyqtSignal(str, int, str)  # message, level, component


class ComponentFilter(logging.Filter):
    """Give every record a component and a printable details suffix."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "component", None):
            record.component = DEFAULT_COMPONENT
        details = getattr(record, "details", None)
        record.details_suffix = f" - {details}" if details else ""
        return True


class QtSignalHandler(logging.Handler):
    """Forwards records to the GUI through LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter):
        super().__init__()
        self.emitter = emitter

    def emit(self, record: logging.LogRecord):
        try:
            self.emitter.log_message.emit(self.format(record), record.levelno, record.component)
        except Exception:
            self.handleError(record)


class NoteHomeLogger:
    """
    Wraps the `note_home` stdlib logger.

    Console shows INFO and up (DEBUG after configure(debug=True)), the status
    bar signal carries WARNING and up, and the optional file gets everything.
    """

    _LINE_FORMAT = "%(asctime)s [%(levelname)s] [%(component)s] %(message)s%(details_suffix)s"

    def __init__(self):
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self._logger.addFilter(ComponentFilter())

        self.signal_emitter = LogSignalEmitter()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(logging.Formatter(self._LINE_FORMAT, datefmt="%H:%M:%S"))
        self._logger.addHandler(self._console_handler)

        self._qt_handler = QtSignalHandler(self.signal_emitter)
        self._qt_handler.setLevel(STATUS_BAR_LEVEL)
        self._qt_handler.setFormatter(logging.Formatter("%(message)s%(details_suffix)s"))
        self._logger.addHandler(self._qt_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    @property
    def log_file(self) -> Optional[str]:
        return self._file_handler.baseFilename if self._file_handler else None

    def configure(self, debug: bool = False, log_file: Optional[str] = None):
        """
        Apply command-line logging options.

        Args:
            debug: show DEBUG records on the console
            log_file: path to append every record to, or None for no file
        """
        self._console_handler.setLevel(LogLevel.DEBUG if debug else LogLevel.INFO)

        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
        if log_file:
            self._file_handler = logging.FileHandler(log_file, encoding="utf-8")
            self._file_handler.setLevel(logging.DEBUG)
            self._file_handler.setFormatter(logging.Formatter(self._LINE_FORMAT))
            self._logger.addHandler(self._file_handler)

    def _log(self, level: int, msg: str, component: Optional[str], details: Optional[str]):
        self._logger.log(level, msg, extra={"component": component, "details": details})

    def debug(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.ERROR, msg, component, details)

    # Shorthands for the chattiest components; both log at DEBUG
    def core(self, msg: str, details: Optional[str] = None):
        self.debug(msg, component="CORE", details=details)

    def catalog(self, msg: str, details: Optional[str] = None):
        self.debug(msg, component="CATALOG", details=details)


# Global logger instance
logger = NoteHomeLogger()
