"""
Console notifier for translation runs
Renders notifications and progress the same way for every host
"""
import sys
import os
import logging
from datetime import datetime
from typing import Optional, Dict, Any, Callable, List
from enum import Enum

from compendium_translator.host.interfaces import Notifier

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Log levels with priority values"""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


class Colors:
    """ANSI color codes for terminal output"""
    # Check if colors should be disabled
    NO_COLOR = os.environ.get('NO_COLOR') is not None or not sys.stdout.isatty()

    YELLOW = '' if NO_COLOR else '\033[93m'
    WHITE = '' if NO_COLOR else '\033[97m'
    GRAY = '' if NO_COLOR else '\033[90m'
    RED = '' if NO_COLOR else '\033[91m'
    ENDC = '' if NO_COLOR else '\033[0m'

    @classmethod
    def disable(cls):
        """Disable all colors"""
        cls.YELLOW = cls.WHITE = cls.GRAY = cls.RED = cls.ENDC = ''


class ConsoleNotifier(Notifier):
    """
    Notifier printing to the console, mirrored to the logging module
    """

    def __init__(self,
                 console_output: bool = True,
                 enable_colors: bool = True,
                 min_level: LogLevel = LogLevel.INFO,
                 storage_callback: Optional[Callable[[Dict[str, Any]], None]] = None):
        """
        Initialize the console notifier

        Args:
            console_output: Whether to output to console
            enable_colors: Whether to use colored output
            min_level: Minimum level to display
            storage_callback: Callback receiving every structured entry (e.g., a UI bridge)
        """
        self.console_output = console_output
        self.min_level = min_level
        self.storage_callback = storage_callback

        if not enable_colors:
            Colors.disable()

    def _format_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _format_console_message(self, level: LogLevel, message: str) -> str:
        """Format message for console output"""
        level_colors = {
            LogLevel.DEBUG: Colors.GRAY,
            LogLevel.INFO: Colors.WHITE,
            LogLevel.WARNING: Colors.YELLOW,
            LogLevel.ERROR: Colors.RED,
        }
        color = level_colors.get(level, Colors.WHITE)
        level_str = f"[{level.name}] " if level != LogLevel.INFO else ""
        return f"{color}[{self._format_timestamp()}] {level_str}{message}{Colors.ENDC}"

    def _format_progress(self, label: str, percent: int) -> str:
        """Format a progress line with a simple bar"""
        bar_length = 30
        filled = int(bar_length * percent / 100)
        bar = '█' * filled + '░' * (bar_length - filled)
        return f"{Colors.WHITE}{label} [{bar}] {percent}%{Colors.ENDC}"

    def _emit(self, level: LogLevel, console_msg: str, entry: Dict[str, Any]) -> None:
        if level.value < self.min_level.value:
            return

        if self.console_output:
            try:
                print(console_msg, flush=True)
            except UnicodeEncodeError:
                # Windows consoles (cp1252) cannot print every character
                safe_message = console_msg.encode('ascii', 'replace').decode('ascii')
                print(safe_message, flush=True)

        if self.storage_callback:
            self.storage_callback(entry)

    def log(self, level: LogLevel, message: str) -> None:
        """
        Main notification method

        Args:
            level: Log level
            message: Message shown to the user
        """
        logger.log(level.value, message)
        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level.name,
            'type': 'notification',
            'message': message
        }
        self._emit(level, self._format_console_message(level, message), entry)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def progress(self, label: str, percent: int) -> None:
        percent = max(0, min(100, int(percent)))
        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': LogLevel.INFO.name,
            'type': 'progress',
            'message': label,
            'data': {'percentage': percent}
        }
        self._emit(LogLevel.INFO, self._format_progress(label, percent), entry)


class MemoryNotifier(Notifier):
    """Notifier keeping every notification in lists, for hosts polling a run"""

    def __init__(self):
        self.infos: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []
        self.progress_updates: List[tuple] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def progress(self, label: str, percent: int) -> None:
        self.progress_updates.append((label, percent))


def setup_console_notifier(enable_colors: bool = True) -> ConsoleNotifier:
    """Console notifier honouring DEBUG_MODE"""
    # Import here to avoid circular dependencies
    from compendium_translator.config import DEBUG_MODE

    return ConsoleNotifier(
        console_output=True,
        enable_colors=enable_colors,
        min_level=LogLevel.DEBUG if DEBUG_MODE else LogLevel.INFO
    )
