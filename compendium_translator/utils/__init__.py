from .unified_logger import ConsoleNotifier, MemoryNotifier, LogLevel, setup_console_notifier

__all__ = ['ConsoleNotifier', 'MemoryNotifier', 'LogLevel', 'setup_console_notifier']
