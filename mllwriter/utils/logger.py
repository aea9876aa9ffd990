"""
Logging utilities for mllwriter.
Supports both normal mode (rich console output) and debug mode (detailed logs).
Console output goes to stderr so rendered documents can be piped from stdout.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table


class WriterLogger:
    """
    Logger with rich console output and optional debug log file.
    """

    def __init__(self, debug_mode: bool = False, debug_log_file: Optional[str] = None):
        self.debug_mode = debug_mode
        self.debug_log_file = debug_log_file
        self.console = Console(stderr=True)

        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging."""
        self.logger = logging.getLogger('mllwriter')
        self.logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)

        # Remove existing handlers
        self.logger.handlers = []

        console_handler = RichHandler(console=self.console, rich_tracebacks=True, show_path=self.debug_mode)
        console_handler.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)
        self.logger.addHandler(console_handler)

        # File handler for debug mode
        if self.debug_mode and self.debug_log_file:
            log_path = Path(self.debug_log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def print_header(self, title: str):
        """Print a header/banner."""
        self.console.print(Panel(title, style="bold blue"))

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """Log error message."""
        self.logger.error(message, exc_info=exc_info)

    def success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_table(self, title: str, data: list, headers: list):
        """Print a formatted table."""
        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in data:
            table.add_row(*[str(cell) for cell in row])
        self.console.print(table)

    def print_summary(self, output_format: str, target: str, characters: int, duration: float):
        """Print render summary."""
        self.print_table(
            "Render Complete",
            [
                ["Format", output_format],
                ["Target", target],
                ["Characters", characters],
                ["Duration", f"{duration:.3f}s"],
            ],
            ["Metric", "Value"]
        )


# Global logger instance
_logger_instance: Optional[WriterLogger] = None


def get_logger() -> WriterLogger:
    """Get the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = WriterLogger()
    return _logger_instance


def init_logger(debug_mode: bool = False, debug_log_file: Optional[str] = None) -> WriterLogger:
    """Initialize the global logger."""
    global _logger_instance
    _logger_instance = WriterLogger(debug_mode=debug_mode, debug_log_file=debug_log_file)
    return _logger_instance
