"""
Logging utilities for the Othello engine.
"""
import os
import logging
from datetime import datetime
from typing import Any, Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Wires console and file handlers onto the package logger."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.log_file = None

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter(FORMAT)
        self.handlers = []

        # Set up console logging
        if config.logging.verbose:
            console = logging.StreamHandler()
            console.setLevel(level)
            console.setFormatter(formatter)
            self.handlers.append(console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)
            self.log_file = os.path.join(self.log_dir, f"{self.run_name}.log")
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger = logging.getLogger('othello')
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def log_event(self, event: Any):
        """Log an engine event (ForcedPass, GameEnded, ...)."""
        fields = vars(event) if hasattr(event, '__dict__') else {}
        log_str = f"{type(event).__name__}:"
        for name, value in fields.items():
            log_str += f" {name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Detach and close the handlers installed by this logger."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
