"""
This module provides logging functionality for tdm.

The interactive menu owns the terminal, so loggers only write to a file
unless a caller explicitly asks for the console handler.
"""

import logging
import os
from pathlib import Path
from typing import List

from tdm.singleton import Singleton

TDM = 'tdm'
LOG_DIR_ENV = 'TDM_LOG_DIR'


def _logs_folder() -> Path:
    """Return the folder that receives tdm.log."""
    if os.environ.get(LOG_DIR_ENV):
        return Path(os.environ[LOG_DIR_ENV])
    if os.environ.get('XDG_STATE_HOME'):
        return Path(os.environ['XDG_STATE_HOME']) / TDM
    return Path.home() / '.local' / 'state' / TDM


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self):
        """Initialize the logger with file and stream handlers."""
        logs_folder = _logs_folder()
        logs_folder.mkdir(parents=True, exist_ok=True)
        self.log_file = logs_folder / (TDM + '.log')
        self.level = logging.INFO
        self._loggers: List[logging.Logger] = []

        # create file handler which logs even debug messages
        self.logging_file_handler = logging.FileHandler(self.log_file)

        # console handler, only attached on request
        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = TDM
        else:
            logger_name = TDM + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<24}")

        logger.setLevel(self.level)

        # add the handlers to logger
        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        if logger not in self._loggers:
            self._loggers.append(logger)

        return logger

    def set_level(self, level: int) -> None:
        """Change the level of every logger handed out so far, and of later ones."""
        self.level = level
        for logger in self._loggers:
            logger.setLevel(level)
