"""
Centralized logging configuration for sshconfgen.

This module provides a single point of configuration for all logging in the
application, ensuring consistent formatting, handlers, and levels across all
modules. Verbose mode raises the console level so diagnostic notes (skipped
fragments, selection reasons, backups) become visible.
"""

import logging
import sys
from typing import Optional

from . import config


class SshConfGenLogger:
    """Centralized logger configuration for sshconfgen."""

    _initialized = False
    _verbose = False

    @classmethod
    def setup(cls, verbose: bool = False, force_reinit: bool = False) -> None:
        """
        Set up centralized logging for the entire application.

        Args:
            verbose: If True, show DEBUG diagnostics on the console
            force_reinit: If True, reinitialize even if already set up
        """
        if cls._initialized and not force_reinit:
            return

        # Clear any existing handlers to avoid duplication
        root_logger = logging.getLogger()
        if root_logger.hasHandlers():
            root_logger.handlers.clear()

        cls._verbose = verbose
        root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

        formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

        cls._add_file_handler(root_logger, formatter)
        cls._add_console_handler(root_logger, formatter)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.debug(f"sshconfgen logging initialized (verbose={'on' if verbose else 'off'})")

    @classmethod
    def _add_file_handler(cls, logger: logging.Logger, formatter: logging.Formatter) -> None:
        """Add file handler for persistent logging."""
        try:
            log_file = config.get_log_file()
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG if cls._verbose else logging.INFO)
            logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, the console handler still reports errors
            print(f"Warning: Could not set up file logging: {e}", file=sys.stderr)

    @classmethod
    def _add_console_handler(cls, logger: logging.Logger, formatter: logging.Formatter) -> None:
        """Add console handler; quiet unless verbose."""
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.DEBUG if cls._verbose else logging.WARNING)
        logger.addHandler(console_handler)

    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Logger instance
        """
        return logging.getLogger(name)


# Convenience functions for easy import
def setup_logging(verbose: bool = False, force_reinit: bool = False) -> None:
    """Set up centralized logging. Wrapper for SshConfGenLogger.setup()."""
    SshConfGenLogger.setup(verbose=verbose, force_reinit=force_reinit)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance. Wrapper for SshConfGenLogger.get_logger()."""
    return SshConfGenLogger.get_logger(name)

