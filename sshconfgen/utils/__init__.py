"""
Utility functions for sshconfgen.

This module provides common utility functions used throughout the application.
"""

from .commands import run_command

__all__ = [
    "run_command",
]
