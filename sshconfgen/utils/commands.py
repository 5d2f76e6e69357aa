"""
Command execution utilities for sshconfgen.

This module provides command execution with error handling and logging.
It serves as the central location for all external command execution used by
the environment probes (iwgetid, networksetup, netsh, arp, ping).
"""

import subprocess

from ..logging_config import get_logger

# Get module logger
logger = get_logger(__name__)


def run_command(command, capture=False, timeout=None, quiet_on_error=False):
    """
    Execute a command with error handling and logging.

    Args:
        command: Command to execute as a list of strings
        capture: If True, return command output; if False, return success status
        timeout: Optional timeout in seconds for the whole command
        quiet_on_error: If True, suppress failure logging for expected failures

    Returns:
        If capture=True: stripped stdout (even when the exit status is
            non-zero), or None if the command could not be run
        If capture=False: True on success, False on failure, None if the
            command could not be run
    """
    logger.debug(f"Running command: {command}")

    try:
        result = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="ignore",
            timeout=timeout,
        )
    except FileNotFoundError:
        logger.debug(f"Command not found: {command[0]}")
        return None
    except subprocess.TimeoutExpired:
        logger.debug(f"Command '{command}' timed out after {timeout}s")
        return None
    except OSError as e:
        logger.debug(f"Unable to run command '{command}': {e}")
        return None

    if result.stderr:
        logger.debug(f"Command stderr: {result.stderr.strip()}")

    if result.returncode != 0:
        if quiet_on_error:
            logger.debug(f"Command '{command}' failed (expected)")
        else:
            logger.debug(f"Command '{command}' failed with status {result.returncode}")

    if capture:
        return (result.stdout or "").strip()
    return result.returncode == 0
