"""
Crash-safe output writing for sshconfgen.

The existing output file is moved to a timestamped backup before anything is
written. After writing, the backup is either deleted (the new file exists and
is non-empty) or moved back into place. Filesystem errors are not handled
here; they propagate to the caller.
"""

import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from . import config
from .logging_config import get_logger

logger = get_logger(__name__)


class CommitOutcome(Enum):
    """Result of a commit."""

    COMMITTED = "commit"  # new file written, backup removed
    RESTORED = "restore"  # write produced nothing usable, original put back
    UNCHANGED = "unchanged"  # no original and nothing to write


def backup_path_for(output_path: Path, now: Optional[datetime] = None) -> Path:
    """Return ``<output_path>.<YYYYMMDDHHMMSS>.orig``."""
    timestamp = (now or datetime.now()).strftime(config.BACKUP_TIMESTAMP_FORMAT)
    return output_path.with_name(f"{output_path.name}.{timestamp}.{config.BACKUP_SUFFIX}")


def backup_config(output_path: Path, backup_path: Path) -> Optional[Path]:
    """Move an existing output file out of the way; return the backup path if one was made."""
    if not output_path.exists():
        return None

    output_path.replace(backup_path)
    logger.info(f"SSH config backup created: {backup_path}")
    return backup_path


def append_to_file(path: Path, contents: str) -> None:
    """
    Append ``contents`` to ``path``, creating it if needed.

    A trailing platform newline is added unless one is already present. The
    text is written as-is, without newline translation.
    """
    if not contents:
        return

    if not contents.endswith(os.linesep):
        logger.debug(f"Appending newline to {path}")
        contents += os.linesep

    with open(path, "a", encoding="utf-8", newline="") as f:
        f.write(contents)


def cleanup(output_path: Path, backup_path: Optional[Path]) -> CommitOutcome:
    """Keep the new file if it is usable, otherwise restore the backup."""
    if not output_path.exists():
        reason = "doesn't exist"
    elif output_path.stat().st_size == 0:
        reason = "is empty"
    else:
        if backup_path is not None:
            logger.info("New SSH config file created, removing backup.")
            backup_path.unlink()
        return CommitOutcome.COMMITTED

    if backup_path is None:
        logger.info(f"New config {reason} and there is no original to restore")
        return CommitOutcome.UNCHANGED

    logger.info(f"New config {reason}. Restoring original SSH config file")
    backup_path.replace(output_path)
    return CommitOutcome.RESTORED


def commit(output_path, content: str, now: Optional[datetime] = None) -> CommitOutcome:
    """
    Persist ``content`` at ``output_path`` using backup, write, verify.

    Args:
        output_path: Path of the SSH config file to replace
        content: Merged config text (may be empty)
        now: Timestamp for the backup name (defaults to the current time)

    Returns:
        CommitOutcome describing what happened to the output file

    Raises:
        OSError: If a rename, write, stat or delete fails
    """
    output_path = Path(output_path)
    backup_path = backup_config(output_path, backup_path_for(output_path, now))
    append_to_file(output_path, content)
    return cleanup(output_path, backup_path)
