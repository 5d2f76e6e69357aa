"""
SSH config generation pipeline.

Ties the pieces together for one run: check the directories, read the
fragments, merge them against the live network, and commit the result.
"""

from pathlib import Path
from typing import Optional

from .config import ConfigurationError, Settings
from .fragments import build_merged_output, load_fragments
from .logging_config import get_logger
from .network import EnvironmentProbe
from .writer import CommitOutcome, commit

logger = get_logger(__name__)


def check_directories(settings: Settings) -> None:
    """Make sure the SSH directory and the fragment directory exist."""
    if not settings.ssh_dir.is_dir():
        raise ConfigurationError(f"{settings.ssh_dir} directory does not exist")
    if not settings.fragment_path.is_dir():
        raise ConfigurationError(f"{settings.fragment_path} directory does not exist")


class SshConfigGenerator:
    """Generates the SSH client config from its fragments."""

    def __init__(self, settings: Settings, probe: EnvironmentProbe):
        self.settings = settings
        self.probe = probe

    @property
    def output_path(self) -> Path:
        return self.settings.output_path

    def build(self) -> Optional[str]:
        """
        Return the merged config text, or None if there are no fragments.

        ProbeError from a LocalSSID lookup propagates.
        """
        fragment_dir = self.settings.fragment_path
        fragments = load_fragments(fragment_dir, self.settings.extension)
        if not fragments:
            logger.info(f"No config files found in {fragment_dir}")
            return None

        return build_merged_output(
            fragments,
            self.probe,
            skip_empty_ping_targets=self.settings.skip_empty_ping_targets,
        )

    def run(self) -> Optional[CommitOutcome]:
        """Generate and commit the config once; returns None if nothing was attempted."""
        check_directories(self.settings)

        merged = self.build()
        if merged is None:
            return None

        outcome = commit(self.output_path, merged)
        logger.debug(f"Commit outcome for {self.output_path}: {outcome.value}")
        return outcome
