"""
Fragment discovery and merging for sshconfgen.

Fragments are read from the fragment directory, sorted by file name and
merged into one config string. Nothing here writes to disk; persisting the
result is the writer's job.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from ..logging_config import get_logger
from ..network import EnvironmentProbe
from .rules import RuleEvaluator
from .sections import extract_sections

# Get module logger
logger = get_logger(__name__)


@dataclass(frozen=True)
class Fragment:
    """One source file contributing sections to the merged config."""

    path: Path
    content: str

    @property
    def name(self) -> str:
        return self.path.name


def find_fragment_files(directory: Path, extension: str) -> List[Path]:
    """Return the regular files in ``directory`` ending in ``.extension``."""
    suffix = f".{extension}"
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.info(f"Cannot list fragment directory {directory}: {e}")
        return []
    return [path for path in entries if path.is_file() and path.suffix == suffix]


def load_fragments(directory: Path, extension: str) -> List[Fragment]:
    """
    Read every fragment in ``directory``.

    Unreadable files are skipped with a diagnostic note so one bad fragment
    does not stop the others from being merged.
    """
    fragments = []
    for path in find_fragment_files(directory, extension):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.info(f"Skipping unreadable config file {path}: {e}")
            continue
        fragments.append(Fragment(path=path, content=content))
    return fragments


def build_merged_output(
    fragments: Iterable[Fragment],
    probe: EnvironmentProbe,
    skip_empty_ping_targets: bool = False,
) -> str:
    """
    Merge fragments into a single config string.

    Fragments are processed in file name order. Each contributes its GLOBAL
    CONFIG section, then LOCAL CONFIG if one of its conditions succeeds or
    REMOTE CONFIG otherwise. Every contributed section is followed by a
    platform newline. Returns an empty string if nothing was contributed.
    """
    evaluator = RuleEvaluator(probe, skip_empty_ping_targets=skip_empty_ping_targets)
    parts = []

    for fragment in sorted(fragments, key=lambda f: f.name):
        if not fragment.content:
            logger.info(f"Skipping empty or unreadable config file: {fragment.path}")
            continue

        sections = extract_sections(fragment.content)
        if sections.is_empty:
            logger.debug(f"No known sections in {fragment.path}")
            continue

        use_local = evaluator.evaluate(sections.conditions, source=str(fragment.path))

        if sections.global_config:
            logger.info(f"Using global ssh rules from {fragment.path}")
            parts.append(sections.global_config + os.linesep)

        if use_local:
            if sections.local_config:
                parts.append(sections.local_config + os.linesep)
        elif sections.remote_config:
            logger.info(f"Using remote ssh rules from {fragment.path}")
            parts.append(sections.remote_config + os.linesep)

    return "".join(parts)
