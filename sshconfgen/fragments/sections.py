"""
Section extraction for sshconfgen fragments.

A fragment holds up to four marker-delimited sections:

    # CONDITIONS BEGIN
    LocalSSID home-net
    # CONDITIONS END

    # GLOBAL CONFIG BEGIN / END
    # LOCAL CONFIG BEGIN / END
    # REMOTE CONFIG BEGIN / END

Markers are literal, case-sensitive strings. Only the first pair of each is
honored and sections do not nest.
"""

from dataclasses import dataclass
from typing import Tuple

CONDITIONS = "CONDITIONS"
GLOBAL_CONFIG = "GLOBAL CONFIG"
LOCAL_CONFIG = "LOCAL CONFIG"
REMOTE_CONFIG = "REMOTE CONFIG"

SECTION_NAMES = (CONDITIONS, GLOBAL_CONFIG, LOCAL_CONFIG, REMOTE_CONFIG)


def section_markers(name: str) -> Tuple[str, str]:
    """Return the (begin, end) marker pair for a section name."""
    return f"# {name} BEGIN", f"# {name} END"


def extract_section(content: str, begin_marker: str, end_marker: str) -> str:
    """
    Return the trimmed text between the first ``begin_marker`` and the first
    ``end_marker`` that follows it.

    Returns an empty string if either marker is missing or the end marker
    only appears before the begin marker.
    """
    start = content.find(begin_marker)
    if start == -1:
        return ""
    start += len(begin_marker)

    end = content.find(end_marker, start)
    if end == -1:
        return ""

    return content[start:end].strip()


@dataclass(frozen=True)
class FragmentSections:
    """The four sections of one fragment; absent sections are empty strings."""

    conditions: str = ""
    global_config: str = ""
    local_config: str = ""
    remote_config: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.conditions or self.global_config or self.local_config or self.remote_config)


def extract_sections(content: str) -> FragmentSections:
    """Extract all four well-known sections from a fragment's content."""
    found = {name: extract_section(content, *section_markers(name)) for name in SECTION_NAMES}
    return FragmentSections(
        conditions=found[CONDITIONS],
        global_config=found[GLOBAL_CONFIG],
        local_config=found[LOCAL_CONFIG],
        remote_config=found[REMOTE_CONFIG],
    )
