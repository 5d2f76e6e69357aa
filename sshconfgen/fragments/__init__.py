"""
Fragment parsing, rule evaluation and merging for sshconfgen.

This module turns the *.sshconf files in the fragment directory into the
text of a single SSH client config.
"""

from .sections import (
    CONDITIONS,
    GLOBAL_CONFIG,
    LOCAL_CONFIG,
    REMOTE_CONFIG,
    FragmentSections,
    extract_section,
    extract_sections,
    section_markers,
)
from .rules import RuleEvaluator, evaluate_conditions, get_key_value
from .merge import Fragment, build_merged_output, find_fragment_files, load_fragments

__all__ = [
    "CONDITIONS",
    "GLOBAL_CONFIG",
    "LOCAL_CONFIG",
    "REMOTE_CONFIG",
    "FragmentSections",
    "extract_section",
    "extract_sections",
    "section_markers",
    "RuleEvaluator",
    "evaluate_conditions",
    "get_key_value",
    "Fragment",
    "build_merged_output",
    "find_fragment_files",
    "load_fragments",
]
