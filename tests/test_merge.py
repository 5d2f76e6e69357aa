"""
Unit tests for sshconfgen/fragments/merge.py

Tests fragment discovery and the merge order/selection rules.
"""

import os
from pathlib import Path

import pytest

from sshconfgen.fragments.merge import (
    Fragment,
    build_merged_output,
    find_fragment_files,
    load_fragments,
)

NL = os.linesep


def fragment(name, content):
    return Fragment(path=Path("/fragments") / name, content=content)


@pytest.mark.unit
class TestLoadFragments:
    """Tests for fragment discovery."""

    def test_only_matching_extension(self, ssh_dir, write_fragment):
        """Test that only *.sshconf regular files are picked up."""
        write_fragment("10-home.sshconf", global_config="Host *")
        (ssh_dir / "config.d" / "notes.txt").write_text("ignored")
        (ssh_dir / "config.d" / "dir.sshconf").mkdir()

        files = find_fragment_files(ssh_dir / "config.d", "sshconf")

        assert [p.name for p in files] == ["10-home.sshconf"]

    def test_missing_directory_yields_nothing(self, tmp_path):
        """Test that an unlistable directory gives no fragments."""
        assert find_fragment_files(tmp_path / "missing", "sshconf") == []

    def test_reads_content(self, ssh_dir, write_fragment):
        """Test that fragment contents are read into Fragment objects."""
        path = write_fragment("a.sshconf", global_config="Host a")

        fragments = load_fragments(ssh_dir / "config.d", "sshconf")

        assert fragments == [Fragment(path=path, content=path.read_text())]
        assert fragments[0].name == "a.sshconf"

    def test_undecodable_fragment_is_skipped(self, ssh_dir, write_fragment):
        """Test that a fragment that cannot be decoded is skipped."""
        write_fragment("good.sshconf", global_config="Host good")
        (ssh_dir / "config.d" / "bad.sshconf").write_bytes(b"\xff\xfe\x00bad")

        fragments = load_fragments(ssh_dir / "config.d", "sshconf")

        assert [f.name for f in fragments] == ["good.sshconf"]


@pytest.mark.unit
class TestBuildMergedOutput:
    """Tests for build_merged_output function."""

    def test_fragments_merged_in_name_order(self, make_probe, fragment_text):
        """Test that output order follows the lexicographic file name sort."""
        fragments = [
            fragment("2-office.sshconf", fragment_text(global_config="Host office")),
            fragment("10-home.sshconf", fragment_text(global_config="Host home")),
            fragment("b.sshconf", fragment_text(global_config="Host b")),
        ]

        merged = build_merged_output(fragments, make_probe())

        assert merged == f"Host home{NL}Host office{NL}Host b{NL}"

    def test_global_then_local_when_condition_matches(self, make_probe, fragment_text):
        """Test that a matching condition appends GLOBAL then LOCAL."""
        content = fragment_text(
            conditions="LocalSSID home-net",
            global_config="Host *\n    User me",
            local_config="Host nas\n    HostName 192.168.1.10",
            remote_config="Host nas\n    HostName nas.example.com",
        )

        merged = build_merged_output([fragment("nas.sshconf", content)], make_probe(ssid="home-net"))

        assert merged == f"Host *\n    User me{NL}Host nas\n    HostName 192.168.1.10{NL}"

    def test_remote_when_condition_fails(self, make_probe, fragment_text):
        """Test that REMOTE CONFIG is used when no condition succeeds."""
        content = fragment_text(
            conditions="LocalSSID home-net",
            local_config="Host nas\n    HostName 192.168.1.10",
            remote_config="Host nas\n    HostName nas.example.com",
        )

        merged = build_merged_output([fragment("nas.sshconf", content)], make_probe(ssid="other-net"))

        assert merged == f"Host nas\n    HostName nas.example.com{NL}"

    def test_no_conditions_always_remote(self, make_probe, fragment_text):
        """Test that a fragment without CONDITIONS always uses REMOTE CONFIG."""
        content = fragment_text(local_config="Host local", remote_config="Host remote")

        merged = build_merged_output([fragment("x.sshconf", content)], make_probe(ssid="home"))

        assert merged == f"Host remote{NL}"

    def test_missing_selected_section_contributes_nothing(self, make_probe, fragment_text):
        """Test that a matching condition with no LOCAL section adds nothing."""
        content = fragment_text(conditions="LocalSSID home", remote_config="Host remote")

        assert build_merged_output([fragment("x.sshconf", content)], make_probe(ssid="home")) == ""

    def test_empty_fragment_is_skipped(self, make_probe):
        """Test that empty fragments are skipped without probing."""
        probe = make_probe()
        assert build_merged_output([fragment("empty.sshconf", "")], probe) == ""
        assert probe.calls == []

    def test_no_fragments(self, make_probe):
        """Test that no fragments merge to an empty string."""
        assert build_merged_output([], make_probe()) == ""

    def test_each_fragment_evaluated_independently(self, make_probe, fragment_text):
        """Test that one fragment's selection does not leak into the next."""
        fragments = [
            fragment(
                "a.sshconf",
                fragment_text(conditions="LocalSSID home", local_config="A-local", remote_config="A-remote"),
            ),
            fragment(
                "b.sshconf",
                fragment_text(conditions="LocalSSID office", local_config="B-local", remote_config="B-remote"),
            ),
        ]

        merged = build_merged_output(fragments, make_probe(ssid="home"))

        assert merged == f"A-local{NL}B-remote{NL}"

    def test_ping_filter_setting_is_forwarded(self, make_probe, fragment_text):
        """Test that skip_empty_ping_targets reaches the evaluator."""
        probe = make_probe()
        content = fragment_text(conditions="LocalPing ,10.0.0.1", remote_config="Host r")

        build_merged_output([fragment("p.sshconf", content)], probe, skip_empty_ping_targets=True)

        assert probe.calls == [("ping", "10.0.0.1")]
