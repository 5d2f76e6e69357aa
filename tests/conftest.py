"""
Pytest configuration and shared fixtures for sshconfgen tests.

This module provides reusable fixtures and configuration for all tests.
"""

import pytest

from sshconfgen.config import Settings
from sshconfgen.network import EnvironmentProbe, ProbeError


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no real network access")


class FakeProbe(EnvironmentProbe):
    """EnvironmentProbe with canned answers that records every query."""

    def __init__(self, ssid="", macs=None, reachable=(), ssid_error=None):
        self.ssid = ssid
        self.macs = dict(macs or {})
        self.reachable = set(reachable)
        self.ssid_error = ssid_error
        self.calls = []

    def current_network_id(self):
        self.calls.append(("ssid", None))
        if self.ssid_error:
            raise ProbeError(self.ssid_error)
        return self.ssid

    def hardware_address_of(self, ip):
        self.calls.append(("arp", ip))
        if ip not in self.macs:
            raise ProbeError(f"MAC address not found for {ip}")
        return self.macs[ip]

    def is_reachable(self, ip):
        self.calls.append(("ping", ip))
        return ip in self.reachable


def render_fragment(conditions=None, global_config=None, local_config=None, remote_config=None):
    """Build fragment text; sections left as None are omitted."""
    blocks = []
    for name, body in (
        ("CONDITIONS", conditions),
        ("GLOBAL CONFIG", global_config),
        ("LOCAL CONFIG", local_config),
        ("REMOTE CONFIG", remote_config),
    ):
        if body is not None:
            blocks.append(f"# {name} BEGIN\n{body}\n# {name} END\n")
    return "\n".join(blocks)


@pytest.fixture
def make_probe():
    """Factory for FakeProbe instances."""
    return FakeProbe


@pytest.fixture
def fragment_text():
    """Factory for fragment file contents."""
    return render_fragment


@pytest.fixture
def ssh_dir(tmp_path):
    """Provide a temporary ~/.ssh with an empty config.d."""
    ssh = tmp_path / ".ssh"
    (ssh / "config.d").mkdir(parents=True)
    return ssh


@pytest.fixture
def settings(ssh_dir):
    """Settings pointing at the temporary ~/.ssh."""
    return Settings(ssh_dir=ssh_dir)


@pytest.fixture
def write_fragment(ssh_dir):
    """Write a fragment into the temporary config.d and return its path."""

    def _write(name, **sections):
        path = ssh_dir / "config.d" / name
        path.write_text(render_fragment(**sections), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests."""
    import logging

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
