"""
Unit tests for sshconfgen/watcher.py

The monitor loop never returns on its own, so these tests stop it by
raising from the injected sleep function.
"""

from unittest.mock import MagicMock

import pytest

from sshconfgen.network import ProbeError


class StopMonitor(Exception):
    pass


class SequenceProbe:
    """Probe returning a fixed sequence of SSIDs."""

    def __init__(self, ssids):
        self.ssids = list(ssids)

    def current_network_id(self):
        value = self.ssids.pop(0)
        if isinstance(value, Exception):
            raise value
        return value


def sleeper(polls):
    """Return a sleep function that stops the loop after ``polls`` calls."""
    calls = []

    def _sleep(seconds):
        calls.append(seconds)
        if len(calls) > polls:
            raise StopMonitor()

    _sleep.calls = calls
    return _sleep


@pytest.mark.unit
class TestMonitor:
    """Tests for monitor function."""

    def test_reruns_only_on_change(self):
        """Test that the pipeline runs once per SSID change."""
        from sshconfgen.watcher import monitor

        run_pass = MagicMock()
        probe = SequenceProbe(["home", "home", "office", "office", "home"])
        sleep = sleeper(polls=4)

        with pytest.raises(StopMonitor):
            monitor(run_pass, probe, interval=5, sleep=sleep)

        assert run_pass.call_count == 2
        assert sleep.calls == [5, 5, 5, 5, 5]

    def test_default_interval(self):
        """Test that the default poll interval is 20 seconds."""
        from sshconfgen.watcher import monitor

        sleep = sleeper(polls=0)

        with pytest.raises(StopMonitor):
            monitor(MagicMock(), SequenceProbe(["home"]), sleep=sleep)

        assert sleep.calls == [20]

    def test_probe_error_ends_loop(self):
        """Test that probe errors are fatal to the loop."""
        from sshconfgen.watcher import monitor

        run_pass = MagicMock()
        probe = SequenceProbe(["home", ProbeError("adapter gone")])

        with pytest.raises(ProbeError):
            monitor(run_pass, probe, interval=1, sleep=sleeper(polls=5))

        run_pass.assert_not_called()
