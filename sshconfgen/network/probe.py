"""
Environment probe interface for sshconfgen.

The rule evaluator only ever talks to an EnvironmentProbe. Platform-specific
lookups live behind this interface so the core never branches on the OS.
"""

from abc import ABC, abstractmethod


class ProbeError(Exception):
    """Raised when the network environment cannot be queried."""


class EnvironmentProbe(ABC):
    """Live network facts consulted by condition lines."""

    @abstractmethod
    def current_network_id(self) -> str:
        """Return the active wireless network name (empty if not associated)."""

    @abstractmethod
    def hardware_address_of(self, ip: str) -> str:
        """Return the link-layer address bound to ``ip`` in the neighbor table."""

    @abstractmethod
    def is_reachable(self, ip: str) -> bool:
        """Return True if ``ip`` answers a reachability probe."""
