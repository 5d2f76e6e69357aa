"""
Network module for sshconfgen.

This module answers the questions condition lines ask about the network:
- Which Wi-Fi network (SSID) is active
- Which hardware address a gateway IP resolves to
- Whether a host is reachable
"""

from .probe import EnvironmentProbe, ProbeError
from .detection import get_current_ssid
from .neighbors import get_hw_address
from .reachability import is_pingable
from .system import SystemProbe, get_system_probe

__all__ = [
    "EnvironmentProbe",
    "ProbeError",
    "SystemProbe",
    "get_system_probe",
    "get_current_ssid",
    "get_hw_address",
    "is_pingable",
]
