"""
Operating-system backed environment probe.
"""

import platform

from .. import config
from .detection import get_current_ssid
from .neighbors import get_hw_address
from .probe import EnvironmentProbe, ProbeError
from .reachability import is_pingable

SUPPORTED_SYSTEMS = ("Linux", "Darwin", "Windows")


class SystemProbe(EnvironmentProbe):
    """Answers probe queries by running the platform's network commands."""

    def __init__(
        self,
        system,
        ping_attempts=config.DEFAULT_PING_ATTEMPTS,
        ping_timeout=config.DEFAULT_PING_TIMEOUT,
    ):
        if system not in SUPPORTED_SYSTEMS:
            raise ProbeError(f"Unsupported operating system: {system}")
        self.system = system
        self.ping_attempts = ping_attempts
        self.ping_timeout = ping_timeout

    def current_network_id(self):
        return get_current_ssid(self.system)

    def hardware_address_of(self, ip):
        return get_hw_address(ip, self.system)

    def is_reachable(self, ip):
        return is_pingable(
            ip, self.system, attempts=self.ping_attempts, timeout=self.ping_timeout
        )


def get_system_probe(settings=None):
    """Create the probe for the running platform."""
    if settings is None:
        settings = config.Settings()
    return SystemProbe(
        platform.system(),
        ping_attempts=settings.ping_attempts,
        ping_timeout=settings.ping_timeout,
    )
