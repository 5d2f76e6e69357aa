"""
ICMP reachability checks for sshconfgen.
"""

from .. import config
from ..logging_config import get_logger
from ..utils import run_command

logger = get_logger(__name__)


def _ping_command(host, system, timeout):
    if system == "Windows":
        return ["ping", host, "-n", "1", "-w", str(timeout * 1000)]
    if system == "Darwin":
        # macOS -W is in milliseconds; -t is the overall timeout in seconds
        return ["ping", "-c", "1", "-t", str(timeout), host]
    return ["ping", "-c", "1", "-W", str(timeout), host]


def is_pingable(
    host, system, attempts=config.DEFAULT_PING_ATTEMPTS, timeout=config.DEFAULT_PING_TIMEOUT
):
    """
    Check whether a host answers a single ping within ``attempts`` tries.

    Args:
        host: Address to ping, passed through as given
        system: Platform name as reported by platform.system()
        attempts: Number of single-packet pings to try
        timeout: Seconds to wait for each reply

    Returns:
        bool: True as soon as one attempt succeeds
    """
    for attempt in range(1, attempts + 1):
        logger.debug(f"Pinging {host!r} (attempt {attempt})")
        if run_command(
            _ping_command(host, system, timeout),
            # Guard against a ping binary that ignores its own timeout
            timeout=timeout + 5,
            quiet_on_error=True,
        ):
            return True
    return False
