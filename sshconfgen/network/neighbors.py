"""
Neighbor table (ARP) lookups for sshconfgen.
"""

import re

from .. import config
from ..logging_config import get_logger
from ..utils import run_command
from .probe import ProbeError

logger = get_logger(__name__)

# Matches both zero-padded (aa:bb:...) and macOS-style (a:b:...) addresses,
# with ':' or '-' separators (Windows prints aa-bb-...)
MAC_PATTERN = re.compile(r"(?<![0-9A-Fa-f:-])(?:[0-9A-Fa-f]{1,2}[:-]){5}[0-9A-Fa-f]{1,2}(?![0-9A-Fa-f:-])")


def _arp_command(ip_address, system):
    if system == "Windows":
        return ["arp", "-a", ip_address]
    if system in ("Linux", "Darwin"):
        return ["arp", "-n", ip_address]
    raise ProbeError(f"Unsupported operating system: {system}")


def parse_hw_address(output, ip_address):
    """
    Extract the hardware address for ``ip_address`` from arp output.

    Only lines naming the exact address are considered, so 10.0.0.1 does not
    match an entry for 10.0.0.10. The address is returned exactly as printed.
    """
    ip_pattern = re.compile(r"(?<![\d.])" + re.escape(ip_address) + r"(?![\d.])")
    for line in output.splitlines():
        if not ip_pattern.search(line):
            continue
        match = MAC_PATTERN.search(line)
        if match:
            return match.group(0)
    return None


def get_hw_address(ip_address, system):
    """
    Get the hardware address of a device given its IP address.

    Raises:
        ProbeError: If arp cannot be run or has no entry for the address
    """
    if not ip_address:
        raise ProbeError("No IP address given for hardware address lookup")

    output = run_command(
        _arp_command(ip_address, system),
        capture=True,
        timeout=config.ARP_TIMEOUT,
        quiet_on_error=True,
    )
    if output is None:
        raise ProbeError("Unable to run arp")

    mac_address = parse_hw_address(output, ip_address)
    if mac_address is None:
        raise ProbeError(f"MAC address not found for {ip_address}")

    logger.debug(f"Neighbor {ip_address} is at {mac_address}")
    return mac_address
