"""
Wi-Fi network detection for sshconfgen.

This module provides the current SSID lookup for each supported platform.
"""

try:
    import CoreWLAN
except ImportError:
    CoreWLAN = None

from ..logging_config import get_logger
from ..utils import run_command
from .probe import ProbeError

# Get module logger
logger = get_logger(__name__)

MACOS_WIFI_INTERFACE = "en0"


def _ssid_from_corewlan():
    """Gets the SSID of the current Wi-Fi network using CoreWLAN."""
    if not CoreWLAN:
        logger.debug("CoreWLAN not available")
        return None

    try:
        interface = CoreWLAN.CWInterface.interface()
        if interface:
            return interface.ssid() or ""
    except Exception as e:
        logger.debug(f"Could not get current SSID using CoreWLAN: {e}")
    return None


def _ssid_from_networksetup():
    """Parse `networksetup -getairportnetwork` output."""
    output = run_command(
        ["networksetup", "-getairportnetwork", MACOS_WIFI_INTERFACE], capture=True
    )
    if output is None:
        raise ProbeError("Unable to run networksetup to determine the current SSID")

    # "Current Wi-Fi Network: <ssid>" or "You are not associated with an AirPort network."
    start = output.find(": ")
    if start == -1:
        return ""
    return output[start + 2 :].strip()


def _ssid_from_iwgetid():
    """Read the SSID with `iwgetid -r` (empty output when not associated)."""
    output = run_command(["iwgetid", "-r"], capture=True, quiet_on_error=True)
    if output is None:
        raise ProbeError("Unable to run iwgetid to determine the current SSID")
    return output


def _ssid_from_netsh():
    """Parse `netsh wlan show interfaces` output."""
    output = run_command(["netsh", "wlan", "show", "interfaces"], capture=True)
    if output is None:
        raise ProbeError("Unable to run netsh to determine the current SSID")

    for line in output.splitlines():
        if "SSID" in line and "BSSID" not in line and ":" in line:
            return line.split(":", 1)[1].strip()
    return ""


def get_current_ssid(system):
    """
    Get the SSID of the current Wi-Fi network.

    Args:
        system: Platform name as reported by platform.system()

    Returns:
        str: The SSID, or an empty string when not associated

    Raises:
        ProbeError: If the platform is unsupported or no tooling is available
    """
    if system == "Darwin":
        ssid = _ssid_from_corewlan()
        if ssid is None:
            logger.debug("Falling back to networksetup for SSID")
            ssid = _ssid_from_networksetup()
    elif system == "Linux":
        ssid = _ssid_from_iwgetid()
    elif system == "Windows":
        ssid = _ssid_from_netsh()
    else:
        raise ProbeError(f"Unsupported operating system: {system}")

    logger.debug(f"Current SSID: {ssid!r}")
    return ssid
