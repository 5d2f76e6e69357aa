"""
Condition rule evaluation for sshconfgen.

This module decides, per fragment, whether its LOCAL CONFIG or REMOTE CONFIG
section applies. Each line of a CONDITIONS section has the form ``Key Value``:

    LocalSSID home-net,home-net-5ghz
    LocalGateway 192.168.1.1|00:11:22:33:44:55,172.16.1.1|00:55:44:33:22:11
    LocalPing 192.168.1.100,172.16.1.100

The first line that succeeds selects the local section; lines are evaluated
in the order written. Unknown keys are ignored.
"""

from typing import Optional, Tuple

from ..logging_config import get_logger
from ..network import EnvironmentProbe, ProbeError

# Get module logger
logger = get_logger(__name__)

LOCAL_SSID = "LocalSSID"
LOCAL_GATEWAY = "LocalGateway"
LOCAL_PING = "LocalPing"


def get_key_value(line: str) -> Tuple[str, str]:
    """
    Split a condition line on its first space into a trimmed (key, value).

    A line without a space yields ("", "") and never matches.
    """
    parts = line.split(" ", 1)
    if len(parts) == 2:
        return parts[0].strip(), parts[1].strip()
    return "", ""


class RuleEvaluator:
    """
    Evaluates CONDITIONS sections against an EnvironmentProbe.

    One evaluator is used for a whole merge pass: the current network id is
    looked up at most once and reused for every LocalSSID line.
    """

    def __init__(self, probe: EnvironmentProbe, skip_empty_ping_targets: bool = False):
        self.probe = probe
        self.skip_empty_ping_targets = skip_empty_ping_targets
        self._network_id: Optional[str] = None

    def current_network_id(self) -> str:
        """Return the active network id; ProbeError propagates to the caller."""
        if self._network_id is None:
            self._network_id = self.probe.current_network_id()
        return self._network_id

    def evaluate(self, conditions: str, source: str = "<fragment>") -> bool:
        """Return True if any condition line in ``conditions`` succeeds."""
        for line in conditions.splitlines():
            if not line.strip():
                continue

            key, value = get_key_value(line)

            if key == LOCAL_SSID:
                matched = self._ssid_match(value, source)
            elif key == LOCAL_GATEWAY:
                matched = self._gateway_match(value, source)
            elif key == LOCAL_PING:
                matched = self._ping_success(value, source)
            else:
                logger.debug(f"Ignoring unknown condition {key!r} in {source}")
                matched = False

            if matched:
                return True

        return False

    def _ssid_match(self, value: str, source: str) -> bool:
        """Match the current SSID against a comma-separated list of SSIDs."""
        current_ssid = self.current_network_id()
        ssids = [ssid for ssid in value.split(",") if ssid]
        if current_ssid in ssids:
            logger.info(f"Using local ssh rules for {source} reason: ssid match {current_ssid}")
            return True
        return False

    def _gateway_match(self, value: str, source: str) -> bool:
        """Match ``ip|mac`` pairs against the neighbor table."""
        for gateway in value.split(","):
            fields = gateway.split("|")
            if len(fields) != 2:
                logger.info(f"Skipping malformed gateway {gateway!r} in {source}")
                continue

            ip, mac = fields
            try:
                mac_address = self.probe.hardware_address_of(ip)
            except ProbeError as e:
                logger.debug(f"No hardware address for {ip}: {e}")
                continue

            if mac_address == mac:
                logger.info(f"Using local ssh rules for {source} reason: gateway match {ip} ({mac})")
                return True
        return False

    def _ping_success(self, value: str, source: str) -> bool:
        """Succeed if any host in a comma-separated list answers a ping."""
        hosts = value.split(",")
        if self.skip_empty_ping_targets:
            hosts = [host for host in hosts if host]

        for host in hosts:
            if self.probe.is_reachable(host):
                logger.info(f"Using local ssh rules for {source} reason: ping success {host}")
                return True
        return False


def evaluate_conditions(
    conditions: str, probe: EnvironmentProbe, skip_empty_ping_targets: bool = False
) -> bool:
    """Evaluate a single CONDITIONS section with a fresh RuleEvaluator."""
    return RuleEvaluator(probe, skip_empty_ping_targets=skip_empty_ping_targets).evaluate(conditions)
