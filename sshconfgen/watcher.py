"""
SSID monitoring loop for sshconfgen.

Polls the current Wi-Fi network and regenerates the SSH config whenever it
changes. Runs until the process is terminated.
"""

import time

from . import config
from .logging_config import get_logger

# Get module logger
logger = get_logger(__name__)


def monitor(run_pass, probe, interval=config.DEFAULT_MONITOR_INTERVAL, sleep=time.sleep):
    """
    Re-run ``run_pass`` every time the network id reported by ``probe`` changes.

    Args:
        run_pass: Callable that generates and commits the config
        probe: EnvironmentProbe queried for the current network id
        interval: Seconds to sleep between polls
        sleep: Sleep function, replaceable for testing

    Probe errors are not caught; they end the loop.
    """
    current_ssid = probe.current_network_id()
    logger.info(f"Current SSID: {current_ssid}")

    while True:
        logger.debug("<<>>")
        sleep(interval)

        new_ssid = probe.current_network_id()
        if new_ssid != current_ssid:
            current_ssid = new_ssid
            logger.info(f"New SSID: {current_ssid}")
            run_pass()
