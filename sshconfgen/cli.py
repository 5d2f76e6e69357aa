import signal
import sys
from pathlib import Path

import click

from . import __version__, config
from .config import ConfigurationError
from .generator import SshConfigGenerator
from .logging_config import setup_logging
from .network import ProbeError, get_system_probe
from .watcher import monitor

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

MONITOR_OPTION = "--monitor-ssid"
# Value of --monitor-ssid when given without "=N"
USE_CONFIGURED_INTERVAL = "configured"
INVALID_DURATION = "Error: Invalid duration specified for --monitor-ssid."


def signal_handler(signum, frame):
    """Handle interrupt signals gracefully."""
    signal_name = signal.Signals(signum).name
    click.echo(f"\n\nReceived {signal_name}. Exiting gracefully...", err=True)
    sys.exit(0)


def fail(message):
    """Print an error to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _duration_seconds(value):
    """Return N for a plain decimal duration, or None if it is not one."""
    if value.isascii() and value.isdigit():
        return int(value)
    return None


def _parse_monitor_interval(ctx, param, value):
    """Validate the optional --monitor-ssid=N value."""
    if value is None or value == USE_CONFIGURED_INTERVAL:
        return value
    seconds = _duration_seconds(value)
    if seconds is None:
        click.echo(INVALID_DURATION, err=True)
        ctx.exit(1)
    return seconds


class MonitorCommand(click.Command):
    """Command that checks --monitor-ssid=N before click parses options.

    Click would read a value such as "-5" as another option, so the raw
    text is validated here.
    """

    def parse_args(self, ctx, args):
        prefix = f"{MONITOR_OPTION}="
        for arg in args:
            if arg == "--":
                break
            if arg.startswith(prefix) and _duration_seconds(arg[len(prefix):]) is None:
                click.echo(INVALID_DURATION, err=True)
                ctx.exit(1)
        return super().parse_args(ctx, args)


@click.command(cls=MonitorCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-V", "--version", message="%(version)s")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Print diagnostics about fragments, matched conditions and backups.",
)
@click.option(
    MONITOR_OPTION,
    "monitor_interval",
    is_flag=False,
    flag_value=USE_CONFIGURED_INTERVAL,
    default=None,
    metavar="[=N]",
    callback=_parse_monitor_interval,
    help="Monitor the SSID and regenerate the SSH config file when it changes. "
    "The SSID is checked every N seconds, defaults to 20.",
)
def cli(verbose, monitor_interval):
    """
    Generate ~/.ssh/config from the *.sshconf fragments in ~/.ssh/config.d/.

    Fragments are processed in alphabetical order. Each fragment is made of
    sections, formatted as follows:

    \b
    # CONDITIONS BEGIN
    LocalSSID foo,bar5ghz
    LocalGateway 192.168.1.1|00:11:22:33:44:55,172.16.1.1|00:55:44:33:22:11
    LocalPing 192.168.1.100,172.16.1.100
    # CONDITIONS END

    \b
    # GLOBAL CONFIG BEGIN
    <global ssh config>
    # GLOBAL CONFIG END

    \b
    # LOCAL CONFIG BEGIN
    <local ssh config>
    # LOCAL CONFIG END

    \b
    # REMOTE CONFIG BEGIN
    <remote ssh config>
    # REMOTE CONFIG END

    \b
    LocalSSID: succeeds if the current SSID matches any of a comma-separated
        list of SSIDs.
    LocalGateway: succeeds if any comma-separated ip|mac pair matches the
        neighbor table.
    LocalPing: succeeds if any of a comma-separated list of IP addresses is
        pingable. Unreachable addresses delay generation.

    If any condition succeeds the local section is included, otherwise the
    remote section. Global sections are always included. The previous config
    is kept as a timestamped backup until the new one is written, and is
    restored if the new one ends up missing or empty.
    """
    try:
        Path.home()
    except RuntimeError:
        fail("Unable to determine home directory")

    try:
        cfg = config.load_config()
        settings = config.settings_from_config(cfg, verbose=True if verbose else None)
        setup_logging(verbose=settings.verbose, force_reinit=True)

        probe = get_system_probe(settings)
        generator = SshConfigGenerator(settings, probe)
        generator.run()

        if monitor_interval is not None:
            if monitor_interval == USE_CONFIGURED_INTERVAL:
                monitor_interval = settings.monitor_interval

            signal.signal(signal.SIGINT, signal_handler)  # Ctrl+C
            signal.signal(signal.SIGTERM, signal_handler)  # Termination signal

            monitor(generator.run, probe, interval=monitor_interval)
    except (ConfigurationError, ProbeError, OSError) as e:
        fail(e)


if __name__ == "__main__":
    cli()
