"""
Configuration management for sshconfgen.

This module handles loading, validation, and default configuration values
for the sshconfgen application.
"""

from dataclasses import dataclass, field
from pathlib import Path

import toml

# --- App Constants ---
APP_NAME = "sshconfgen"
CONFIG_EXTENSION = "sshconf"
LOG_FILE_NAME = f"{APP_NAME}.log"

# --- Logging Constants ---
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Filesystem Constants ---
DEFAULT_SSH_DIR = "~/.ssh"
DEFAULT_FRAGMENT_DIR = "config.d"
DEFAULT_OUTPUT_FILE = "config"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
BACKUP_SUFFIX = "orig"

# --- Network Operation Constants ---
DEFAULT_MONITOR_INTERVAL = 20  # seconds between SSID polls
DEFAULT_PING_ATTEMPTS = 2
DEFAULT_PING_TIMEOUT = 1  # seconds per attempt
ARP_TIMEOUT = None  # rely on the OS default
DEFAULT_VERBOSE = False
DEFAULT_SKIP_EMPTY_PING_TARGETS = False

# Default configuration for the application
DEFAULT_CONFIG = {
    "settings": {
        "verbose": DEFAULT_VERBOSE,
        "monitor_interval": DEFAULT_MONITOR_INTERVAL,
        "ssh_dir": DEFAULT_SSH_DIR,
        "fragment_dir": DEFAULT_FRAGMENT_DIR,
        "output_file": DEFAULT_OUTPUT_FILE,
        "extension": CONFIG_EXTENSION,
        "skip_empty_ping_targets": DEFAULT_SKIP_EMPTY_PING_TARGETS,
        "ping_attempts": DEFAULT_PING_ATTEMPTS,
        "ping_timeout": DEFAULT_PING_TIMEOUT,
    },
}


class ConfigurationError(Exception):
    """Raised when the environment or config file prevents a run."""


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings, threaded through the pipeline."""

    verbose: bool = DEFAULT_VERBOSE
    monitor_interval: int = DEFAULT_MONITOR_INTERVAL
    ssh_dir: Path = field(default_factory=lambda: Path(DEFAULT_SSH_DIR).expanduser())
    fragment_dir: str = DEFAULT_FRAGMENT_DIR
    output_file: str = DEFAULT_OUTPUT_FILE
    extension: str = CONFIG_EXTENSION
    skip_empty_ping_targets: bool = DEFAULT_SKIP_EMPTY_PING_TARGETS
    ping_attempts: int = DEFAULT_PING_ATTEMPTS
    ping_timeout: int = DEFAULT_PING_TIMEOUT

    @property
    def fragment_path(self) -> Path:
        return self.ssh_dir / self.fragment_dir

    @property
    def output_path(self) -> Path:
        return self.ssh_dir / self.output_file


def get_config_path():
    """Gets the path to the configuration file."""
    return Path.home() / ".config" / APP_NAME / "config.toml"


def get_log_file():
    """Gets the path to the persistent log file."""
    return Path.home() / ".cache" / APP_NAME / LOG_FILE_NAME


def load_config():
    """Loads the configuration from the TOML file."""
    path = get_config_path()
    if not path.exists():
        # Create a default config if one doesn't exist
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            toml.dump(DEFAULT_CONFIG, f)
        return DEFAULT_CONFIG

    try:
        with open(path, "r") as f:
            config = toml.load(f)
    except toml.TomlDecodeError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    # Import logging from our centralized module
    from .logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug(f"Loaded settings: {sorted(config.get('settings', {}).keys())}")
    return config


def _bool_setting(raw, key):
    value = raw[key]
    if not isinstance(value, bool):
        raise ConfigurationError(f"Invalid boolean setting {key}: {value!r}")
    return value


def settings_from_config(config_data, verbose=None):
    """
    Build a Settings object from a loaded config dictionary.

    Missing keys fall back to their defaults. ``verbose`` overrides the
    file value when given (the CLI passes True for --verbose).
    """
    raw = dict(DEFAULT_CONFIG["settings"])
    raw.update(config_data.get("settings", {}))

    try:
        monitor_interval = int(raw["monitor_interval"])
        ping_attempts = int(raw["ping_attempts"])
        ping_timeout = int(raw["ping_timeout"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    if monitor_interval < 0 or ping_attempts < 1 or ping_timeout < 1:
        raise ConfigurationError(
            "monitor_interval must be >= 0, ping_attempts and ping_timeout >= 1"
        )

    return Settings(
        verbose=_bool_setting(raw, "verbose") if verbose is None else verbose,
        monitor_interval=monitor_interval,
        ssh_dir=Path(str(raw["ssh_dir"])).expanduser(),
        fragment_dir=str(raw["fragment_dir"]),
        output_file=str(raw["output_file"]),
        extension=str(raw["extension"]).lstrip("."),
        skip_empty_ping_targets=_bool_setting(raw, "skip_empty_ping_targets"),
        ping_attempts=ping_attempts,
        ping_timeout=ping_timeout,
    )


if __name__ == "__main__":
    config = load_config()
    import json

    print(json.dumps(config, indent=4))
