"""
sshconfgen - Network-aware SSH client config generator.

Builds ~/.ssh/config from the fragments in ~/.ssh/config.d, choosing each
fragment's local or remote section based on the network you are on.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Make key components available at package level
from . import config, generator, logging_config

__all__ = ["config", "generator", "logging_config"]
