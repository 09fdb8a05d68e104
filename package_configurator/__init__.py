"""Post-install package configuration for a freshly bootstrapped Arch system.

Runs inside the new root after the selected packages are installed:
- One routine per supported package, dispatched from a fixed table
- Every command goes through an injectable runner (dry-run capable)
- First failure stops the pass and is reported as a typed outcome
- Centralized logging
"""

from .config import Configuration, ShadowsocksConfig, load_configuration
from .configurator import ConfigureResult, RoutineOutcome, configure
from .errors import CommandError, ConfigurationError

__all__ = [
    "CommandError",
    "ConfigurationError",
    "Configuration",
    "ConfigureResult",
    "RoutineOutcome",
    "ShadowsocksConfig",
    "configure",
    "load_configuration",
]
