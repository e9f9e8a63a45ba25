"""
Settings module for configuration and population generation
"""

# Config related
from .config import (
    Config,
    get_config,
    CONFIG_PRESETS,
)

# Common functions
from .functions import print_config_summary

# Population generator
from .population import (
    generate_population,
    generate_population_from_config,
)

__all__ = [
    # Config
    "Config",
    "get_config",
    "CONFIG_PRESETS",
    # Functions
    "print_config_summary",
    # Population
    "generate_population",
    "generate_population_from_config",
]
