"""
Bootstrap methods for standard error estimation
"""

from .resampler import resample
from .base_bootstrap import BaseBootstrap
from .standard_bootstrap import StandardBootstrap, bootstrap

__all__ = [
    "resample",
    "BaseBootstrap",
    "StandardBootstrap",
    "bootstrap",
]
