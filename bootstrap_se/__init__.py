"""
Bootstrap estimation of the standard errors of the mean and median, with an
empirical Central Limit Theorem cross-check.
"""

__version__ = "0.1.0"
