"""
Central Limit Theorem estimators
"""

from .estimator import CLTEstimator, empirical_clt, theoretical_clt_se

__all__ = ["CLTEstimator", "empirical_clt", "theoretical_clt_se"]
