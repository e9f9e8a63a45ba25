"""
Visualization and report generation module
"""

# Configuration and constants
from .config import VisualizationConfig, get_labels

# Common utilities
from .utils import setup_plot_style, save_plot

# Markdown generation
from .markdown import generate_results_markdown

# Plots
from .plots import create_se_comparison_plot

__all__ = [
    "VisualizationConfig",
    "get_labels",
    "setup_plot_style",
    "save_plot",
    "generate_results_markdown",
    "create_se_comparison_plot",
]
