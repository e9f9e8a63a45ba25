"""
Plot generation module
"""

import matplotlib.pyplot as plt
import pandas as pd
from typing import Optional

from ..settings import Config
from .config import VisualizationConfig, get_labels
from .utils import setup_plot_style, save_plot


def create_se_comparison_plot(
    results_df: pd.DataFrame,
    save_path: Optional[str] = None,
    config: Optional[Config] = None,
) -> None:
    """
    Plot the sampling variability of each statistic against sample size

    Only series on the sigma / sqrt(n) scale are drawn.

    Args:
        results_df: Results with sample_size and the *_sd_* columns
        save_path: Output image path
        config: Configuration object (figure size and dpi)
    """
    if config is None:
        config = Config()

    if results_df.empty:
        raise ValueError("results_df is empty, nothing to plot")

    setup_plot_style(config.figsize)
    series = VisualizationConfig.SD_SERIES
    for i, (column, label) in enumerate(series.items()):
        if column not in results_df.columns:
            continue
        plt.plot(
            results_df["sample_size"],
            results_df[column],
            label=label,
            color=VisualizationConfig.COLORS[i],
            marker=VisualizationConfig.MARKERS[i],
            linestyle=VisualizationConfig.LINESTYLES[i],
        )

    plt.xlabel(get_labels("sd_x"))
    plt.ylabel(get_labels("sd_y"))
    plt.title(get_labels("sd_title"))
    plt.legend()
    save_plot(save_path, dpi=config.dpi)
