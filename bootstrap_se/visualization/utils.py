"""
Common visualization utilities module

Provides common functionality for plot styles and saving figures.
"""

import os
import matplotlib
import matplotlib.pyplot as plt
from typing import Optional, Tuple

# Non-interactive backend, figures are only written to files
matplotlib.use("Agg")


def setup_plot_style(figsize: Tuple[int, int] = (10, 6)) -> None:
    """Common function to set basic plot style"""
    plt.figure(figsize=figsize)
    plt.grid(True, alpha=0.3)


def save_plot(save_path: Optional[str], dpi: int = 300) -> None:
    """Common function to save plot"""
    if save_path:
        dir_path = os.path.dirname(save_path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)

        plt.savefig(save_path, dpi=dpi, bbox_inches="tight")

        if not os.path.exists(save_path):
            print(f"Warning: Figure file was not created: {save_path}")
    else:
        print("Warning: save_path is None, figure will not be saved")
    plt.close()
