"""
Visualization configuration and constants module
"""


class VisualizationConfig:
    """Constants class for visualization configuration"""

    # Result column -> legend label. All series are standard deviations of
    # one statistic, comparable with sigma / sqrt(n).
    SD_SERIES = {
        "theoretical_se_mean": "Theoretical SE Mean (σ/√n)",
        "clt_sd_mean": "SD of Sample Means (Central Limit Theorem)",
        "bootstrap_sd_mean": "SD of Sample Means (Bootstrap)",
        "bootstrap_sd_median": "SD of Sample Medians (Bootstrap)",
    }

    COLORS = ["black", "blue", "green", "red"]
    MARKERS = [None, "o", "s", "^"]
    LINESTYLES = ["--", "-", "-", "-"]

    LABELS = {
        "sd_x": "Sample Size (n)",
        "sd_y": "Standard Deviation of the Statistic",
        "sd_title": "Sampling Variability vs Sample Size",
    }


def get_labels(key: str) -> str:
    """Common function to get English labels"""
    return VisualizationConfig.LABELS.get(key, key)
