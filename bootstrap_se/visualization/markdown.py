"""
Markdown report generation module

Generates Markdown reports of experiment results.
"""

import os
import numpy as np
import pandas as pd
from datetime import datetime
from typing import List, Optional

from ..settings import Config


def _generate_header() -> List[str]:
    """Generate Markdown report header"""
    return [
        "# Bootstrap Standard Error Results Report",
        "",
        f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        "",
    ]


def _generate_config_section(
    config: Config, population: Optional[np.ndarray]
) -> List[str]:
    """Generate experiment configuration section"""
    content = [
        "## Experiment Configuration",
        "",
        f"- **Population size**: {config.population_size}",
        f"- **Population distribution**: Normal(mean={config.population_mean}, std={config.population_std})",
        f"- **Bootstrap resamples per sample size**: {config.n_bootstrap}",
        f"- **Samples for the CLT estimate**: {config.n_clt_samples}",
        f"- **Random seed**: {config.random_seed} (fixed for reproducibility)",
    ]
    if population is not None and len(population) > 0:
        content.extend(
            [
                f"- **Observed population mean**: {np.mean(population):.4f}",
                f"- **Observed population std**: {np.std(population):.4f}",
            ]
        )
    content.append("")
    return content


def _generate_results_table(results_df: pd.DataFrame) -> List[str]:
    """Generate results table section"""
    content = [
        "## Standard Errors by Sample Size",
        "",
        "Standard errors of the distributions of sample means and medians.",
        "They shrink with the number of samples drawn as well as with n.",
        "",
        "| n | SE Mean (CLT) | SE Mean (Bootstrap) | SE Median (Bootstrap) |",
        "|---|---|---|---|",
    ]
    for _, row in results_df.iterrows():
        content.append(
            f"| {int(row['sample_size'])} "
            f"| {row['clt_se_mean']:.4f} "
            f"| {row['se_mean']:.4f} "
            f"| {row['se_median']:.4f} |"
        )
    content.append("")
    return content


def _generate_variability_table(results_df: pd.DataFrame) -> List[str]:
    """Generate sampling variability section (comparable with σ/√n)"""
    content = [
        "## Sampling Variability vs Central Limit Theorem",
        "",
        "Standard deviations of the same distributions (SE × √count),",
        "compared with the closed-form σ/√n.",
        "",
        "| n | σ/√n | SD Means (CLT) | SD Means (Bootstrap) | SD Medians (Bootstrap) |",
        "|---|---|---|---|---|",
    ]
    for _, row in results_df.iterrows():
        content.append(
            f"| {int(row['sample_size'])} "
            f"| {row['theoretical_se_mean']:.4f} "
            f"| {row['clt_sd_mean']:.4f} "
            f"| {row['bootstrap_sd_mean']:.4f} "
            f"| {row['bootstrap_sd_median']:.4f} |"
        )
    content.append("")
    return content


def _generate_visualization_section(
    output_dir: str, plot_file: Optional[str]
) -> List[str]:
    """Generate visualization results section (only for a figure of this run)"""
    if not plot_file or not os.path.exists(plot_file):
        return []
    relative_path = os.path.relpath(plot_file, output_dir).replace(os.sep, "/")
    return [
        "## Visualization Results",
        "",
        f"![Sampling Variability vs Sample Size](./{relative_path})",
        "",
        "*Figure 1: Standard deviation of each statistic against sample size. The dashed line is σ/√n.*",
        "",
    ]


def generate_results_markdown(
    results_df: pd.DataFrame,
    config: Config,
    output_dir: str = "results",
    population: Optional[np.ndarray] = None,
    memory_used: Optional[int] = None,
    plot_file: Optional[str] = None,
    filename: str = "results.md",
) -> str:
    """
    Generate Markdown report of experiment results

    Args:
        results_df: Results dataframe (one row per sample size)
        config: Configuration object
        output_dir: Output directory
        population: Generated population (adds observed moments if given)
        memory_used: Bytes allocated during the run
        plot_file: Figure written by this run (no figure section if None)
        filename: Report file name

    Returns:
        Path of the written Markdown file
    """
    markdown_content = _generate_header()
    markdown_content.extend(_generate_config_section(config, population))
    markdown_content.extend(_generate_results_table(results_df))
    markdown_content.extend(_generate_variability_table(results_df))
    markdown_content.extend(_generate_visualization_section(output_dir, plot_file))

    if memory_used is not None:
        markdown_content.extend(
            [
                "## Resource Usage",
                "",
                f"Memory used for population generation and bootstrapping: {memory_used} bytes",
                "",
            ]
        )

    os.makedirs(output_dir, exist_ok=True)
    markdown_file = os.path.join(output_dir, filename)
    with open(markdown_file, "w", encoding="utf-8") as f:
        f.write("\n".join(markdown_content))

    return markdown_file
