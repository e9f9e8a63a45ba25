"""
Experiment execution module

Generates the population, computes standard errors for every configured
sample size, and saves and visualizes the results.
"""

import logging
import os
import numpy as np
import pandas as pd
from typing import Dict, Tuple, Optional, Any
from datetime import datetime
from tqdm import tqdm

from ..settings import get_config, Config, print_config_summary
from ..settings import generate_population_from_config
from ..visualization import create_se_comparison_plot, generate_results_markdown
from .common import (
    run_sample_size,
    format_sample_size_report,
    MemoryTracker,
    RESULT_COLUMNS,
)
from .log import LOGGER_NAME, setup_run_logger, close_run_logger


def run_experiment(
    config: Config, logger: Optional[logging.Logger] = None
) -> Tuple[pd.DataFrame, np.ndarray, int]:
    """
    Function to execute the standard error experiment

    Args:
        config: Configuration object
        logger: Run logger (the package run logger if None)

    Returns:
        Tuple[pd.DataFrame, np.ndarray, int]:
        (Results dataframe with one row per sample size, population, bytes allocated)
    """
    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)

    memory = MemoryTracker()
    memory.start()

    try:
        population = generate_population_from_config(config)
        logger.info("Generated population")

        # Population seed and resampling seed stream are kept apart
        rng = np.random.default_rng([config.random_seed, 1])

        results = []
        start_time = datetime.now()

        pbar = tqdm(
            config.sample_sizes,
            desc="Running sample sizes",
            unit="n",
            ncols=80,
            colour="green",
            disable=not config.verbose,
        )
        for sample_size in pbar:
            result = run_sample_size(population, sample_size, config, rng)
            report_lines = format_sample_size_report(result)
            for line in report_lines:
                logger.info(line)
            if config.verbose:
                tqdm.write("\n".join(report_lines))
            results.append(result.model_dump())
    finally:
        memory_used = memory.stop()

    logger.info(
        f"Memory used for population generation and bootstrapping: {memory_used} bytes"
    )

    duration = datetime.now() - start_time
    if config.verbose:
        print(f"\nExperiment completed: {duration.total_seconds():.2f} seconds")

    results_df = pd.DataFrame(results, columns=RESULT_COLUMNS)
    return results_df, population, memory_used


def run_experiment_from_config(
    config_name: str = "default",
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Function to execute the experiment and save its outputs

    Writes se_results.csv, se_vs_sample_size.png (if config.save_plots) and
    results.md into config.output_dir.

    Args:
        config_name: Base configuration name (default: "default")
        overrides: Dictionary of settings to override

    Returns:
        Dictionary with results_df, config, output files and memory usage
    """
    config = get_config(config_name, overrides)

    if config.verbose:
        print("=" * 60)
        print("Bootstrap Standard Error Experiment")
        print("=" * 60)
        print_config_summary(config)

    output_dir = config.output_dir
    os.makedirs(output_dir, exist_ok=True)

    log_path = None
    if config.log_file:
        log_path = (
            config.log_file
            if os.path.isabs(config.log_file)
            else os.path.join(output_dir, config.log_file)
        )
    logger = setup_run_logger(log_path)
    try:
        results_df, population, memory_used = run_experiment(config, logger)
    finally:
        close_run_logger(logger)

    results_file = os.path.join(output_dir, "se_results.csv")
    results_df.to_csv(results_file, index=False)
    if config.verbose:
        print(f"\nResults saved: {results_file}")

    plot_file = None
    if config.save_plots:
        plot_file = os.path.join(output_dir, "se_vs_sample_size.png")
        create_se_comparison_plot(results_df, save_path=plot_file, config=config)
        if config.verbose:
            print(f"Figure saved: {plot_file}")

    markdown_file = generate_results_markdown(
        results_df,
        config,
        output_dir,
        population=population,
        memory_used=memory_used,
        plot_file=plot_file,
    )
    if config.verbose:
        print(f"Report saved: {markdown_file}")

    return {
        "config": config,
        "results_df": results_df,
        "memory_used": memory_used,
        "results_file": results_file,
        "plot_file": plot_file,
        "markdown_file": markdown_file,
        "log_file": log_path,
    }
