import re

import numpy as np
import pandas as pd
import pytest

from bootstrap_se.errors import InvalidParameterError
from bootstrap_se.model.common import SampleSizeResult
from bootstrap_se.run import (
    MemoryTracker,
    close_run_logger,
    distribution_sd,
    format_sample_size_report,
    run_experiment,
    run_experiment_from_config,
    run_sample_size,
    setup_run_logger,
)
from bootstrap_se.settings import Config

LOG_LINE = re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} ")


def test_run_logger_format(tmp_path):
    path = tmp_path / "logs" / "run.log"
    logger = setup_run_logger(str(path))
    logger.info("first")
    logger.info("  indented")
    close_run_logger(logger)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert all(LOG_LINE.match(line) for line in lines)
    assert lines[0].endswith(" first")
    assert lines[1].endswith("   indented")


def test_run_logger_appends(tmp_path):
    path = tmp_path / "run.log"
    for message in ["one", "two"]:
        logger = setup_run_logger(str(path))
        logger.info(message)
        close_run_logger(logger)

    assert len(path.read_text(encoding="utf-8").splitlines()) == 2


def test_run_logger_replaces_previous_handlers(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    setup_run_logger(str(first))
    logger = setup_run_logger(str(second))
    logger.info("only second")
    close_run_logger(logger)

    assert first.read_text(encoding="utf-8") == ""
    assert "only second" in second.read_text(encoding="utf-8")


def test_run_logger_without_file(tmp_path):
    logger = setup_run_logger(None)
    logger.info("discarded")
    close_run_logger(logger)
    assert list(tmp_path.iterdir()) == []


def test_memory_tracker():
    tracker = MemoryTracker()
    tracker.start()
    data = np.ones(100000)
    used = tracker.stop()
    assert used >= data.nbytes


def test_distribution_sd():
    assert distribution_sd(0.1, 100) == pytest.approx(1.0)


def test_format_sample_size_report():
    result = SampleSizeResult(
        sample_size=25,
        clt_se_mean=0.0631,
        se_mean=0.2051,
        se_median=0.25,
        theoretical_se_mean=2.0,
        clt_sd_mean=1.996,
        bootstrap_sd_mean=2.051,
        bootstrap_sd_median=2.5,
    )
    assert format_sample_size_report(result) == [
        "Samples of size n = 25",
        "  SE Mean from Central Limit Theorem for n = 25: 0.06",
        "  SE Mean from Bootstrap Samples: 0.21",
        "  SE Median from Bootstrap Samples: 0.25",
    ]


def test_run_sample_size(large_population):
    config = Config(n_bootstrap=50, n_clt_samples=200, verbose=False)
    result = run_sample_size(large_population, 100, config, np.random.default_rng(0))

    assert result.sample_size == 100
    assert result.theoretical_se_mean == pytest.approx(1.0)

    # Standard errors of the distributions scale with 1 / sqrt(count)
    assert result.clt_se_mean == pytest.approx(1.0 / np.sqrt(200), rel=0.25)
    assert result.se_mean == pytest.approx(1.0 / np.sqrt(50), rel=0.4)
    assert result.se_median > 0

    # Standard deviations are on the sigma / sqrt(n) scale
    assert result.clt_sd_mean == pytest.approx(result.clt_se_mean * np.sqrt(200))
    assert result.clt_sd_mean == pytest.approx(result.theoretical_se_mean, rel=0.25)
    assert result.bootstrap_sd_mean == pytest.approx(
        result.theoretical_se_mean, rel=0.4
    )
    assert result.bootstrap_sd_median > result.bootstrap_sd_mean * 0.8


def test_run_experiment_is_reproducible():
    config = Config(
        population_size=500,
        n_bootstrap=10,
        n_clt_samples=20,
        sample_sizes=(5, 10),
        verbose=False,
    )
    first, population, memory_used = run_experiment(config)
    second, _, _ = run_experiment(config)

    assert list(first["sample_size"]) == [5, 10]
    assert len(population) == 500
    assert memory_used >= 0
    pd.testing.assert_frame_equal(first, second)


def test_run_experiment_from_config(tmp_path):
    outputs = run_experiment_from_config(
        "quick", {"output_dir": str(tmp_path), "verbose": False}
    )

    results_df = pd.read_csv(outputs["results_file"])
    assert list(results_df["sample_size"]) == [25, 100, 225, 400]
    assert list(results_df.columns) == [
        "sample_size",
        "clt_se_mean",
        "se_mean",
        "se_median",
        "theoretical_se_mean",
        "clt_sd_mean",
        "bootstrap_sd_mean",
        "bootstrap_sd_median",
    ]
    assert (results_df.drop(columns="sample_size") > 0).all().all()
    np.testing.assert_allclose(
        results_df["clt_sd_mean"], results_df["theoretical_se_mean"], rtol=0.3
    )

    assert (tmp_path / "se_vs_sample_size.png").exists()

    markdown = (tmp_path / "results.md").read_text(encoding="utf-8")
    assert "## Standard Errors by Sample Size" in markdown
    assert "## Sampling Variability vs Central Limit Theorem" in markdown
    assert "se_vs_sample_size.png" in markdown

    log_text = (tmp_path / "bootstrap.log").read_text(encoding="utf-8")
    log_lines = log_text.splitlines()
    assert all(LOG_LINE.match(line) for line in log_lines)
    assert "Generated population" in log_text
    assert "Samples of size n = 400" in log_text
    assert "Memory used for population generation and bootstrapping" in log_text


def test_run_experiment_without_plots_or_log(tmp_path):
    outputs = run_experiment_from_config(
        "quick",
        {
            "output_dir": str(tmp_path),
            "verbose": False,
            "save_plots": False,
            "log_file": "",
        },
    )
    assert outputs["plot_file"] is None
    assert outputs["log_file"] is None
    assert not (tmp_path / "se_vs_sample_size.png").exists()
    assert "Visualization Results" not in (tmp_path / "results.md").read_text(
        encoding="utf-8"
    )


def test_report_does_not_link_figure_from_earlier_run(tmp_path):
    run_experiment_from_config(
        "quick", {"output_dir": str(tmp_path), "verbose": False}
    )
    assert (tmp_path / "se_vs_sample_size.png").exists()

    outputs = run_experiment_from_config(
        "quick",
        {
            "output_dir": str(tmp_path),
            "verbose": False,
            "save_plots": False,
            "population_std": 1.0,
        },
    )
    assert outputs["plot_file"] is None
    markdown = (tmp_path / "results.md").read_text(encoding="utf-8")
    assert "se_vs_sample_size.png" not in markdown
    assert "Visualization Results" not in markdown


def test_invalid_counts_fail_before_logging(tmp_path):
    with pytest.raises(InvalidParameterError):
        run_experiment_from_config(
            "quick", {"output_dir": str(tmp_path), "n_bootstrap": 1, "verbose": False}
        )
    assert not (tmp_path / "bootstrap.log").exists()
