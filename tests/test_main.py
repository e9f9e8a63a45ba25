import main


def test_collect_overrides():
    args = main.build_parser().parse_args(
        ["--sample_sizes", "10,20", "--seed", "7", "--no_plots", "--quiet"]
    )
    assert main.collect_overrides(args) == {
        "sample_sizes": [10, 20],
        "random_seed": 7,
        "save_plots": False,
        "verbose": False,
    }


def test_main_runs_quick_experiment(tmp_path):
    status = main.main(
        ["--config", "quick", "--output_dir", str(tmp_path), "--no_plots", "--quiet"]
    )
    assert status == 0
    assert (tmp_path / "se_results.csv").exists()


def test_main_reports_invalid_parameters(tmp_path, capsys):
    status = main.main(
        [
            "--config",
            "quick",
            "--n_bootstrap",
            "1",
            "--output_dir",
            str(tmp_path),
            "--quiet",
        ]
    )
    assert status == 1
    assert "n_bootstrap must be at least 2" in capsys.readouterr().err


def test_main_reports_invalid_population_size(tmp_path, capsys):
    status = main.main(
        ["--population_size", "0", "--output_dir", str(tmp_path), "--quiet"]
    )
    assert status == 1
    assert "population_size must be positive" in capsys.readouterr().err
