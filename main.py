import sys
import argparse
from typing import Dict, Any, List


def _parse_sample_sizes(value: str) -> List[int]:
    """Parse a comma-separated list of sample sizes ("25,100,225")"""
    try:
        return [int(item) for item in value.split(",") if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"sample sizes must be comma-separated integers, got '{value}'"
        )


def build_parser() -> argparse.ArgumentParser:
    """Command line parser"""
    parser = argparse.ArgumentParser(
        description="Bootstrap Standard Error Experiment (mean and median, with CLT cross-check)"
    )

    # Configuration name (optional)
    parser.add_argument(
        "--config",
        type=str,
        default="default",
        choices=["default", "quick", "precise"],
        help="Configuration name (default)",
    )

    # Overrides
    parser.add_argument("--population_size", type=int, help="Population size")
    parser.add_argument("--population_mean", type=float, help="Population mean")
    parser.add_argument("--population_std", type=float, help="Population std")
    parser.add_argument(
        "--sample_sizes",
        type=_parse_sample_sizes,
        help="Comma-separated sample sizes, e.g. 25,100,225,400",
    )
    parser.add_argument(
        "--n_bootstrap", type=int, help="Bootstrap resamples per sample size"
    )
    parser.add_argument(
        "--n_clt_samples", type=int, help="Samples drawn for the CLT estimate"
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--n_jobs",
        type=int,
        help="Number of parallel jobs (1: sequential, -1: all cores)",
    )
    parser.add_argument("--output_dir", type=str, help="Output directory")
    parser.add_argument(
        "--log_file",
        type=str,
        help="Log file (relative paths are placed in the output directory)",
    )
    parser.add_argument(
        "--no_plots", action="store_true", help="Skip figure generation"
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress console output")
    return parser


def collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Config overrides from parsed arguments (unset arguments are skipped)"""
    mapping = {
        "population_size": args.population_size,
        "population_mean": args.population_mean,
        "population_std": args.population_std,
        "sample_sizes": args.sample_sizes,
        "n_bootstrap": args.n_bootstrap,
        "n_clt_samples": args.n_clt_samples,
        "random_seed": args.seed,
        "n_jobs": args.n_jobs,
        "output_dir": args.output_dir,
        "log_file": args.log_file,
    }
    overrides = {key: value for key, value in mapping.items() if value is not None}
    if args.no_plots:
        overrides["save_plots"] = False
    if args.quiet:
        overrides["verbose"] = False
    return overrides


def main(argv: List[str] = None) -> int:
    """Main execution function"""
    from bootstrap_se.errors import BootstrapSEError
    from bootstrap_se.run import run_experiment_from_config

    args = build_parser().parse_args(argv)
    overrides = collect_overrides(args)

    try:
        run_experiment_from_config(args.config, overrides)
    except BootstrapSEError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
