"""Command-line interface for microbench.

Provides the `microbench` command with subcommands for:
- Benchmarking a zero-argument callable
- Showing available clock sources
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from typing import Any

from microbench.clock import clock_info
from microbench.options import ConfigError, load_options
from microbench.report import format_results, format_results_table
from microbench.results import Unit
from microbench.sampler import SamplerProgress, run

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging level."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_target(target: str) -> Callable[[], Any]:
    """Resolve a "module:attribute" reference to a callable.

    Args:
        target: Module path and (possibly dotted) attribute, e.g. "os:getpid".

    Returns:
        The referenced callable.

    Raises:
        ValueError: If `target` is not of the form "module:attribute".
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute does not exist.
        TypeError: If the attribute is not callable.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Target must be 'module:attribute', got '{target}'")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not callable(obj):
        raise TypeError(f"Target '{target}' is not callable")
    return obj


def cmd_run(args: argparse.Namespace) -> int:
    """Benchmark a callable."""
    try:
        options = load_options(
            args.config,
            iterations=args.iterations,
            warmup_iterations=args.warmup,
            min_samples=args.min_samples,
            max_samples=args.max_samples,
            max_rsd=args.max_rsd,
            max_duration=args.max_duration,
            verbose=True if args.verbose else None,
        )
    except (ConfigError, OSError) as e:
        print(f"Error loading configuration: {e}")
        return 1
    if args.no_max_duration:
        options = options.replace(max_duration=None)

    setup_logging(options.verbose)

    try:
        operation = resolve_target(args.target)
    except (ValueError, ImportError, AttributeError, TypeError) as e:
        print(f"Error: cannot resolve target: {e}")
        return 1

    # Progress callback
    def progress(p: SamplerProgress) -> None:
        print(
            f"  [{args.target}] sample {p.index}: +/- {p.rsd:.2f}%",
            end="\r",
            flush=True,
        )

    quiet = args.quiet or options.verbose
    results = run(options, operation, progress_callback=None if quiet else progress)

    # Clear progress line and print results
    if not quiet:
        print(" " * 60, end="\r")
    unit = Unit(args.unit)
    formatted = format_results(results, args.size, unit, args.binary)
    print(f"{args.target}: {formatted}")
    if args.table:
        print(format_results_table(results))
    return 0


def cmd_clocks(args: argparse.Namespace) -> int:
    """Show available clock sources."""
    print("Available Clocks")
    print("=" * 70)
    print(f"{'Name':<14} {'Resolution':>12} {'Monotonic':<10} {'Default':<8} Implementation")
    print("-" * 70)

    for info in clock_info():
        monotonic = "yes" if info.monotonic else "no"
        default = "*" if info.default else ""
        print(
            f"{info.name:<14} {info.resolution:>12.3g} {monotonic:<10} "
            f"{default:<8} {info.implementation}"
        )

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="microbench",
        description="Adaptive micro-benchmarking of Python callables",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Benchmark a callable")
    run_parser.add_argument(
        "target",
        help="Zero-argument callable to benchmark, as module:attribute",
    )
    run_parser.add_argument(
        "--config",
        help="Path to a YAML file with benchmark options",
    )
    run_parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        help="Invocations per sample (default: 1000)",
    )
    run_parser.add_argument(
        "--warmup",
        type=int,
        help="Number of warmup invocations (default: 10)",
    )
    run_parser.add_argument(
        "--min-samples",
        type=int,
        help="Minimum number of samples (default: 3)",
    )
    run_parser.add_argument(
        "--max-samples",
        type=int,
        help="Maximum number of samples (default: 50)",
    )
    run_parser.add_argument(
        "--max-rsd",
        type=float,
        help="Target relative standard deviation in percent (default: 5.0)",
    )
    run_parser.add_argument(
        "--max-duration",
        type=float,
        help="Time budget for measurement in seconds (default: 5.0)",
    )
    run_parser.add_argument(
        "--no-max-duration",
        action="store_true",
        help="Disable the time budget",
    )
    run_parser.add_argument(
        "--size",
        type=float,
        help="Units processed per invocation, to report throughput",
    )
    run_parser.add_argument(
        "--unit",
        choices=[u.value for u in Unit],
        default=Unit.NONE.value,
        help="Unit of --size, also used for the reported rate (default: none)",
    )
    run_parser.add_argument(
        "--binary",
        action="store_true",
        help="Report throughput with binary prefixes (Ki, Mi, Gi)",
    )
    run_parser.add_argument(
        "--table",
        action="store_true",
        help="Print a detailed summary table",
    )
    run_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log sampling diagnostics",
    )
    run_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    run_parser.set_defaults(func=cmd_run)

    # clocks command
    clocks_parser = subparsers.add_parser("clocks", help="Show available clocks")
    clocks_parser.set_defaults(func=cmd_clocks)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
