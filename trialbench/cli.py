"""Command-line interface for trialbench."""

import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from trialbench.configs import (
    DEFAULT_CONFIG,
    ConfigManager,
    benchmark_config_from,
    resolved_config,
)
from trialbench.reporters import TerminalReporter
from trialbench.runners import run_trials_sync
from trialbench.utils.errors import ConfigError, InvalidArgumentError, ResourceReleaseError
from trialbench.workloads import WORKLOADS, get_workload

try:
    TRIALBENCH_CLI_VERSION = package_version("trialbench")
except PackageNotFoundError:
    TRIALBENCH_CLI_VERSION = "0.1.0"

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WORKLOAD_FAILURE = 1
EXIT_USAGE = 2
EXIT_TIMEOUT = 3


def _cli_overrides(args: argparse.Namespace) -> dict:
    """Collect explicitly-passed CLI flags as a config overlay."""
    overrides: dict = {"benchmark": {}, "workload": {}, "logging": {}}
    for key, attr in (("trials", "trials"), ("reps", "reps"), ("timeout_seconds", "timeout")):
        if getattr(args, attr, None) is not None:
            overrides["benchmark"][key] = getattr(args, attr)
    for key in ("size", "seed"):
        if getattr(args, key, None) is not None:
            overrides["workload"][key] = getattr(args, key)
    if getattr(args, "workload", None):
        overrides["workload"]["name"] = args.workload
    if getattr(args, "log_level", None):
        overrides["logging"]["level"] = args.log_level
    return overrides


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_benchmark(args: argparse.Namespace) -> int:
    """Execute `trialbench run`."""
    try:
        config = ConfigManager.load_or_default(args.config, DEFAULT_CONFIG)
        config.update(_cli_overrides(args))
        log_level = config.get("logging.level", "WARNING")
        _configure_logging(log_level)
        bench, workload_cfg = benchmark_config_from(config)
        if args.save_config:
            ConfigManager.save(resolved_config(bench, workload_cfg, log_level), args.save_config)
            LOGGER.info("Resolved config written to %s", args.save_config)
        workload = get_workload(workload_cfg.name, size=workload_cfg.size, seed=workload_cfg.seed)
    except (ConfigError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    LOGGER.info(
        "Workload %s (size=%d, seed=%d), timeout %.1fs",
        workload_cfg.name,
        workload_cfg.size,
        workload_cfg.seed,
        bench.timeout_seconds,
    )
    with workload:
        try:
            summary = run_trials_sync(
                bench.trials,
                bench.reps,
                workload.do_rep,
                workload.end_trial,
                timeout_seconds=bench.timeout_seconds,
            )
        except InvalidArgumentError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        except asyncio.TimeoutError:
            print(f"Error: run exceeded {bench.timeout_seconds:.1f}s timeout", file=sys.stderr)
            return EXIT_TIMEOUT
        except ResourceReleaseError as exc:
            print(f"Error: resource release failed: {exc}", file=sys.stderr)
            return EXIT_WORKLOAD_FAILURE
        except Exception as exc:
            LOGGER.debug("Workload failure", exc_info=True)
            print(f"Error: workload failed: {exc}", file=sys.stderr)
            return EXIT_WORKLOAD_FAILURE

    title = f"{workload_cfg.name} {workload_cfg.size}x{workload_cfg.size}"
    TerminalReporter(show_trials=args.show_trials).render(summary, title=title)
    return EXIT_OK


def list_workloads(args: argparse.Namespace) -> int:
    """Execute `trialbench workloads`."""
    for name, factory in sorted(WORKLOADS.items()):
        doc = (factory.__doc__ or "").strip().splitlines()
        print(f"{name:12} {doc[0] if doc else ''}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="trialbench",
        description="Time repeated trials of an asynchronously-completing workload.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"trialbench {TRIALBENCH_CLI_VERSION}",
        help="Show CLI version and exit",
    )
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Run warm-up plus measured trials and print mean/min")
    run.add_argument("--config", "-c", help="YAML or JSON config file")
    run.add_argument("--workload", choices=sorted(WORKLOADS), help="Workload to benchmark")
    run.add_argument("--size", type=int, help="Matrix dimension for the matmul workload")
    run.add_argument("--seed", type=int, help="Random seed for workload operands")
    run.add_argument("--trials", type=int, help="Number of measured trials (default: 5)")
    run.add_argument("--reps", type=int, help="Repetitions per trial (default: 50)")
    run.add_argument(
        "--timeout",
        type=float,
        help="Overall wall-clock allowance in seconds (default: 60.0)",
    )
    run.add_argument(
        "--save-config",
        help="Write the resolved settings to this .yaml/.json file before running",
    )
    run.add_argument("--show-trials", action="store_true", help="Print per-trial times")
    run.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    run.set_defaults(func=run_benchmark)

    workloads = sub.add_parser("workloads", help="List available workloads")
    workloads.set_defaults(func=list_workloads)

    return parser


def main(argv=None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "command", None):
        parser.print_help()
        return 0
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
