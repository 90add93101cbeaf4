from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .config.loader import load_settings
from .observability.logging import configure_logging, get_logger
from .simulate import run_simulation


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fault-throttle",
        description="Run a soak simulation of many threads sharing one throttle.",
    )

    p.add_argument("--config", type=Path, default=None, help="YAML config (default: ./config.yaml or ./config/config.yaml)")
    p.add_argument("--overhead", type=float, default=None, help="attempts allowed per recent success (default 2.0)")
    p.add_argument("--zone", default=None, help="take overhead from zones.<ZONE> in the config")

    p.add_argument("--workers", type=int, default=None)
    p.add_argument("--duration-s", type=float, default=None, help="simulated seconds to run")
    p.add_argument("--speedup", type=float, default=None, help="how much faster than real time the clock runs")
    p.add_argument("--failure-rate", type=float, default=None)
    p.add_argument("--work-ms", type=float, default=None, help="real time each simulated call sleeps")
    p.add_argument("--seed", type=int, default=None)

    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None)
    p.add_argument("--console-logs", action="store_true", help="human-readable logs instead of JSON")

    return p


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    o: dict[str, Any] = {}

    if args.overhead is not None:
        if args.zone is not None:
            o.setdefault("zones", {})[args.zone] = {"overhead": args.overhead}
        else:
            o.setdefault("throttle", {})["overhead"] = args.overhead

    sim_fields = {
        "workers": args.workers,
        "duration_s": args.duration_s,
        "speedup": args.speedup,
        "failure_rate": args.failure_rate,
        "work_ms": args.work_ms,
        "seed": args.seed,
    }
    for key, value in sim_fields.items():
        if value is not None:
            o.setdefault("simulation", {})[key] = value

    if args.log_level is not None:
        o.setdefault("logging", {})["level"] = args.log_level
    if args.console_logs:
        o.setdefault("logging", {})["json"] = False

    return o


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    project_root = Path.cwd()
    loaded = load_settings(project_root=project_root, config_path=args.config, cli_overrides=_cli_overrides(args))
    settings = loaded.settings

    configure_logging(level=settings.logging.level, json_logs=settings.logging.json_logs)
    logger = get_logger(component="app")
    logger.info("config.loaded", config_path=str(loaded.config_path) if loaded.config_path else None)

    if args.zone is not None and args.zone in settings.zones:
        overhead = settings.zones[args.zone].overhead
    else:
        overhead = settings.throttle.overhead

    report = run_simulation(settings.simulation, overhead=overhead)
    json.dump(report.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
