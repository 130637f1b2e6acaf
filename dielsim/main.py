# dielsim/main.py
"""
DielSim main entrypoint.

Default subcommand: menu
Usage examples:
    python -m dielsim
    python -m dielsim menu --config lab.yaml
    python -m dielsim run --material "Barium Titanate" --readings batio3.csv
    python -m dielsim --verbose run --material Quartz --readings quartz.csv --out-dir reports
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import argparse
import sys

from .apps.menu import MenuController
from .io.config import RunConfig, load_config
from .io.readings_csv import load_readings
from .utils import logger
from .workflows.simulate import run_batch

__all__ = ["main"]


# ------------------------------ run subcommand ------------------------------


@dataclass(slots=True)
class _RunArgs:
    material: str
    readings_csv: Path
    out_dir: Path | None


def _add_run_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "run", help="Analyse readings from a CSV file (columns T_C,C_pF)"
    )
    p.add_argument("--material", required=True, help="Sample name, e.g. 'Barium Titanate'")
    p.add_argument("--readings", required=True, type=Path, help="Readings CSV path")
    p.add_argument("--out-dir", type=Path, default=None, help="Report directory (overrides config)")
    p.set_defaults(cmd="run")
    return p


def _run_batch(args: _RunArgs, config: RunConfig, parser: argparse.ArgumentParser) -> int:
    registry = config.registry()
    if args.material not in registry:
        parser.error(
            f"unknown material {args.material!r} (choose from: {', '.join(registry.names())})"
        )
    try:
        readings = load_readings(args.readings_csv)
    except (OSError, ValueError) as exc:
        parser.error(f"cannot load readings: {exc}")

    if args.out_dir is not None:
        config = replace(config, out_dir=args.out_dir)
    logger.info(f"{len(readings)} reading(s) for {args.material} from {args.readings_csv}")
    run_batch(registry, args.material, readings, config)
    return 0


# ------------------------------ menu subcommand -----------------------------


def _add_menu_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser("menu", help="Interactive lab menu (default)")
    p.set_defaults(cmd="menu")
    return p


def _run_menu(config: RunConfig) -> int:
    return MenuController(config.registry(), config=config).run()


# --------------------------------- main() ------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dielsim",
        description="DielSim — dielectric constant and Curie temperature lab simulator",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML run configuration")
    parser.add_argument("--verbose", action="store_true", help="Debug output on stderr")
    sub = parser.add_subparsers(dest="cmd")
    _add_menu_subparser(sub)
    _add_run_subparser(sub)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    config = RunConfig()
    if ns.config is not None:
        try:
            config = load_config(ns.config)
        except (OSError, ValueError) as exc:
            parser.error(f"cannot load config {ns.config}: {exc}")
    logger.set_verbose(ns.verbose or config.verbose)
    if config.path is not None:
        logger.debug(f"config loaded from {config.path}")

    try:
        # If no subcommand given, default to 'menu'
        if ns.cmd in (None, "menu"):
            return _run_menu(config)
        if ns.cmd == "run":
            args = _RunArgs(
                material=str(ns.material),
                readings_csv=ns.readings,
                out_dir=ns.out_dir,
            )
            return _run_batch(args, config, parser)
    except KeyboardInterrupt:
        print("\nExiting program.")
        return 0

    parser.error("Unknown command (try: menu, run)")
    return 2


if __name__ == "__main__":
    sys.exit(main())
