"""Command line entry point for the fractal garden."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fractalgarden import config
from fractalgarden.errors import ConfigurationError
from fractalgarden.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive motif fractal garden")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file")
    parser.add_argument("--motifs", type=str, default=None, help="Comma separated motifs")
    parser.add_argument("--fractals", type=int, default=None, help="Initial seed count")
    parser.add_argument("--depth", type=int, default=None, help="Branch generations (1-12)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--animate", action="store_true", help="Regrow continuously")
    parser.add_argument("--debug", action="store_true", help="Draw skeleton and overlay text")
    parser.add_argument("--shapes", action="store_true", help="Draw palette circles instead of motifs")
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--log-file", type=str, default=None)
    return parser


def resolve_config(argv: Optional[List[str]] = None) -> config.GardenConfig:
    args = build_parser().parse_args(argv)
    cfg = config.load_config(args.config) if args.config else config.GardenConfig()

    overrides = {
        "motif_text": args.motifs,
        "fractal_count": args.fractals,
        "depth": args.depth,
        "seed": args.seed,
        "log_level": args.log_level,
        "log_file": args.log_file,
    }
    if args.animate:
        overrides["animate"] = True
    if args.debug:
        overrides["debug"] = True
    if args.shapes:
        overrides["use_motifs"] = False
    return config.config_from_mapping({k: v for k, v in overrides.items() if v is not None}, cfg)


def main(argv: Optional[List[str]] = None) -> None:
    try:
        cfg = resolve_config(argv)
    except ConfigurationError as e:
        print(f"fractalgarden: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(cfg.log_level, cfg.log_file)

    # pygame is only needed once there is a window to open
    from fractalgarden.engine import Engine

    Engine(cfg).run()


if __name__ == "__main__":
    main()
