#!/usr/bin/env python3
"""
sensorchips command line

    sensorchips chips                      list chip prefixes
    sensorchips features lm78              feature table of one chip
    sensorchips lookup lm78 IN0_MIN        register number and access mode
    sensorchips serve --port 8000          HTTP lookup service

Configuration comes from --config (YAML) with command line overrides on top.
--json may be given before or after the subcommand. Unknown chips or features,
and malformed chip declaration files, exit with status 2; an invalid config
file exits with status 1.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .catalog import RegisterCatalog
from .config import LOG_LEVELS, CatalogConfig, build_catalog
from .errors import CatalogError

logger = logging.getLogger("sensorchips")


def _feature_row(chip, feature) -> dict:
    return {
        "name": feature.name,
        "number": feature.number,
        "mode": feature.mode.value,
        "kind": feature.kind.value,
        "mapping": chip.mapping_of(feature.name),
    }


def cmd_chips(catalog: RegisterCatalog, args: argparse.Namespace) -> int:
    if args.json:
        print(json.dumps({"chips": list(catalog.prefixes())}, indent=2))
        return 0
    for chip in catalog:
        note = f"  (similar to {chip.similar_to})" if chip.similar_to else ""
        print(f"{chip.prefix:<14}{len(chip):>3} features{note}")
    return 0


def cmd_features(catalog: RegisterCatalog, args: argparse.Namespace) -> int:
    chip = catalog.chip(args.prefix)
    rows = [_feature_row(chip, f) for f in chip.features]
    if args.json:
        print(json.dumps({"prefix": chip.prefix, "features": rows}, indent=2))
        return 0
    print(f"{chip.prefix}" + (f" - {chip.description}" if chip.description else ""))
    for row in rows:
        mapping = row["mapping"] or ""
        print(f"  {row['name']:<18}{row['number']:>4}  {row['mode']:<5}{row['kind']:<12}{mapping}")
    return 0


def cmd_lookup(catalog: RegisterCatalog, args: argparse.Namespace) -> int:
    chip = catalog.chip(args.prefix)
    feature = chip.feature(args.feature)
    if args.json:
        print(json.dumps({"prefix": chip.prefix, **_feature_row(chip, feature)}, indent=2))
    else:
        print(f"{feature.number} {feature.mode.value}")
    return 0


def cmd_serve(catalog: RegisterCatalog, args: argparse.Namespace, config: CatalogConfig) -> int:
    import uvicorn

    from .api import create_app

    logger.info(f"serving {len(catalog)} chips on {config.host}:{config.port}")
    uvicorn.run(create_app(catalog), host=config.host, port=config.port, access_log=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sensorchips", description="sensor chip register catalog")
    parser.add_argument("--config", "-c", type=Path, default=Path("sensorchips.yaml"),
                        help="YAML configuration file (default: sensorchips.yaml)")
    parser.add_argument("--chips", action="append", metavar="FILE",
                        help="extra chip declaration YAML file (repeatable)")
    parser.add_argument("--log-level", dest="log_level", choices=LOG_LEVELS, help="logging level")
    parser.add_argument("--json", action="store_true", help="print JSON instead of text")

    # same flag after the subcommand; SUPPRESS keeps the top-level value when absent
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--json", action="store_true", default=argparse.SUPPRESS,
                        help="print JSON instead of text")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("chips", parents=[output], help="list chip prefixes")

    p = sub.add_parser("features", parents=[output], help="list the features of a chip")
    p.add_argument("prefix")

    p = sub.add_parser("lookup", parents=[output], help="print register number and access mode of a feature")
    p.add_argument("prefix")
    p.add_argument("feature")

    p = sub.add_parser("serve", parents=[output], help="run the HTTP lookup service")
    p.add_argument("--host", help="bind address")
    p.add_argument("--port", type=int, help="bind port")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        # Load config: YAML first, then CLI overrides
        config = CatalogConfig.from_file(args.config).override_with_args(args)
    except (yaml.YAMLError, ValidationError) as e:
        logger.error(f"invalid configuration {args.config}: {e}")
        return 1
    except OSError as e:
        logger.error(f"failed to read configuration {args.config}: {e}")
        return 1
    logging.basicConfig(level=getattr(logging, config.log_level))

    try:
        catalog = build_catalog(config)
        if args.command == "chips":
            return cmd_chips(catalog, args)
        if args.command == "features":
            return cmd_features(catalog, args)
        if args.command == "lookup":
            return cmd_lookup(catalog, args)
        return cmd_serve(catalog, args, config)
    except CatalogError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        logger.error(f"failed to read chip declarations: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
