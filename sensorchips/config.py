#!/usr/bin/env python3
"""
sensorchips configuration

YAML file, every key optional:

    log_level: INFO
    extra_chips:            # chip declaration files, relative to this file
      - chips/lm81.yaml
    host: 127.0.0.1         # HTTP lookup service
    port: 8000
"""

import argparse
import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field

from .catalog import RegisterCatalog, default_catalog
from .extensions import load_chip_file

logger = logging.getLogger("sensorchips")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class CatalogConfig(BaseModel):
    log_level: str = Field("INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    extra_chips: List[str] = []
    host: str = "127.0.0.1"
    port: int = Field(8000, gt=0, lt=65536)

    @classmethod
    def from_file(cls, config_path: Path) -> "CatalogConfig":
        """Load configuration from YAML file, defaults if the file does not exist"""
        config_path = Path(config_path)
        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return cls()
        return load_config_from(config_path)

    def override_with_args(self, args: argparse.Namespace) -> "CatalogConfig":
        """Override config with command line arguments if provided"""
        if getattr(args, "log_level", None) is not None:
            self.log_level = args.log_level
        if getattr(args, "host", None) is not None:
            self.host = args.host
        if getattr(args, "port", None) is not None:
            self.port = args.port
        if getattr(args, "chips", None):
            self.extra_chips = self.extra_chips + [str(Path(p)) for p in args.chips]
        return self


def load_config_from(path: Union[str, Path]) -> CatalogConfig:
    """Load configuration from YAML file. Relative chip files resolve against the file's directory."""
    path = Path(path)
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    cfg = CatalogConfig(**data)
    cfg.extra_chips = [str(path.parent / p) for p in cfg.extra_chips]
    logger.debug(f"Loaded config from {path}: {cfg}")
    return cfg


def build_catalog(cfg: CatalogConfig) -> RegisterCatalog:
    """Built-in chips followed by the chips of every configured extension file."""
    if not cfg.extra_chips:
        return default_catalog

    extra = []
    for chip_file in cfg.extra_chips:
        extra.extend(load_chip_file(chip_file))
    catalog = default_catalog.extended(extra)
    logger.info(f"catalog ready: {len(catalog)} chips ({len(extra)} from extension files)")
    return catalog
