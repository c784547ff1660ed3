from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml


PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "config.yaml"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(path: Optional[Path | str] = None) -> dict:
    """Read the YAML config. NUTRISCREEN_CONFIG overrides the default location."""
    cfg_path = Path(path or os.environ.get("NUTRISCREEN_CONFIG") or DEFAULT_CONFIG_PATH).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"{cfg_path} not found")
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def configure_logging(cfg: dict) -> None:
    log_cfg = cfg.get("logging") or {}
    level = str(log_cfg.get("level", "INFO")).upper()
    logging.basicConfig(level=level, format=log_cfg.get("format", LOG_FORMAT))
    logging.getLogger("nutriscreen").setLevel(level)
