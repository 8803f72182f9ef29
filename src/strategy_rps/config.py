import os
import sys
from typing import Optional

import yaml
from loguru import logger


def load_config(path: Optional[str] = None) -> dict:
    config_path = path or os.path.join(os.path.dirname(__file__), "config.yaml")
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def setup_logging(cfg: dict):
    level = str(cfg.get("logging", {}).get("level", "INFO")).upper()
    logger.remove()
    logger.add(sys.stderr, level=level)
