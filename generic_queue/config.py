import copy
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "log_file": None,
    "seed_items": [1, 2, 3],
}


def _load_yaml_config(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg.update(data)
    return cfg


def load_config(base_dir: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings/.env (if present) and settings/config.yaml.
    Returns a dict with defaults filled in when files are missing.
    """
    if base_dir is None:
        base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    env_path = os.path.join(base_dir, "settings", ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path, override=False)

    cfg = _load_yaml_config(os.path.join(base_dir, "settings", "config.yaml"))

    cfg["log_level"] = os.getenv("LOG_LEVEL", cfg.get("log_level", "INFO"))
    cfg["log_file"] = os.getenv("LOG_FILE", cfg.get("log_file"))

    if not isinstance(cfg.get("seed_items"), list):
        raise ValueError("seed_items must be a list")

    return cfg
