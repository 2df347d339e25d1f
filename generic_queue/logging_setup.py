import logging
import os
from typing import Any, Dict


def setup_logging(cfg: Dict[str, Any]) -> logging.Logger:
    """
    Simple logging setup:
    - Console always, plus a log file when `log_file` is set.
    - Level taken from config.yaml or env.
    """
    level = cfg.get("log_level", "INFO")
    logfile = cfg.get("log_file")

    handlers = [logging.StreamHandler()]
    if logfile:
        log_dir = os.path.dirname(logfile)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("generic_queue")
