from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import LoggingCfg

_HANDLER_TAG = "_ageprune_handler"


def setup_logging(cfg: LoggingCfg, name: str) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(getattr(logging, cfg.level))

    # drop handlers left by an earlier call in the same process
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)sZ %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if cfg.dir is not None:
        cfg.dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                Path(cfg.dir) / f"{name}.log",
                maxBytes=cfg.max_bytes,
                backupCount=cfg.backups,
                encoding="utf-8",
            )
        )

    for h in handlers:
        h.setFormatter(fmt)
        setattr(h, _HANDLER_TAG, True)
        root.addHandler(h)

    return logging.getLogger(name)
