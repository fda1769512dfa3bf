"""TensorProbe factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from tensorsight.config import Settings, settings
from tensorsight.engine.session import TensorProbe

load_dotenv()


def configure_logging(cfg: Settings | None = None) -> None:
    cfg = cfg or settings
    logging.basicConfig(
        level=getattr(logging, cfg.tensorsight_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_probe(cfg: Settings | None = None) -> TensorProbe:
    cfg = cfg or settings
    configure_logging(cfg)
    return TensorProbe(
        kernel_size=cfg.default_kernel_size,
        sigma=cfg.default_sigma,
        config=cfg.engine_config(),
    )
