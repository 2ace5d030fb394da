import logging
import sys

from .config import settings


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)

    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    # Records also reach the root logger configured in main.py
    logger.propagate = True
    return logger


app_logger = setup_logger("tripmate", getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
