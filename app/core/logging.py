# app/core/logging.py

import logging

LOG_FORMAT = "[%(asctime)s | %(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%m.%d.%Y %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """app 패키지 로거 설정"""
    logger = logging.getLogger("app")
    logger.setLevel(level.upper())

    if not logger.handlers:
        console_out = logging.StreamHandler()
        console_out.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_out)

    return logger
