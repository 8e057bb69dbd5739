import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from .settings import Settings, default_log_dir


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure logging with file and console handlers.

    Hosts call this once at startup; the engine itself never configures logging.
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.INFO)

    log_dir = settings.log_dir or default_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(
        log_dir, f'atscore_{datetime.now().strftime("%Y%m%d")}.log'
    )

    # Create logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    # File handler with rotation
    file_handler = RotatingFileHandler(
        log_filename,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    # Reportlab is chatty at DEBUG
    logging.getLogger("reportlab").setLevel(logging.WARNING)

    return logger
