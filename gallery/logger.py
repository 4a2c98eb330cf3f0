# gallery/logger.py
import logging
import os
import sys

from gallery import config

# Define a formatter
formatter = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def get_logger(name: str = "image-gallery") -> logging.Logger:
    """Return the application logger, attaching stdout and file handlers once."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

    # Stream handler (stdout)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    # File handler for all logs
    os.makedirs(config.LOG_DIR, exist_ok=True)
    file_handler = logging.FileHandler(os.path.join(config.LOG_DIR, "gallery.log"))
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # avoid duplicate logs through the root logger
    logger.propagate = False
    return logger
