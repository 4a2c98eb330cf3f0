# gallery/scanner.py
import os

from gallery.config import SUPPORTED_FORMATS


def is_supported(filename: str) -> bool:
    return os.path.splitext(filename)[1].lower() in SUPPORTED_FORMATS


def scan_images(directory) -> list[str]:
    """Return image filenames in ``directory``, in listing order.

    Raises ``OSError`` if the directory cannot be read.
    """
    return [f for f in os.listdir(directory) if is_supported(f)]
