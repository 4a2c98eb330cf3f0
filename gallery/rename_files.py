# gallery/rename_files.py
"""
Offline utility that replaces whitespace in asset filenames with underscores,
so image URLs need no escaping. Not used by the server.

Run:  gallery-rename [directory]
"""
import argparse
import os
import re

from retry.api import retry_call

from gallery import config
from gallery.logger import get_logger

logger = get_logger("image-gallery.rename")

WHITESPACE = re.compile(r"\s+")

# Errors a locked or busy file can raise; anything else fails the file immediately.
TRANSIENT_ERRORS = (PermissionError, BlockingIOError, InterruptedError, TimeoutError)


def normalized_name(filename: str) -> str:
    return WHITESPACE.sub("_", filename)


def rename_file(directory: str, old: str, new: str):
    retry_call(os.rename,
               fargs=[os.path.join(directory, old), os.path.join(directory, new)],
               exceptions=TRANSIENT_ERRORS,
               tries=config.RETRY_ATTEMPTS,
               delay=config.RETRY_DELAY,
               logger=logger)


def normalize_filenames(directory: str) -> list[tuple[str, str]]:
    """Rename every file in ``directory`` whose name contains whitespace.

    Returns the ``(old, new)`` pairs that were renamed. Files whose target name
    already exists are left alone; a failed rename is logged and skipped.
    """
    renamed = []
    for filename in os.listdir(directory):
        new_name = normalized_name(filename)
        if new_name == filename:
            continue
        if os.path.exists(os.path.join(directory, new_name)):
            logger.warning(f"Skipping {filename}: {new_name} already exists")
            continue
        try:
            rename_file(directory, filename, new_name)
        except OSError as e:
            logger.error(f"Error renaming file {filename}: {e}")
            continue
        logger.info(f"Renamed {filename} to {new_name}")
        renamed.append((filename, new_name))
    return renamed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Replace whitespace in image filenames with underscores.")
    parser.add_argument("directory", nargs="?", default=config.ASSETS_DIR,
                        help="folder to process (default: the assets folder)")
    args = parser.parse_args(argv)

    try:
        renamed = normalize_filenames(args.directory)
    except OSError as e:
        logger.error(f"Error reading folder {args.directory}: {e}")
        return 1
    logger.info(f"Renamed {len(renamed)} file(s) in {args.directory}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
