# gallery/static_files.py
import os

from gallery.errors import NotFoundError

INDEX_DOCUMENT = "index.html"
ASSETS_PREFIX = "assets/"
DEFAULT_CONTENT_TYPE = "text/plain"
CACHE_CONTROL = "public, max-age=86400"

CONTENT_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".svg": "image/svg+xml",
}


def content_type_for(path: str) -> str:
    extension = os.path.splitext(path)[1].lower()
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def _within(root: str, relative: str) -> str:
    try:
        root = os.path.realpath(root)
        full = os.path.realpath(os.path.join(root, relative))
    except ValueError:
        # embedded NUL byte
        raise NotFoundError("File not found")
    if full != root and not full.startswith(root + os.sep):
        raise NotFoundError("File not found")
    return full


def resolve_path(url_path: str, public_dir, assets_dir) -> str:
    """Map a request path onto the public or assets directory.

    ``/`` serves the index document, ``/assets/...`` is read from the assets
    directory and anything else from the public directory. Paths that climb
    out of their root raise ``NotFoundError``.
    """
    relative = url_path.lstrip("/")
    if relative == "":
        return os.path.join(public_dir, INDEX_DOCUMENT)
    if relative.startswith(ASSETS_PREFIX):
        return _within(assets_dir, relative[len(ASSETS_PREFIX):])
    return _within(public_dir, relative)


def read_static(url_path: str, public_dir, assets_dir) -> tuple[bytes, str]:
    file_path = resolve_path(url_path, public_dir, assets_dir)
    try:
        with open(file_path, "rb") as f:
            content = f.read()
    except (FileNotFoundError, NotADirectoryError, ValueError):
        raise NotFoundError("File not found")
    return content, content_type_for(file_path)
