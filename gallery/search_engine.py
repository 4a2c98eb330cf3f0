# gallery/search_engine.py
import os
import random
from datetime import datetime, timezone
from math import ceil

from gallery import schemas
from gallery.config import PAGE_SIZE
from gallery.errors import NotFoundError
from gallery.scanner import scan_images


def filter_by_query(names: list[str], query: str = "") -> list[str]:
    """Case-insensitive substring match; an empty query keeps every name."""
    if not query:
        return list(names)
    needle = query.lower()
    return [n for n in names if needle in n.lower()]


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return ceil(count / page_size)


def paginate(names: list[str], page: int, page_size: int = PAGE_SIZE) -> list[str]:
    # pages past the end come back empty
    start = (page - 1) * page_size
    return names[start:start + page_size]


def build_entry(directory, name: str) -> schemas.ImageEntry:
    stats = os.stat(os.path.join(directory, name))
    return schemas.ImageEntry(
        name=name,
        url=f"/assets/{name}",
        size=stats.st_size,
        modified=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
    )


def list_images(directory, query: str = "", page: int = 1,
                page_size: int = PAGE_SIZE) -> schemas.ImagePage:
    matches = filter_by_query(scan_images(directory), query)
    images = [build_entry(directory, name) for name in paginate(matches, page, page_size)]
    return schemas.ImagePage(
        images=images,
        current_page=page,
        total_pages=total_pages(len(matches), page_size),
        total_images=len(matches),
    )


def pick_random(directory, query: str = "") -> schemas.ImageEntry:
    candidates = filter_by_query(scan_images(directory), query)
    if not candidates:
        raise NotFoundError("No images found")
    return build_entry(directory, random.choice(candidates))
