import os

import pytest

from gallery.scanner import is_supported, scan_images
from tests.helpers import make_image


def test_is_supported_ignores_case():
    assert is_supported("a.PNG")
    assert is_supported("b.Jpeg")
    assert is_supported("c.jpg")
    assert not is_supported("d.gif")
    assert not is_supported("notes.txt")
    assert not is_supported("png")


def test_scan_keeps_only_supported_formats(assets_dir):
    for name in ("a.png", "b.jpg", "c.txt", "D.JPEG", "e.webp"):
        make_image(assets_dir, name)

    names = scan_images(assets_dir)

    assert sorted(names) == ["D.JPEG", "a.png", "b.jpg"]


def test_scan_follows_listing_order(assets_dir):
    for name in ("zeta.png", "alpha.png", "mid.jpg"):
        make_image(assets_dir, name)

    assert scan_images(assets_dir) == os.listdir(assets_dir)


def test_scan_empty_directory(assets_dir):
    assert scan_images(assets_dir) == []


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        scan_images(tmp_path / "nope")
