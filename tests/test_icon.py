"""Tests for tray icon loading."""

from PIL import Image

from toastpos.shell.icon import ICON_SIZE, create_default_icon, load_icon_image


def test_default_icon():
    img = create_default_icon()
    assert img.size == (ICON_SIZE, ICON_SIZE)


def test_no_path_gives_default():
    assert load_icon_image(None).size == (ICON_SIZE, ICON_SIZE)


def test_loads_image_file(tmp_path):
    path = tmp_path / "icon.png"
    Image.new("RGB", (32, 32), (255, 0, 0)).save(path)

    img = load_icon_image(path)

    assert img.size == (32, 32)
    assert img.getpixel((0, 0))[:3] == (255, 0, 0)


def test_missing_file_falls_back(tmp_path):
    img = load_icon_image(tmp_path / "nope.ico")
    assert img.size == (ICON_SIZE, ICON_SIZE)


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "broken.ico"
    path.write_bytes(b"not an icon")

    img = load_icon_image(path)

    assert img.size == (ICON_SIZE, ICON_SIZE)
