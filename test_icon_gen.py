"""Tray icon image and title."""

from datetime import date
from types import SimpleNamespace

from icon_gen import create_icon_image, icon_text, refresh_tray_icon
from ifc_types import LeapDay, NormalDay, YearDay


def test_icon_text():
    assert icon_text(NormalDay(2024, 7, 12)) == "12"
    assert icon_text(YearDay(2024)) == "YD"
    assert icon_text(LeapDay(2024)) == "LD"


def test_icon_image_size_and_mode():
    img = create_icon_image(today=date(2024, 1, 28))
    assert img.size == (64, 64)
    assert img.mode == "RGBA"


def test_icon_image_has_text_pixels():
    img = create_icon_image(today=date(2024, 12, 31))
    colors = {c for _count, c in img.getcolors(64 * 64)}
    assert len(colors) > 1


def test_dark_icon_background():
    img = create_icon_image(today=date(2024, 1, 1), dark=True)
    assert img.getpixel((0, 0)) == (0, 0, 0, 255)


def test_refresh_tray_icon_follows_theme():
    tray = SimpleNamespace(icon=None)
    refresh_tray_icon(tray, dark=True, today=date(2024, 1, 1))
    assert tray.icon.getpixel((0, 0)) == (0, 0, 0, 255)
    refresh_tray_icon(tray, dark=False, today=date(2024, 1, 1))
    assert tray.icon.getpixel((0, 0)) == (255, 255, 255, 255)
