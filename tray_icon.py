"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from calendar_logic import format_ifc_date, today_ifc

APP_NAME = "IFC Calendar"


def tray_title(today: date | None = None) -> str:
    return f"{APP_NAME} – {format_ifc_date(today_ifc(today))}"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_toggle_dark: Callable[[], None] | None = None,
    is_dark: Callable[[], bool] | None = None,
    on_about: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_toggle_dark is not None:
        items.append(MenuItem(
            "Dark Mode", lambda _icon, _item: on_toggle_dark(),
            checked=(lambda _item: is_dark()) if is_dark is not None else None,
        ))
    if on_about is not None:
        items.append(MenuItem("About", lambda _icon, _item: on_about()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return pystray.Icon("ifc-calendar", icon_image, tray_title(), Menu(*items))
