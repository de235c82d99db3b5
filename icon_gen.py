"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import today_ifc
from ifc_types import IFCDate

# Tried in order; the first one Pillow can open wins
_FONT_FILES = ("segoeuib.ttf", "DejaVuSans-Bold.ttf", "Arial Bold.ttf")


def icon_text(ifc: IFCDate) -> str:
    """Day number for regular days, YD / LD on the intercalary days."""
    if ifc.is_year_day:
        return "YD"
    if ifc.is_leap_day:
        return "LD"
    return str(ifc.day)


def _load_font(size: int):
    for name in _FONT_FILES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return None


def create_icon_image(today: date | None = None, dark: bool = False) -> Image.Image:
    """Return a 64×64 RGBA image with today's IFC day filling the height."""
    size = 64
    bg, fg = ("black", "white") if dark else ("white", "black")
    img = Image.new("RGBA", (size, size), bg)
    draw = ImageDraw.Draw(img)

    text = icon_text(today_ifc(today))

    # Find the largest font size that fits the icon
    font_size = 120
    font = None
    while font_size > 10:
        font = _load_font(font_size)
        if font is None:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size and bbox[3] - bbox[1] <= size:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill=fg, font=font)

    return img


def refresh_tray_icon(tray, dark: bool, today: date | None = None) -> None:
    """Redraw the tray image for the current theme (pystray updates on assign)."""
    tray.icon = create_icon_image(today=today, dark=dark)
