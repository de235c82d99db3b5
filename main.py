"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image, refresh_tray_icon
from logging_setup import setup_logging
from tray_icon import create_tray

log = logging.getLogger(__name__)


def main() -> None:
    setup_logging()

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        log.debug("DPI awareness not available on this platform")

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            log.info("Stopping tray icon")
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    def on_toggle_dark() -> None:
        cal_win.root.after(0, cal_win.toggle_dark_mode)

    def on_about() -> None:
        cal_win.root.after(0, cal_win.open_about)

    icon_image = create_icon_image(dark=cal_win.state.dark_mode)
    tray = create_tray(icon_image, on_show, on_exit,
                       on_toggle_dark=on_toggle_dark,
                       is_dark=lambda: cal_win.state.dark_mode,
                       on_about=on_about)

    # Both the d key and the tray menu switch themes through the window
    cal_win.on_theme_change = lambda dark: refresh_tray_icon(tray, dark)

    # Run pystray in a daemon thread so it doesn't block tkinter
    log.info("Starting tray icon")
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
