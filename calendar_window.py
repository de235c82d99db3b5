"""IFC month window (tkinter) positioned above the taskbar."""

import ctypes
import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from calendar_logic import (
    DAY_ABBR,
    LEAP_DAY_NAME,
    MAX_YEAR,
    MIN_YEAR,
    MONTH_NAMES,
    YEAR_DAY_NAME,
    format_gregorian_date,
    format_ifc_date,
    today_ifc,
)
from ifc_types import DAYS_PER_MONTH, CalendarDay
from settings import load_settings, save_settings
from view_state import ViewState

log = logging.getLogger(__name__)

THEMES = {
    "light": {
        "bg": "white", "header_bg": "#F3F3F3", "fg": "#222222", "muted": "#888888",
        "accent": "#0078D4", "accent_fg": "white", "sel_bg": "#B3D7F2",
        "special_bg": "#FFF4CE", "tip_bg": "#FFFFE0", "tip_fg": "black",
        "disabled": "#CCCCCC",
    },
    "dark": {
        "bg": "#1E1E1E", "header_bg": "#2D2D2D", "fg": "#E6E6E6", "muted": "#8A8A8A",
        "accent": "#3A96DD", "accent_fg": "white", "sel_bg": "#264F78",
        "special_bg": "#4D3F12", "tip_bg": "#333333", "tip_fg": "#E6E6E6",
        "disabled": "#555555",
    },
}

_COLS = 7
_ROWS = DAYS_PER_MONTH // _COLS
_YEAR_MENU_SPAN = 10


class _ToolTip:
    """Lightweight shared tooltip for day cells."""

    __slots__ = ("_root", "_tw")

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._tw: tk.Toplevel | None = None

    def show(self, widget: tk.Widget, text: str, colors: dict) -> None:
        self.hide()
        tw = tk.Toplevel(self._root)
        tw.wm_overrideredirect(True)
        tw.wm_attributes("-topmost", True)
        lbl = tk.Label(
            tw, text=text, bg=colors["tip_bg"], fg=colors["tip_fg"],
            relief="solid", borderwidth=1, padx=6, pady=3, justify="left",
        )
        lbl.pack()
        x = widget.winfo_rootx() + widget.winfo_width() // 2
        y = widget.winfo_rooty() + widget.winfo_height() + 2
        tw.wm_geometry(f"+{x}+{y}")
        self._tw = tw

    def hide(self) -> None:
        if self._tw:
            self._tw.destroy()
            self._tw = None


class _MonthPanel:
    """Pre-allocated widgets for one IFC month: 4 weeks plus a special-day row."""

    __slots__ = ("frame", "day_headers", "day_cells", "special_cell")

    def __init__(self, parent: tk.Frame, fonts: dict, bind_cell) -> None:
        self.frame = tk.Frame(parent)

        self.day_headers: list[tk.Label] = []
        for col, abbr in enumerate(DAY_ABBR):
            lbl = tk.Label(self.frame, text=abbr, font=fonts["bold"], width=4)
            lbl.grid(row=0, column=col)
            self.day_headers.append(lbl)

        cell_w = fonts["cell_w"]
        cell_h = fonts["cell_h"]

        self.day_cells: list[tk.Canvas] = []
        for r in range(_ROWS):
            for c in range(_COLS):
                cell = tk.Canvas(
                    self.frame, width=cell_w, height=cell_h,
                    highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=c, padx=1, pady=1)
                bind_cell(cell)
                self.day_cells.append(cell)

        # Spans the whole week: special days belong to no weekday
        self.special_cell = tk.Canvas(
            self.frame, width=cell_w * _COLS, height=cell_h,
            highlightthickness=0, borderwidth=0,
        )
        bind_cell(self.special_cell)


class CalendarWindow:
    """Single IFC month that appears above the taskbar."""

    def __init__(self, settings_path: str | None = None) -> None:
        self._settings_path = settings_path
        settings = load_settings(settings_path)

        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(True, True)
        try:
            self.root.attributes("-toolwindow", True)
        except tk.TclError:
            pass  # Windows-only attribute
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.state = ViewState(dark_mode=settings["dark_mode"])
        self.show_gregorian: bool = settings["show_gregorian"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        # Widget-to-day mapping (filled during _refresh)
        self._widget_days: dict[int, CalendarDay] = {}

        # Called with the new dark-mode flag after every theme switch
        self.on_theme_change: Callable[[bool], None] | None = None

        _tmp = tk.Label(self.root, text="28", font=self.font_normal, width=4)
        _tmp.update_idletasks()
        self._fonts = {
            "bold": self.font_bold, "normal": self.font_normal,
            "cell_w": _tmp.winfo_reqwidth(),
            "cell_h": _tmp.winfo_reqheight() * 2,
        }
        _tmp.destroy()

        self._build_shell()
        self._tooltip = _ToolTip(self.root)
        self._refresh()

        self.root.bind("<Escape>", self._on_escape)
        self.root.bind("<Key>", self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    @property
    def colors(self) -> dict:
        return THEMES["dark" if self.state.dark_mode else "light"]

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_small = tkfont.Font(family=base, size=7)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=11, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    @staticmethod
    def _title() -> str:
        return f"IFC Calendar  {format_ifc_date(today_ifc())}"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + month panel + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root)
        self._outer.pack(padx=8, pady=6)

        # Navigation row: ◀◀  ◀  Month Year  ▶  ▶▶
        nav = tk.Frame(self._outer)
        nav.pack(fill="x", pady=(0, 4))
        self._nav = nav

        def nav_label(text: str, side: str, command) -> tk.Label:
            lbl = tk.Label(nav, text=text, font=self.font_nav, cursor="hand2")
            lbl.pack(side=side, padx=4)
            lbl.bind("<Button-1>", lambda _e: command())
            return lbl

        self._btn_prev_year = nav_label("◀◀", "left", self._prev_year)
        self._btn_prev = nav_label("◀", "left", self._prev_month)
        self._btn_next_year = nav_label("▶▶", "right", self._next_year)
        self._btn_next = nav_label("▶", "right", self._next_month)

        title = tk.Frame(nav)
        title.pack(expand=True)
        self._title_frame = title
        self._month_label = tk.Label(title, font=self.font_header, cursor="hand2")
        self._month_label.pack(side="left")
        self._month_label.bind("<Button-1>", self._open_month_menu)
        self._year_label = tk.Label(title, font=self.font_header, cursor="hand2")
        self._year_label.pack(side="left", padx=(4, 0))
        self._year_label.bind("<Button-1>", self._open_year_menu)

        self._btn_today = tk.Label(
            self._outer, text="Today", font=self.font_bold, cursor="hand2",
        )
        self._btn_today.pack()
        self._btn_today.bind("<Button-1>", lambda _e: self._go_today())

        self._panel = _MonthPanel(self._outer, self._fonts, self._bind_cell)
        self._panel.frame.pack(pady=(4, 0))

        self._footer_label = tk.Label(self._outer, font=self.font_footer)
        self._footer_label.pack(pady=(6, 0))
        self._hint_label = tk.Label(
            self._outer, font=self.font_small,
            text="← → Month    ↑ ↓ Year    T Today    D Theme    G Gregorian",
        )
        self._hint_label.pack(pady=(2, 0))

    def _bind_cell(self, cell: tk.Canvas) -> None:
        cell.bind("<Button-1>", self._on_cell_click)
        cell.bind("<Enter>", self._on_cell_enter)
        cell.bind("<Leave>", self._on_cell_leave)

    # ------------------------------------------------------------------
    # Refresh month content (no widget creation)
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        self._widget_days.clear()
        colors = self.colors
        # One snapshot of "today" for the whole render
        today = date.today()

        self._apply_theme(colors)
        self._month_label.configure(text=MONTH_NAMES[self.state.month])
        self._year_label.configure(text=str(self.state.year))
        self._btn_prev.configure(
            fg=colors["fg"] if self.state.can_go_prev else colors["disabled"])
        self._btn_prev_year.configure(
            fg=colors["fg"] if self.state.year > MIN_YEAR else colors["disabled"])
        self._btn_next.configure(
            fg=colors["fg"] if self.state.can_go_next else colors["disabled"])
        self._btn_next_year.configure(
            fg=colors["fg"] if self.state.year < MAX_YEAR else colors["disabled"])

        for cell, day in zip(self._panel.day_cells, self.state.days(today)):
            self._draw_day(cell, day, colors)
            self._widget_days[id(cell)] = day

        special = self.state.special(today)
        cell = self._panel.special_cell
        if special is None:
            cell.grid_forget()
        else:
            cell.grid(row=_ROWS + 1, column=0, columnspan=_COLS, pady=(4, 0))
            self._draw_day(cell, special, colors)
            self._widget_days[id(cell)] = special

        self._footer_label.configure(text=self.state.footer_text(today))

    def _apply_theme(self, colors: dict) -> None:
        bg, fg = colors["bg"], colors["fg"]
        self.root.configure(bg=bg)
        header_bg = colors["header_bg"]
        for frame in (self._outer, self._panel.frame):
            frame.configure(bg=bg)
        for frame in (self._nav, self._title_frame):
            frame.configure(bg=header_bg)
        for lbl in (self._month_label, self._year_label):
            lbl.configure(bg=header_bg, fg=fg)
        for lbl in (self._btn_prev, self._btn_prev_year, self._btn_next, self._btn_next_year):
            lbl.configure(bg=header_bg)
        self._btn_today.configure(bg=bg, fg=colors["accent"])
        for lbl in self._panel.day_headers:
            lbl.configure(bg=bg, fg=colors["muted"])
        self._footer_label.configure(bg=bg, fg=fg)
        self._hint_label.configure(bg=bg, fg=colors["muted"])

    # ------------------------------------------------------------------
    # Day colour logic
    # ------------------------------------------------------------------
    def _day_colors(self, day: CalendarDay, colors: dict) -> tuple[str, str]:
        if day.is_today:
            return colors["accent"], colors["accent_fg"]
        if self.state.is_selected(day):
            return colors["sel_bg"], colors["fg"]
        if day.is_special:
            return colors["special_bg"], colors["fg"]
        return colors["bg"], colors["fg"]

    def _draw_day(self, cell: tk.Canvas, day: CalendarDay, colors: dict) -> None:
        ifc = day.ifc_date
        if ifc.is_year_day:
            text = YEAR_DAY_NAME
        elif ifc.is_leap_day:
            text = LEAP_DAY_NAME
        else:
            text = str(ifc.day)
        sub = ""
        if self.show_gregorian:
            g = day.gregorian_date
            sub = f"{g.day}/{g.month}"
        bg, fg = self._day_colors(day, colors)
        bold = day.is_today or day.is_special

        cell.delete("all")
        cell.configure(bg=bg, cursor="hand2")
        w = int(cell["width"])
        h = int(cell["height"])
        if sub:
            cell.create_text(w // 2, h // 3, text=text, fill=fg,
                             font=self.font_bold if bold else self.font_normal)
            sub_fg = colors["muted"] if bg == colors["bg"] else fg
            cell.create_text(w // 2, h * 3 // 4, text=sub, fill=sub_fg,
                             font=self.font_small)
        else:
            cell.create_text(w // 2, h // 2, text=text, fill=fg,
                             font=self.font_bold if bold else self.font_normal)

    # ------------------------------------------------------------------
    # Cell events
    # ------------------------------------------------------------------
    def _on_cell_click(self, event: tk.Event) -> None:
        day = self._widget_days.get(id(event.widget))
        if day is None:
            return
        if self.state.is_selected(day):
            self.state.clear_selection()
        else:
            self.state.select(day)
        self._refresh()

    def _on_cell_enter(self, event: tk.Event) -> None:
        day = self._widget_days.get(id(event.widget))
        if day is not None:
            text = (f"{format_ifc_date(day.ifc_date)}\n"
                    f"{format_gregorian_date(day.gregorian_date)}")
            self._tooltip.show(event.widget, text, self.colors)

    def _on_cell_leave(self, _event: tk.Event) -> None:
        self._tooltip.hide()

    # ------------------------------------------------------------------
    # Month / year pickers
    # ------------------------------------------------------------------
    def _open_month_menu(self, event: tk.Event) -> None:
        menu = tk.Menu(self.root, tearoff=0)
        for m in range(1, len(MONTH_NAMES)):
            menu.add_command(label=MONTH_NAMES[m],
                             command=lambda m=m: self._go_to_month(m))
        menu.tk_popup(event.x_root, event.y_root)

    def _open_year_menu(self, event: tk.Event) -> None:
        menu = tk.Menu(self.root, tearoff=0)
        lo = max(MIN_YEAR, self.state.year - _YEAR_MENU_SPAN)
        hi = min(MAX_YEAR, self.state.year + _YEAR_MENU_SPAN)
        for y in range(lo, hi + 1):
            menu.add_command(label=str(y), command=lambda y=y: self._go_to_year(y))
        menu.tk_popup(event.x_root, event.y_root)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _prev_month(self) -> None:
        if self.state.prev_month():
            self._refresh()

    def _next_month(self) -> None:
        if self.state.next_month():
            self._refresh()

    def _prev_year(self) -> None:
        if self.state.prev_year():
            self._refresh()

    def _next_year(self) -> None:
        if self.state.next_year():
            self._refresh()

    def _go_to_month(self, month: int) -> None:
        if self.state.go_to_month(month):
            self._refresh()

    def _go_to_year(self, year: int) -> None:
        if self.state.go_to_year(year):
            self._refresh()

    def _go_today(self) -> None:
        self.state.go_today()
        self._refresh()

    _KEY_ACTIONS = {
        "Left": "_prev_month",
        "Right": "_next_month",
        "Up": "_prev_year",
        "Down": "_next_year",
        "t": "_go_today",
        "T": "_go_today",
        "d": "toggle_dark_mode",
        "D": "toggle_dark_mode",
        "g": "toggle_gregorian",
        "G": "toggle_gregorian",
    }

    def _on_key(self, event: tk.Event) -> None:
        action = self._KEY_ACTIONS.get(event.keysym)
        if action is not None:
            getattr(self, action)()

    # ESC clears selection first, then hides
    def _on_escape(self, _event: tk.Event) -> None:
        if self.state.selected is not None:
            self.state.clear_selection()
            self._refresh()
        else:
            self.hide()

    # ------------------------------------------------------------------
    # Theme / about
    # ------------------------------------------------------------------
    def toggle_dark_mode(self) -> None:
        dark = self.state.toggle_dark_mode()
        log.debug("Dark mode %s", "on" if dark else "off")
        self._refresh()
        self._persist()
        if self.on_theme_change is not None:
            self.on_theme_change(dark)

    def toggle_gregorian(self) -> None:
        self.show_gregorian = not self.show_gregorian
        self._refresh()
        self._persist()

    def open_about(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("About")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        colors = self.colors
        dlg.configure(bg=colors["bg"])
        text = (
            "International Fixed Calendar\n\n"
            "13 months of 28 days. Sol sits between June and July.\n"
            "Leap Day follows June 28 in leap years;\n"
            "Year Day follows December 28 every year.\n"
            "Neither belongs to a month or a week.\n\n"
            f"Today: {format_ifc_date(today_ifc())}\n"
            f"       {format_gregorian_date(date.today())}"
        )
        tk.Label(dlg, text=text, justify="left", bg=colors["bg"], fg=colors["fg"],
                 font=self.font_footer, padx=12, pady=10).pack()
        tk.Button(dlg, text="OK", width=8, command=dlg.destroy).pack(pady=(0, 8))

    # ------------------------------------------------------------------
    # Persist preferences
    # ------------------------------------------------------------------
    def _persist(self) -> None:
        settings = load_settings(self._settings_path)
        settings["dark_mode"] = self.state.dark_mode
        settings["show_gregorian"] = self.show_gregorian
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings, self._settings_path)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.state.go_today()
        self.root.title(self._title())
        self._refresh()
        self.root.deiconify()
        self.root.update_idletasks()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._tooltip.hide()
        if self.root.winfo_viewable():
            self._saved_width = self.root.winfo_width()
            self._saved_height = self.root.winfo_height()
        self._persist()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right above taskbar
    # ------------------------------------------------------------------
    def _work_area(self) -> tuple[int, int]:
        """Right/bottom edge of the usable screen area."""
        try:
            import ctypes.wintypes
            rect = ctypes.wintypes.RECT()
            ctypes.windll.user32.SystemParametersInfoW(0x0030, 0, ctypes.byref(rect), 0)
            return rect.right, rect.bottom
        except (AttributeError, ImportError, OSError, ValueError):
            # Not Windows: leave room for a bottom panel
            return self.root.winfo_screenwidth(), self.root.winfo_screenheight() - 48

    def _position_window(self) -> None:
        self.root.update_idletasks()
        work_right, work_bottom = self._work_area()
        win_w = max(self.root.winfo_reqwidth(), self._saved_width or 0)
        win_h = max(self.root.winfo_reqheight(), self._saved_height or 0)
        x = work_right - win_w - 12
        y = work_bottom - win_h - 12
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
