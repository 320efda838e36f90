"""Tk views for the launcher and the settings screen."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

from hyprdash.message import LaunchApp, Message, ToggleSettings
from hyprdash.state import AppInfo, Dashboard

if TYPE_CHECKING:
    import tkinter as tk

T = TypeVar("T")

COLUMNS = 4
ICON_SIZE = 64
HEADER_TEXT = "DATE:DDDD YYYY:MM:DD and TIME:HH:MM"

# Gruvbox light palette.
_BACKGROUND = "#fbf1c7"
_FOREGROUND = "#3c3836"
_BUTTON = "#ebdbb2"
_ACTIVE = "#d5c4a1"

Dispatch = Callable[[Message], None]


def grid_rows(apps: Sequence[T], columns: int = COLUMNS) -> list[list[T]]:
    """Split ``apps`` into rows of ``columns`` items; the last row may be shorter."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    items = list(apps)
    return [items[start:start + columns] for start in range(0, len(items), columns)]


def _button(parent: tk.Misc, text: str, command: Callable[[], None] | None = None, **options) -> tk.Button:
    import tkinter as tk

    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=_BUTTON,
        fg=_FOREGROUND,
        activebackground=_ACTIVE,
        activeforeground=_FOREGROUND,
        relief="flat",
        **options,
    )


def _label(parent: tk.Misc, text: str, size: int | None = None) -> tk.Label:
    import tkinter as tk

    options = {"font": ("TkDefaultFont", size)} if size else {}
    return tk.Label(parent, text=text, bg=_BACKGROUND, fg=_FOREGROUND, **options)


def _load_icon(path: str) -> tk.PhotoImage | None:
    """Load an icon scaled to roughly ``ICON_SIZE``; ``None`` if Tk cannot read it."""
    import tkinter as tk

    try:
        image = tk.PhotoImage(file=path)
    except tk.TclError:
        return None
    largest = max(image.width(), image.height())
    if largest > ICON_SIZE:
        image = image.subsample(-(-largest // ICON_SIZE))
    elif 0 < largest < ICON_SIZE and ICON_SIZE // largest > 1:
        image = image.zoom(ICON_SIZE // largest)
    return image


def _scrollable(parent: tk.Misc) -> tuple[tk.Frame, tk.Frame]:
    """Return ``(outer, inner)``: widgets go in ``inner``, ``outer`` gets packed."""
    import tkinter as tk

    outer = tk.Frame(parent, bg=_BACKGROUND, padx=20, pady=20)
    canvas = tk.Canvas(outer, bg=_BACKGROUND, highlightthickness=0)
    scrollbar = tk.Scrollbar(outer, orient="vertical", command=canvas.yview)
    canvas.configure(yscrollcommand=scrollbar.set)
    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)

    inner = tk.Frame(canvas, bg=_BACKGROUND, padx=20, pady=20)
    window = canvas.create_window((0, 0), window=inner, anchor="nw")
    inner.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure(window, width=e.width))
    return outer, inner


def launcher_view(parent: tk.Misc, apps: Sequence[AppInfo], dispatch: Dispatch) -> tk.Frame:
    """Build the launcher: header, quick buttons and a grid of applications."""
    import tkinter as tk

    outer, content = _scrollable(parent)

    _label(content, HEADER_TEXT, size=14).pack(pady=(0, 10))

    toolbar = tk.Frame(content, bg=_BACKGROUND, padx=10, pady=10)
    toolbar.pack(pady=(0, 10))
    toggle = lambda: dispatch(ToggleSettings())  # noqa: E731
    for text, command in (
        ("Network", toggle),
        ("Bluetooth", None),
        ("Audio Volume", None),
        ("Settings", toggle),
    ):
        _button(toolbar, text, command).pack(side="left", padx=5)

    for row in grid_rows(apps, COLUMNS):
        row_frame = tk.Frame(content, bg=_BACKGROUND)
        row_frame.pack(fill="x", pady=5)
        for column in range(COLUMNS):
            row_frame.columnconfigure(column, weight=1, uniform="apps")
        for column, app in enumerate(row):
            image = _load_icon(app.icon) if app.icon else None
            button = _button(
                row_frame,
                app.name,
                lambda command=app.exec: dispatch(LaunchApp(command)),
                padx=5,
                pady=5,
            )
            if image is not None:
                button.configure(image=image, compound="top")
                button.image = image  # keep a reference so Tk does not drop it
            button.grid(row=0, column=column, sticky="nsew", padx=5)

    return outer


def settings_view(parent: tk.Misc, dispatch: Dispatch) -> tk.Frame:
    """Build the settings screen."""
    import tkinter as tk

    outer, content = _scrollable(parent)

    _label(content, "Settings Menu", size=24).pack(anchor="w", pady=(0, 20))

    body = tk.Frame(content, bg=_BACKGROUND)
    body.pack(anchor="w", pady=(0, 20))
    buttons = tk.Frame(body, bg=_BACKGROUND)
    buttons.pack(side="left", padx=(0, 20), anchor="n")
    for text in ("Network", "Audio", "Hyprland"):
        _button(buttons, text).pack(fill="x", pady=5)
    labels = tk.Frame(body, bg=_BACKGROUND)
    labels.pack(side="left", anchor="n")
    for text in ("Network Settings ...", "Audio Settings ...", "Hyprland Settings ..."):
        _label(labels, text).pack(anchor="w", pady=5)

    _button(content, "Back", lambda: dispatch(ToggleSettings())).pack(anchor="w")

    return outer


class DashboardWindow:
    """A Tk window showing a :class:`Dashboard`."""

    def __init__(self, dashboard: Dashboard, root: tk.Tk | None = None) -> None:
        import tkinter as tk

        self.dashboard = dashboard
        self.root = tk.Tk() if root is None else root
        self.root.title(dashboard.title())
        self.root.configure(bg=_BACKGROUND)
        self._view: tk.Frame | None = None
        self.refresh()

    def dispatch(self, message: Message) -> None:
        """Apply ``message`` to the dashboard and redraw."""
        self.dashboard.update(message)
        self.refresh()

    def refresh(self) -> None:
        """Replace the current view with one matching the dashboard's state."""
        if self._view is not None:
            self._view.destroy()
        if self.dashboard.show_settings:
            self._view = settings_view(self.root, self.dispatch)
        else:
            self._view = launcher_view(self.root, self.dashboard.apps, self.dispatch)
        self._view.pack(fill="both", expand=True)

    def run(self) -> None:
        """Run the Tk event loop until the window closes."""
        self.root.mainloop()