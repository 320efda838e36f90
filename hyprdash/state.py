"""Application discovery and dashboard state."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from hyprdash.config import Config
from hyprdash.icons import resolve_icon
from hyprdash.message import LaunchApp, Message, ToggleSettings

log = logging.getLogger(__name__)

TITLE = "Hypr Dashboard"


@dataclass
class AppInfo:
    """A launchable application found in a desktop entry."""

    name: str
    exec: str
    icon: str | None = None


def data_dirs() -> list[Path]:
    """The XDG data home followed by the XDG data directories."""
    home_env = os.environ.get("XDG_DATA_HOME", "")
    home = Path(home_env) if os.path.isabs(home_env) else Path.home() / ".local" / "share"
    extra = [
        Path(entry)
        for entry in os.environ.get("XDG_DATA_DIRS", "").split(":")
        if os.path.isabs(entry)
    ]
    if not extra:
        extra = [Path("/usr/local/share"), Path("/usr/share")]
    return [home, *extra]


def _first_value(lines: list[str], prefix: str) -> str:
    return next((line[len(prefix):] for line in lines if line.startswith(prefix)), "")


def read_desktop_entry(path: str | PathLike[str]) -> tuple[str, str, str] | None:
    """Return ``(name, exec, icon name)`` of a desktop file, or ``None`` if unreadable.

    Each value is taken from the first line with the matching key; a missing
    key yields an empty string.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    return (
        _first_value(lines, "Name="),
        _first_value(lines, "Exec="),
        _first_value(lines, "Icon="),
    )


def find_applications(
    config: Config,
    search_dirs: Iterable[str | PathLike[str]] | None = None,
    theme_paths: Iterable[str | PathLike[str]] | None = None,
) -> list[AppInfo]:
    """Collect applications from ``applications`` folders, sorted by name.

    Entries without an icon, name or command are skipped.
    """
    bases = data_dirs() if search_dirs is None else search_dirs
    themes = None if theme_paths is None else list(theme_paths)
    apps: list[AppInfo] = []
    for base in bases:
        directory = Path(base) / "applications"
        try:
            entries = sorted(directory.iterdir())
        except OSError:
            continue
        for entry in entries:
            fields = read_desktop_entry(entry)
            if fields is None:
                continue
            name, command, icon_name = fields
            if not icon_name:
                continue
            icon = resolve_icon(icon_name, config.icon_theme, themes)
            if icon is not None:
                log.info("Icon '%s' found: %s", icon_name, icon)
            else:
                log.error(
                    "Icon '%s' not found in any theme (searched with theme hint: %r)",
                    icon_name,
                    config.icon_theme,
                )
            if name and command:
                apps.append(AppInfo(name=name, exec=command, icon=icon))

    return sorted(apps, key=lambda app: app.name.lower())


def launch(command: str) -> subprocess.Popen | None:
    """Start ``command`` through ``sh -c``; empty commands and failures return ``None``."""
    if not command:
        return None
    try:
        return subprocess.Popen(["sh", "-c", command])
    except OSError as error:
        log.error("failed to launch %s: %s", command, error)
        return None


@dataclass
class Dashboard:
    """The dashboard's state: configuration, applications and current view."""

    config: Config
    apps: list[AppInfo] = field(default_factory=list)
    show_settings: bool = False

    @classmethod
    def from_config(cls, config: Config) -> Dashboard:
        """Build a dashboard with the applications installed on this system."""
        return cls(config=config, apps=find_applications(config))

    def title(self) -> str:
        return TITLE

    def update(self, message: Message) -> None:
        """Apply a message to the state."""
        match message:
            case LaunchApp(command=command):
                launch(command)
            case ToggleSettings():
                self.show_settings = not self.show_settings
            case _:
                raise TypeError(f"unknown message: {message!r}")