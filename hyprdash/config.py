"""User configuration for the dashboard."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from os import PathLike


@dataclass
class Config:
    """Settings read from the user's ``config.toml``."""

    icon_theme: str | None = None

    @classmethod
    def load_from_file(cls, path: str | PathLike[str]) -> Config:
        """Load a config file, falling back to defaults on any problem.

        A missing or unreadable file, invalid TOML, or a value of the wrong
        type all yield the default configuration. Unknown keys are ignored.
        """
        try:
            with open(path, "rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
            return cls()

        icon_theme = data.get("icon_theme")
        if icon_theme is not None and not isinstance(icon_theme, str):
            return cls()
        return cls(icon_theme=icon_theme)