"""Messages the dashboard reacts to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class LaunchApp:
    """Start the given shell command."""

    command: str


@dataclass(frozen=True)
class ToggleSettings:
    """Switch between the launcher and the settings view."""


Message: TypeAlias = LaunchApp | ToggleSettings