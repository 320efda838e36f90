"""Icon lookup across freedesktop icon themes."""

from __future__ import annotations

import os
import re
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

_EXTENSIONS = ("png", "svg", "xpm")
_THEME_SECTION = "Icon Theme"
_PAIR = re.compile(r"([^=:]*)[=:](.*)")

_cache: dict[tuple[str, str, tuple[str, ...]], str | None] = {}
_cache_lock = threading.Lock()


@dataclass
class ThemeInfo:
    """The parts of an ``index.theme`` file used for lookups."""

    directories: list[str] = field(default_factory=list)
    inherits: list[str] = field(default_factory=list)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _read_ini(path: str | PathLike[str]) -> dict[str | None, dict[str, str]] | None:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    sections: dict[str | None, dict[str, str]] = {None: {}}
    current = sections[None]
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            if not line.endswith("]"):
                return None
            current = sections.setdefault(line[1:-1].strip(), {})
            continue
        match = _PAIR.fullmatch(line)
        if match is None:
            return None
        key, value = match.group(1).strip(), match.group(2).strip()
        current.setdefault(key, _unquote(value))
    return sections


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_index_theme(path: str | PathLike[str]) -> ThemeInfo | None:
    """Parse an ``index.theme`` file; ``None`` if unreadable or lacking the section."""
    sections = _read_ini(path)
    if sections is None:
        return None
    section = sections.get(_THEME_SECTION)
    if section is None:
        return None
    return ThemeInfo(
        directories=_split_list(section.get("Directories", "")),
        inherits=_split_list(section.get("Inherits", "")),
    )


def default_theme_paths() -> list[str]:
    """The base directories searched for icon themes."""
    home = os.environ.get("HOME", "")
    return ["/usr/share/icons", "/usr/local/share/icons", f"{home}/.icons"]


def clear_icon_cache() -> None:
    """Forget all previously resolved icons."""
    with _cache_lock:
        _cache.clear()


def _first_existing(directory: Path, name: str) -> str | None:
    for ext in _EXTENSIONS:
        candidate = directory / f"{name}.{ext}"
        if candidate.exists():
            return str(candidate)
    return None


def _search(name: str, theme_hint: str | None, bases: tuple[str, ...]) -> str | None:
    themes: list[str] = []
    if theme_hint is not None:
        themes.append(theme_hint)
    if "hicolor" not in themes:
        themes.append("hicolor")

    visited: set[str] = set()
    while themes:
        theme = themes.pop()
        if theme in visited:
            continue
        visited.add(theme)
        for base in bases:
            theme_dir = Path(base) / theme
            index_path = theme_dir / "index.theme"
            if not index_path.exists():
                continue
            info = parse_index_theme(index_path)
            if info is None:
                continue
            for directory in info.directories:
                found = _first_existing(theme_dir / directory, name)
                if found:
                    return found
            found = _first_existing(theme_dir / "scalable" / "apps", name)
            if found:
                return found
            for inherit in info.inherits:
                if inherit not in themes and inherit not in visited:
                    themes.append(inherit)

    for base in bases:
        found = _first_existing(Path(base) / "pixmaps", name)
        if found:
            return found

    for base in bases:
        found = _first_existing(Path(base), name)
        if found:
            return found

    return None


def resolve_icon(
    name: str,
    theme_hint: str | None = None,
    theme_paths: Iterable[str | PathLike[str]] | None = None,
) -> str | None:
    """Find the file path of an icon, or ``None``. Results are cached."""
    paths = default_theme_paths() if theme_paths is None else theme_paths
    bases = tuple(str(p) for p in paths)
    key = (name, theme_hint or "", bases)
    with _cache_lock:
        if key in _cache:
            return _cache[key]

    result = _search(name, theme_hint, bases)
    with _cache_lock:
        _cache[key] = result
    return result