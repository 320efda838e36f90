from pathlib import Path

import pytest

from hyprdash.icons import (
    ThemeInfo,
    clear_icon_cache,
    default_theme_paths,
    parse_index_theme,
    resolve_icon,
)


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_icon_cache()
    yield
    clear_icon_cache()


def make_theme(base: Path, theme: str, directories=(), inherits=()) -> Path:
    theme_dir = base / theme
    theme_dir.mkdir(parents=True, exist_ok=True)
    lines = ["[Icon Theme]", "Directories=" + ",".join(directories)]
    if inherits:
        lines.append("Inherits=" + ",".join(inherits))
    (theme_dir / "index.theme").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return theme_dir


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def test_parses_directories_and_inherits(tmp_path):
    path = tmp_path / "index.theme"
    path.write_text(
        "[Icon Theme]\nDirectories=16x16/apps,32x32/apps\nInherits=hicolor,Adwaita\n\n"
        "[16x16/apps]\nSize=16\n",
        encoding="utf-8",
    )
    info = parse_index_theme(path)
    assert info.directories == ["16x16/apps", "32x32/apps"]
    assert info.inherits == ["hicolor", "Adwaita"]


def test_ignores_other_sections(tmp_path):
    path = tmp_path / "index.theme"
    path.write_text(
        "[Icon Theme]\nDirectories=apps\n\n[Other]\nDirectories=ignored\n", encoding="utf-8"
    )
    info = parse_index_theme(path)
    assert info.directories == ["apps"]


def test_missing_section_gives_none(tmp_path):
    path = tmp_path / "index.theme"
    path.write_text("[Other]\nDirectories=apps\n", encoding="utf-8")
    assert parse_index_theme(path) is None


def test_missing_file_gives_none(tmp_path):
    assert parse_index_theme(tmp_path / "nope.theme") is None


def test_missing_keys_give_empty_lists(tmp_path):
    path = tmp_path / "index.theme"
    path.write_text("[Icon Theme]\nName=Test\n", encoding="utf-8")
    assert parse_index_theme(path) == ThemeInfo(directories=[], inherits=[])


def test_list_items_are_trimmed_and_empty_dropped(tmp_path):
    path = tmp_path / "index.theme"
    path.write_text("[Icon Theme]\nDirectories= a , ,b,\n", encoding="utf-8")
    assert parse_index_theme(path).directories == ["a", "b"]


def test_default_theme_paths_use_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/someone")
    paths = default_theme_paths()
    assert paths == ["/usr/share/icons", "/usr/local/share/icons", "/home/someone/.icons"]


def test_finds_icon_in_theme_directory(tmp_path):
    theme_dir = make_theme(tmp_path, "hicolor", directories=["48x48/apps"])
    icon = touch(theme_dir / "48x48/apps/firefox.png")
    assert resolve_icon("firefox", None, [tmp_path]) == str(icon)


def test_extension_order_prefers_png(tmp_path):
    theme_dir = make_theme(tmp_path, "hicolor", directories=["apps"])
    touch(theme_dir / "apps/term.svg")
    png = touch(theme_dir / "apps/term.png")
    assert resolve_icon("term", None, [tmp_path]) == str(png)


def test_hicolor_is_searched_before_hint(tmp_path):
    hint_dir = make_theme(tmp_path, "Papirus", directories=["apps"])
    hicolor_dir = make_theme(tmp_path, "hicolor", directories=["apps"])
    touch(hint_dir / "apps/edit.png")
    expected = touch(hicolor_dir / "apps/edit.png")
    assert resolve_icon("edit", "Papirus", [tmp_path]) == str(expected)


def test_hint_theme_used_when_hicolor_lacks_icon(tmp_path):
    hint_dir = make_theme(tmp_path, "Papirus", directories=["apps"])
    make_theme(tmp_path, "hicolor", directories=["apps"])
    expected = touch(hint_dir / "apps/edit.svg")
    assert resolve_icon("edit", "Papirus", [tmp_path]) == str(expected)


def test_inherited_theme_is_searched(tmp_path):
    make_theme(tmp_path, "Child", directories=["apps"], inherits=["Parent"])
    parent = make_theme(tmp_path, "Parent", directories=["icons"])
    expected = touch(parent / "icons/mail.xpm")
    assert resolve_icon("mail", "Child", [tmp_path]) == str(expected)


def test_inheritance_cycle_terminates(tmp_path):
    make_theme(tmp_path, "A", directories=["apps"], inherits=["B"])
    make_theme(tmp_path, "B", directories=["apps"], inherits=["A"])
    assert resolve_icon("ghost", "A", [tmp_path]) is None


def test_scalable_apps_fallback(tmp_path):
    theme_dir = make_theme(tmp_path, "hicolor", directories=[])
    expected = touch(theme_dir / "scalable/apps/vector.svg")
    assert resolve_icon("vector", None, [tmp_path]) == str(expected)


def test_pixmaps_fallback(tmp_path):
    expected = touch(tmp_path / "pixmaps/old.xpm")
    assert resolve_icon("old", None, [tmp_path]) == str(expected)


def test_base_directory_fallback(tmp_path):
    expected = touch(tmp_path / "loose.png")
    assert resolve_icon("loose", None, [tmp_path]) == str(expected)


def test_theme_without_index_is_skipped(tmp_path):
    touch(tmp_path / "hicolor/apps/hidden.png")
    assert resolve_icon("hidden", None, [tmp_path]) is None


def test_results_are_cached_until_cleared(tmp_path):
    assert resolve_icon("late", None, [tmp_path]) is None
    expected = touch(tmp_path / "late.png")
    assert resolve_icon("late", None, [tmp_path]) is None
    clear_icon_cache()
    assert resolve_icon("late", None, [tmp_path]) == str(expected)