# hyprdash

hyprdash is a small launcher dashboard for Linux desktops. It scans the XDG
application directories for `.desktop` entries. For each entry it looks for an
icon in the configured icon theme, the themes that theme inherits from, and
`hicolor`. The entries are shown in a grid of buttons. Clicking a button runs
the entry's `Exec` command through `sh -c`.

## Installation

```
pip install .
```

The window is drawn with Tkinter, which ships with most Python builds. The
package has no other dependencies.

## Usage

```
hyprdash [--config PATH]
```

`--config` names the configuration file to read. Without it the file is read
from `$XDG_CONFIG_HOME/hyprdashboard/config.toml`. When `XDG_CONFIG_HOME` is
unset or not an absolute path, `~/.config/hyprdashboard/config.toml` is used.
The command logs at `INFO` level to standard error. It logs the loaded
configuration and each icon that it finds or fails to find.

The dashboard has two screens:

- **Launcher**: a header line and a row of quick buttons (Network,
  Bluetooth, Audio Volume, Settings). Below them the applications are shown
  four to a row and sorted by name without regard to case. An entry is listed
  only if it has a `Name`, an `Exec` and an `Icon` key. Icons that Tk can read
  (PNG, GIF, PPM/PGM) are scaled to about 64 pixels. Other icons, such as SVG,
  are left out and the button shows only its name.
- **Settings**: a menu with Network, Audio and Hyprland entries and a **Back**
  button that returns to the launcher. The launcher's **Settings** and
  **Network** buttons open this screen.

## Configuration

The file is optional. If it is missing or unreadable, or is not valid TOML,
the defaults apply. The defaults also apply if a value has the wrong type.
Unknown keys are ignored.

```toml
icon_theme = "Papirus"
```

| Key          | Meaning                                                        |
|--------------|----------------------------------------------------------------|
| `icon_theme` | Icon theme to search first; `hicolor` is always searched too.  |

## Icon lookup

Icons are looked up under `/usr/share/icons`, `/usr/local/share/icons` and
`$HOME/.icons`. Each theme is searched only if it has an `index.theme`. The
search first tries the directories listed in that file's `[Icon Theme]`
section, then `scalable/apps`. Each directory is tried with the extensions
`png`, `svg` and `xpm` in that order. Themes listed under `Inherits` are
searched next. If no theme has the icon, the `pixmaps` directory under each
base path is tried, and after that the base paths themselves. Results are
cached for the life of the process.

## Library use

```python
from hyprdash.config import Config
from hyprdash.state import Dashboard, find_applications
from hyprdash.icons import resolve_icon, default_theme_paths, clear_icon_cache
from hyprdash.message import LaunchApp, ToggleSettings

config = Config.load_from_file("config.toml")
dashboard = Dashboard.from_config(config)
for app in dashboard.apps:
    print(app.name, app.exec, app.icon)

dashboard.update(ToggleSettings())   # dashboard.show_settings is now True
dashboard.update(LaunchApp("true"))  # runs the command through sh -c

print(resolve_icon("firefox", "Adwaita", default_theme_paths()))
clear_icon_cache()
```

`find_applications(config, search_dirs, theme_paths)` takes explicit data
directories and icon base paths. It reads `<dir>/applications` in each data
directory. `hyprdash.icons.parse_index_theme(path)` returns a `ThemeInfo`
holding a theme's `directories` and `inherits`. It returns `None` if the file
cannot be read or has no `[Icon Theme]` section. `hyprdash.ui.DashboardWindow`
shows a `Dashboard` in a Tk window.

## What it does not do

- The header shows the fixed text `DATE:DDDD YYYY:MM:DD and TIME:HH:MM`, not
  the current date and time.
- The Bluetooth and Audio Volume buttons on the launcher do nothing.
- The Network, Audio and Hyprland entries on the settings screen are labels
  only. They do not change any setting.