"""Command line entry point for the dashboard."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from hyprdash.config import Config
from hyprdash.state import Dashboard

log = logging.getLogger(__name__)


def default_config_path() -> Path:
    """``hyprdashboard/config.toml`` inside the user's configuration directory."""
    configured = os.environ.get("XDG_CONFIG_HOME", "")
    if os.path.isabs(configured):
        base = Path(configured)
    else:
        try:
            base = Path.home() / ".config"
        except RuntimeError:
            base = Path(".")
    return base / "hyprdashboard" / "config.toml"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration and open the dashboard window."""
    parser = argparse.ArgumentParser(prog="hyprdash", description="Application launcher dashboard.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="path of the configuration file (default: %(default)s uses the user config directory)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    path = args.config if args.config is not None else default_config_path()
    config = Config.load_from_file(path)
    log.info("Loaded config: %r", config)

    from hyprdash.ui import DashboardWindow

    DashboardWindow(Dashboard.from_config(config)).run()
    return 0