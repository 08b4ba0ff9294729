from __future__ import annotations

import os
from pathlib import Path


ENV_HOME = "PHRASELIST_HOME"


def user_data_dir() -> Path:
    """
    Where saved list format defaults live, first match wins:
      $PHRASELIST_HOME
      %APPDATA%/phraselist      (Windows)
      $XDG_CONFIG_HOME/phraselist
      ~/.config/phraselist
    """
    override = os.environ.get(ENV_HOME)
    if override:
        return Path(override).expanduser()

    if os.name == "nt" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / "phraselist"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "phraselist"
