from __future__ import annotations

import os
import sys
from pathlib import Path


def data_dir() -> Path:
    if sys.platform.startswith('win'):
        appdata = os.environ.get('APPDATA')
        if appdata:
            return Path(appdata)
        return Path.home() / 'AppData' / 'Roaming'
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support'
    xdg = os.environ.get('XDG_DATA_HOME')
    if xdg:
        return Path(xdg)
    return Path.home() / '.local' / 'share'


def default_db_path(app_dir_name: str, file_name: str) -> Path:
    base = data_dir() / app_dir_name
    base.mkdir(parents=True, exist_ok=True)
    return base / file_name
