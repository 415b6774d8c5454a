"""Configuration management for slippytile.

Settings are loaded with Dynaconf from multiple locations in order of
increasing priority:

1. Global settings (/etc/slippytile/)
2. User settings (~/.config/slippytile/)
3. Current directory settings (./)
4. Environment variable specified file (SLIPPYTILE_SETTINGS_FILE_FOR_DYNACONF)

Environment variables prefixed with ``SLIPPYTILE_`` override all files.

Attributes
----------
USER_DIR : pathlib.Path
    Path to user configuration directory.
GLOB_DIR : pathlib.Path
    Path to global configuration directory.
CURR_DIR : pathlib.Path
    Path to current working directory.
DEFAULTS : dict
    Values used when a key is set nowhere.
settings : Dynaconf
    The Dynaconf settings object with loaded configuration.
"""
import os
import pathlib

from dynaconf import Dynaconf

from .constants import TILE_SIZE

USER_DIR = pathlib.Path("~/.config/slippytile").expanduser()
GLOB_DIR = pathlib.Path("/etc/slippytile/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    GLOB_DIR / ".secrets.toml",
    USER_DIR / "settings.toml",
    USER_DIR / ".secrets.toml",
    CURR_DIR / "settings.toml",
    CURR_DIR / ".secrets.toml"
    ]
extra_file = os.getenv("SLIPPYTILE_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

DEFAULTS = {
    "tile_size": TILE_SIZE,
    "zoom": 0,
    "verbose": False,
}

settings = Dynaconf(
    merge_enabled=True,
    envvar_prefix="SLIPPYTILE",
    settings_files=[str(fn) for fn in settings_files],
    environments=True,
    load_dotenv=True,
)


def get(key):
    """Return a setting, falling back to ``DEFAULTS``."""
    return settings.get(key, DEFAULTS.get(key))


def change_env(new_env):
    """Change the active Dynaconf environment.

    Parameters
    ----------
    new_env : str
        The environment name to switch to (e.g., 'development', 'production').
    """
    settings.setenv(new_env)
    settings.reload()
