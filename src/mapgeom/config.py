"""Configuration management for mapgeom.

Settings are loaded with Dynaconf from multiple locations in order of
increasing priority:

1. Global settings (/etc/mapgeom/)
2. User settings (~/.config/mapgeom/)
3. Current directory settings (./)
4. Environment variable specified file (MAPGEOM_SETTINGS_FILE_FOR_DYNACONF)

Recognised keys are ``edge_step``, ``max_slice_degrees``,
``boundary_epsilon``, ``circle_precision`` and ``circle_earth_radius``.
All are optional, modules fall back to their own defaults.

Attributes
----------
USER_DIR : pathlib.Path
    Path to user configuration directory.
GLOB_DIR : pathlib.Path
    Path to global configuration directory.
CURR_DIR : pathlib.Path
    Path to current working directory.
settings : Dynaconf
    The Dynaconf settings object with loaded configuration.
"""
import os
import pathlib

from dynaconf import Dynaconf

USER_DIR = pathlib.Path("~/.config/mapgeom").expanduser()
GLOB_DIR = pathlib.Path("/etc/mapgeom/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    GLOB_DIR / ".secrets.toml",
    USER_DIR / "settings.toml",
    USER_DIR / ".secrets.toml",
    CURR_DIR / "settings.toml",
    CURR_DIR / ".secrets.toml"
    ]
extra_file = os.getenv("MAPGEOM_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

settings = Dynaconf(
    merge_enabled = True,
    envvar_prefix="MAPGEOM",
    settings_files=settings_files,
    environments=True,
    load_dotenv=True,
)


def change_env(new_env):
    """Change the active Dynaconf environment.

    Parameters
    ----------
    new_env : str
        The environment name to switch to (e.g., 'development', 'production').
    """
    settings.setenv(new_env)
    settings.reload()
