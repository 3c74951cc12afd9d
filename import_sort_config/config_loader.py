from os.path import abspath, dirname, join

from dynaconf import Dynaconf

current_dir = dirname(abspath(__file__))
global_settings = Dynaconf(
    envvar_prefix="IMPORT_SORT_CONFIG",
    merge_enabled=True,
    settings_files=[join(current_dir, f) for f in [
        "settings/configuration.toml",
    ]],
)


def get_settings():
    """
    Get the current settings object.

    Returns:
        Dynaconf: The settings object loaded from the bundled configuration files.
    """
    return global_settings
