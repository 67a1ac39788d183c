"""Resolve paths to the reference data and configuration shipped with the package.

Typical usage:
    from trimsheet.core.resource_path import get_data_path

    csv_path = get_data_path("dry_operating_data.csv")
"""

from pathlib import Path


def get_package_root() -> Path:
    """Get the ``trimsheet`` package directory.

    Returns:
        Path to ``src/trimsheet`` when running from source, or to the
        installed package directory.
    """
    return Path(__file__).parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource relative to the package root.

    Examples:
        >>> str(get_resource_path("data/charts.yaml"))
        '/home/user/dev/trimsheet/src/trimsheet/data/charts.yaml'
    """
    return get_package_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file (e.g. ``"logging.yaml"``)."""
    return get_resource_path(f"config/{config_file}")


def get_data_path(data_file: str = "") -> Path:
    """Get path to a reference data file, or the data directory itself."""
    if not data_file:
        return get_resource_path("data")
    return get_resource_path(f"data/{data_file}")
