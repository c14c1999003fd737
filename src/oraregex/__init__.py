"""OraRegex: Oracle REGEXP_* function semantics on top of the Python regex engine."""

import importlib.metadata

from .config import EmulationSettings, load_settings
from .exceptions import InvalidArgumentError
from .functions import regexp_count, regexp_instr, regexp_like, regexp_substr


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        # Dynamically get the version from the installed package
        return importlib.metadata.version("OraRegex")
    except importlib.metadata.PackageNotFoundError:
        # Fallback for when the package is not installed, e.g., in a development environment
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "EmulationSettings",
    "InvalidArgumentError",
    "__version__",
    "load_settings",
    "regexp_count",
    "regexp_instr",
    "regexp_like",
    "regexp_substr",
]
