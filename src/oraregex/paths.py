"""Manages the discovery of OraRegex settings files."""
# src/oraregex/paths.py

from pathlib import Path
from typing import Final

CONFIG_FILE_NAMES: Final[list[str]] = ["oraregex.yaml", "oraregex.yml", ".oraregex.yaml", ".oraregex.yml"]
LOG_SUBDIR: Final[Path] = Path(".oraregex") / "logs"


def find_config_file(start_path: Path | None = None) -> Path | None:
    """
    Find a settings file by searching upwards from the start_path (or CWD).

    The first directory that contains one of CONFIG_FILE_NAMES wins; within a
    directory, names are tried in CONFIG_FILE_NAMES order.

    Args:
        start_path: The path to start searching from. Defaults to CWD.

    Returns:
        The path of the settings file, or None if no directory holds one.

    """
    current_dir = (start_path or Path.cwd()).resolve()
    for parent in [current_dir, *current_dir.parents]:
        for config_file in CONFIG_FILE_NAMES:
            candidate = parent / config_file
            if candidate.is_file():
                return candidate
    return None


def get_log_dir(root_path: Path | None = None) -> Path:
    """Return the path to the debug log directory under root_path (or CWD)."""
    return (root_path or Path.cwd()) / LOG_SUBDIR


def ensure_dir_exists(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
