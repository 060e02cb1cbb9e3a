"""
JSON config file loading.

Expected format::

    {"folders": ["/mnt/logs/web1", "//server2/share/logs"]}
"""

import json
from typing import List

from .exceptions import ConfigurationError


def load_config(config_path: str) -> List[str]:
    """Load the folder list from a JSON config file.

    Raises:
        ConfigurationError: If the file cannot be opened or parsed, or lists
            no folders.
    """
    try:
        with open(config_path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"failed to open config file: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"failed to parse config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("failed to parse config file: expected a JSON object")

    folders = data.get("folders")
    if folders is None:
        folders = []
    if not isinstance(folders, list) or not all(isinstance(f, str) for f in folders):
        raise ConfigurationError("failed to parse config file: 'folders' must be a list of strings")

    if not folders:
        raise ConfigurationError("no folders specified in config file")

    return folders
