"""Persistent per-user configuration.

The only persisted setting is the directory generated output is saved to. The
file lives at ``<user config dir>/metatron/config.json``. Reading never fails:
a missing, unreadable or malformed file yields the default configuration.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from metatron.types import PathType

logger = logging.getLogger(__name__)

APP_NAME = "metatron"
CONFIG_FILENAME = "config.json"


@dataclass
class Config:
    """User configuration.

    Attributes:
        output_directory: Directory saved output goes to. Empty when unset.
    """

    output_directory: str = ""


def get_config_path() -> Path:
    """Return the location of the per-user config file."""
    return Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config(config_path: Optional[PathType] = None) -> Config:
    """Load the persisted configuration.

    Args:
        config_path: Config file to read. Defaults to get_config_path().

    Returns:
        The stored configuration, or ``Config()`` when the file is missing,
        unreadable, malformed, or not a JSON object. Unknown keys are ignored.
    """
    path = Path(config_path) if config_path is not None else get_config_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Using default config, cannot read %s: %s", path, e)
        return Config()

    if not isinstance(data, dict):
        logger.debug("Using default config, %s does not hold a JSON object", path)
        return Config()

    output_directory = data.get("output_directory", "")
    return Config(output_directory=output_directory if isinstance(output_directory, str) else "")


def save_config(config: Config, config_path: Optional[PathType] = None) -> bool:
    """Persist the configuration as pretty-printed JSON.

    Args:
        config: Configuration to store.
        config_path: Config file to write. Defaults to get_config_path().

    Returns:
        True if the file was written, False otherwise.
    """
    path = Path(config_path) if config_path is not None else get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(config), indent=2), encoding="utf-8")
    except OSError as e:
        logger.debug("Failed to write config %s: %s", path, e)
        return False
    return True
