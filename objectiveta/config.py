"""Default moving average settings, optionally read from a TOML file.

The file lives at ~/.config/objectiveta/config.toml unless the
OBJECTIVETA_CONFIG environment variable points elsewhere::

    [moving_average]
    period = 20
    price_source = "close"
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field

from objectiveta.models.price_source import PriceSource

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 14
DEFAULT_PRICE_SOURCE = PriceSource.CLOSE
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "objectiveta" / "config.toml"
CONFIG_ENV_VAR = "OBJECTIVETA_CONFIG"


class MovingAverageSettings(BaseModel):
    """Defaults applied when a caller omits period or price source."""

    period: int = Field(default=DEFAULT_PERIOD, ge=1, description="Window size / period")
    price_source: PriceSource = Field(
        default=DEFAULT_PRICE_SOURCE, description="Candle field to average"
    )

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Config file path, honouring the OBJECTIVETA_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_settings(config_path: Optional[Path] = None) -> MovingAverageSettings:
    """Load moving average defaults from the `[moving_average]` table.
    
    Args:
        config_path: Optional path to a TOML file. Defaults to
            get_config_path().
        
    Returns:
        MovingAverageSettings. Built-in defaults if the file or table
        is missing or the file cannot be parsed.
        
    Raises:
        pydantic.ValidationError: If the table holds invalid values.
    """
    path = config_path or get_config_path()
    
    if not path.exists():
        return MovingAverageSettings()
    
    try:
        config = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return MovingAverageSettings()
    
    logger.info("Loaded moving average settings from %s", path)
    return MovingAverageSettings.model_validate(config.get("moving_average", {}))
