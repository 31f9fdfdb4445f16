"""Configuration loading: defaults, then config.json, then environment."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

__all__ = ["DEFAULT_CONFIG", "CONFIG_FILE", "load_config"]

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(__file__).resolve().parent.parent / "config.json"

DEFAULT_CONFIG: dict[str, Any] = {
    "api_base": "https://hn.algolia.com/api/v1",
    "default_query": "redux",
    "timeout": None,  # No timeout unless configured
    "log_level": "WARNING",
    "response_format": "markdown",
}

# Environment variable -> config key
ENV_VARS = {
    "HN_API_BASE": "api_base",
    "HN_DEFAULT_QUERY": "default_query",
    "HN_API_TIMEOUT": "timeout",
    "HN_LOG_LEVEL": "log_level",
    "HN_RESPONSE_FORMAT": "response_format",
}


def load_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """
    Build the effective configuration.

    Later layers win: built-in defaults, then ``config.json`` (if present),
    then environment variables (``.env`` is loaded first).
    """
    config = dict(DEFAULT_CONFIG)

    path = config_path or CONFIG_FILE
    if path.exists():
        try:
            file_config = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load {path.name}: {e}")
        else:
            if isinstance(file_config, dict):
                config.update(
                    {k: v for k, v in file_config.items() if k in DEFAULT_CONFIG}
                )
            else:
                logger.warning(f"Ignoring {path.name}: expected a JSON object")

    load_dotenv()
    for env_var, key in ENV_VARS.items():
        value = os.getenv(env_var, "").strip()
        if value:
            config[key] = value

    config["timeout"] = _parse_timeout(config["timeout"])
    config["log_level"] = str(config["log_level"]).upper()
    config["response_format"] = str(config["response_format"]).lower()
    return config


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid timeout {value!r}, using no timeout")
        return None
    return timeout if timeout > 0 else None
