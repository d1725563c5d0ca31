"""
Utility functions for idbroker: configuration loading and logging.
"""

import os
import sys
import json
import logging
import dotenv
import yaml
from typing import Any, Dict, List, Optional

from .idp import IdentityProvider, decode_all

logger = logging.getLogger("idbroker")

# Load environment variables
dotenv.load_dotenv()

DEFAULT_CONFIG_PATH = "config.yaml"
IDENTITY_PROVIDERS_KEY = "identity-providers"


class ConfigError(ValueError):
    """The configuration file could not be read."""


def configure_logging(debug: bool = False) -> None:
    """Configure the idbroker logger to write to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.debug("Logging configured at DEBUG level.")


def default_config_path() -> str:
    """Return the configuration path from IDBROKER_CONFIG or the default."""
    return os.environ.get("IDBROKER_CONFIG") or DEFAULT_CONFIG_PATH


def load_config_from_file(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        config_path: Path to the configuration file; files ending in
            .json are parsed as JSON, anything else as YAML

    Returns:
        Dict containing the configuration

    Raises:
        ConfigError: If the file is not found, cannot be read, cannot
            be parsed or does not hold a mapping
    """
    config_path = config_path or default_config_path()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"{config_path} not found.") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Invalid encoding in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(data).__name__}")
    logger.debug(f"Loaded configuration from {config_path}")
    return data


def load_identity_providers(config_path: Optional[str] = None) -> List[IdentityProvider]:
    """
    Load and decode the identity providers listed in a configuration file.

    Any decode error is propagated; the broker must not start with a
    partially configured set of providers.
    """
    config = load_config_from_file(config_path)
    records = config.get(IDENTITY_PROVIDERS_KEY)
    if records is None:
        logger.warning(f"No {IDENTITY_PROVIDERS_KEY} configured")
        return []
    providers = decode_all(records)
    logger.debug(f"Loaded {len(providers)} identity providers")
    return providers
