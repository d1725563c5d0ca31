"""
Command-line interface for checking identity provider configuration.
"""

import argparse
import json
import sys
import logging
from typing import List, Optional

from .idp import DecodeError
from .utils import ConfigError, configure_logging, default_config_path, load_identity_providers

logger = logging.getLogger("idbroker")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="idbroker-check-config",
        description="Validate the identity providers in an idbroker configuration file."
    )
    parser.add_argument("--config", default=None,
                        help=f"Configuration file (default: $IDBROKER_CONFIG or {default_config_path()})")
    parser.add_argument("--json", action="store_true", help="Print the decoded providers as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.
    """
    args = parse_arguments(argv)
    configure_logging(args.debug)

    try:
        providers = load_identity_providers(args.config)
    except (ConfigError, DecodeError) as e:
        logger.debug("Configuration check failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([p.to_dict() for p in providers], indent=2))
        return 0

    for provider in providers:
        line = str(provider.type)
        if provider.config is not None:
            line += f" name={provider.config.name} url={provider.config.url}"
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
