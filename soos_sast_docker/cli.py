"""
Command-line interface for the SOOS SAST container entrypoint.

Resolves arguments, runs the selected SARIF generator and forwards the
results to the SOOS SAST reporting CLI. Any failure exits with code 1.
"""

import os
import sys
from typing import List, Optional

from soos_sast_docker.arguments import parse_arguments
from soos_sast_docker.dispatcher import run
from soos_sast_docker.log import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    logger = configure_logging()

    try:
        config = parse_arguments(argv)
        logger = configure_logging(config.log_level)
        run(config)

    except KeyboardInterrupt:
        logger.error("Scan interrupted.")
        return 130
    except Exception as e:
        logger.error(f"Error: {e}")
        if os.environ.get("DEBUG"):
            raise
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
