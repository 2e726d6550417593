"""
Entry point for running the SAST entrypoint as a module.

Usage:
    python -m soos_sast_docker --clientId ID --apiKey KEY --projectName app
    python -m soos_sast_docker --help
"""

import sys
from soos_sast_docker.cli import main

if __name__ == "__main__":
    sys.exit(main())
