"""
SOOS SAST Docker entrypoint

Runs a third-party SARIF generator (Semgrep, Opengrep, Gitleaks or a
SonarQube findings export) inside the container and forwards its results
to the SOOS SAST reporting CLI.
"""

__version__ = "1.0.0"
__author__ = "SOOS"

from soos_sast_docker.config import ScanConfiguration
from soos_sast_docker.core.enums import SarifGenerator, LogLevel

__all__ = [
    "ScanConfiguration",
    "SarifGenerator",
    "LogLevel",
]
