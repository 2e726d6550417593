"""
SonarQube findings export via sonar-tools.

Documentation: https://github.com/okorach/sonar-tools
"""

from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.scanners import register_scanner
from soos_sast_docker.scanners.base import OPTIONS, VERBOSE, ScannerDescriptor

SONAR_FINDINGS_EXPORT_BIN = "/home/soos/.local/pipx/venvs/sonar-tools/bin/sonar-findings-export"

SONARQUBE = register_scanner(ScannerDescriptor(
    generator=SarifGenerator.SONARQUBE,
    binary_path=SONAR_FINDINGS_EXPORT_BIN,
    argument_template=(
        VERBOSE,
        "--format", "sarif",
        OPTIONS,
        "--file", "{sarif_output}",
    ),
    default_options="--httpTimeout 60",
    verbose_args=("-v", "DEBUG"),
))
