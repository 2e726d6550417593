"""
Gitleaks secret scanner.

Gitleaks exits non-zero when it finds leaks. Findings travel through the
SARIF report instead, so the exit code is forced to 0 and never checked.

Documentation: https://github.com/gitleaks/gitleaks
"""

from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.scanners import register_scanner
from soos_sast_docker.scanners.base import OPTIONS, VERBOSE, ScannerDescriptor

GITLEAKS_BIN = "./gitleaks"

GITLEAKS = register_scanner(ScannerDescriptor(
    generator=SarifGenerator.GITLEAKS,
    binary_path=GITLEAKS_BIN,
    argument_template=(
        "dir",
        VERBOSE,
        "--exit-code", "0",
        "--report-format", "sarif",
        "--report-path", "{sarif_output}",
        "{target}",
        OPTIONS,
    ),
    force_success_exit=True,
))
