"""
Opengrep scanner, invoked with the same argument shape as Semgrep.
"""

from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.scanners import register_scanner
from soos_sast_docker.scanners.base import OPTIONS, VERBOSE, ScannerDescriptor

OPENGREP_BIN = "/home/soos/.local/bin/opengrep"

OPENGREP = register_scanner(ScannerDescriptor(
    generator=SarifGenerator.OPENGREP,
    binary_path=OPENGREP_BIN,
    argument_template=(
        "scan",
        VERBOSE,
        "--max-log-list-entries=2000",
        OPTIONS,
        "--sarif",
        "--sarif-output={sarif_output}",
        "{target}",
    ),
    default_options="--no-git-ignore",
))
