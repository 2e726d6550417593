"""
Semgrep scanner.

Runs the curated SOOS rule packs unless the user passes their own options.
``-q`` still dumps results to stdout, so quiet runs simply omit
``--verbose``.

Documentation: https://semgrep.dev/
"""

from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.scanners import register_scanner
from soos_sast_docker.scanners.base import OPTIONS, VERBOSE, ScannerDescriptor

SEMGREP_BIN = "/home/soos/.local/pipx/venvs/semgrep/bin/semgrep"

DEFAULT_RULE_PACKS = [
    "p/default",
    "p/owasp-top-ten",
    "p/cwe-top-25",
    "p/security-audit",
    "p/secrets",
]

DEFAULT_SEMGREP_OPTIONS = "--no-git-ignore --metrics off " + " ".join(
    f"--config {pack}" for pack in DEFAULT_RULE_PACKS
)

SEMGREP = register_scanner(ScannerDescriptor(
    generator=SarifGenerator.SEMGREP,
    binary_path=SEMGREP_BIN,
    argument_template=(
        "scan",
        VERBOSE,
        "--max-log-list-entries=2000",
        OPTIONS,
        "--sarif",
        "--sarif-output={sarif_output}",
        "{target}",
    ),
    default_options=DEFAULT_SEMGREP_OPTIONS,
))
