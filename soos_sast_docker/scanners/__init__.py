"""
SARIF generators.

Each supported scanner registers a ScannerDescriptor keyed by its
SarifGenerator value:

- Gitleaks: secret detection
- Opengrep: open-source Semgrep fork
- Semgrep: SAST with the curated SOOS rule packs
- SonarQube: findings export through sonar-tools
"""

from typing import Dict, List

from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.core.errors import ScannerNotImplementedError
from soos_sast_docker.scanners.base import ScannerDescriptor

# Registry of available scanners
_scanners: Dict[SarifGenerator, ScannerDescriptor] = {}


def register_scanner(descriptor: ScannerDescriptor) -> ScannerDescriptor:
    """Register a descriptor for its generator."""
    _scanners[descriptor.generator] = descriptor
    return descriptor


def get_scanner(generator: SarifGenerator) -> ScannerDescriptor:
    """Get the descriptor for a generator or raise ScannerNotImplementedError."""
    try:
        return _scanners[generator]
    except KeyError:
        raise ScannerNotImplementedError(getattr(generator, "value", generator)) from None


def list_scanners() -> List[SarifGenerator]:
    """List all generators with a registered descriptor."""
    return list(_scanners.keys())


# Import scanners to register them
from soos_sast_docker.scanners.gitleaks import GITLEAKS
from soos_sast_docker.scanners.opengrep import OPENGREP
from soos_sast_docker.scanners.semgrep import SEMGREP
from soos_sast_docker.scanners.sonarqube import SONARQUBE

__all__ = [
    "ScannerDescriptor",
    "get_scanner",
    "register_scanner",
    "list_scanners",
    "GITLEAKS",
    "OPENGREP",
    "SEMGREP",
    "SONARQUBE",
]
