"""Enums, errors and process plumbing shared across the entrypoint."""

from soos_sast_docker.core.enums import (
    SarifGenerator,
    LogLevel,
    OnFailure,
    IntegrationName,
    IntegrationType,
    ScanType,
    AttributionFormat,
    AttributionFileType,
    ContributingDeveloperSource,
)
from soos_sast_docker.core.errors import (
    SastDockerError,
    ConfigurationError,
    ScannerNotImplementedError,
    CommandError,
)
from soos_sast_docker.core.process import CommandLine, run_command, split_options

__all__ = [
    "SarifGenerator",
    "LogLevel",
    "OnFailure",
    "IntegrationName",
    "IntegrationType",
    "ScanType",
    "AttributionFormat",
    "AttributionFileType",
    "ContributingDeveloperSource",
    "SastDockerError",
    "ConfigurationError",
    "ScannerNotImplementedError",
    "CommandError",
    "CommandLine",
    "run_command",
    "split_options",
]
