"""
Configuration for the SAST entrypoint.

Holds the resolved ScanConfiguration plus the helpers that read optional
YAML or JSON files supplying option defaults.
"""

import json
import os
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from soos_sast_docker.core.enums import (
    AttributionFileType,
    AttributionFormat,
    ContributingDeveloperSource,
    IntegrationName,
    IntegrationType,
    LogLevel,
    OnFailure,
    SarifGenerator,
    ScanType,
)
from soos_sast_docker.core.errors import ConfigurationError


# Default configuration file names to search for
CONFIG_FILE_NAMES = [
    ".soos-sast.yaml",
    ".soos-sast.yml",
    ".soos-sast.json",
]

DEFAULT_API_URL = "https://api.soos.io/api/"
SARIF_OUTPUT_FILE_NAME = "soosio.sast.sarif.json"
OUTPUT_SUBDIRECTORY = "soos"
REPORT_CLI_ENTRYPOINT = "./node_modules/@soos-io/soos-sast/bin/index.js"

# Environment variables consulted when an option is not given on the command line
ENVIRONMENT_FALLBACKS = {
    "apiKey": "SOOS_API_KEY",
    "apiURL": "SOOS_API_URL",
    "clientId": "SOOS_CLIENT_ID",
    "projectName": "SOOS_PROJECT_NAME",
}

SECRET_OPTIONS = ("api_key",)


@dataclass(frozen=True)
class ScanConfiguration:
    """
    Resolved options for a single run.

    Built once by the argument resolver and never mutated afterwards.
    """
    api_key: str
    client_id: str
    project_name: str
    api_url: str = DEFAULT_API_URL
    app_version: Optional[str] = None
    branch_name: Optional[str] = None
    branch_uri: Optional[str] = None
    build_uri: Optional[str] = None
    build_version: Optional[str] = None
    commit_hash: Optional[str] = None
    contributing_developer_id: Optional[str] = None
    contributing_developer_source: ContributingDeveloperSource = ContributingDeveloperSource.UNKNOWN
    contributing_developer_source_name: Optional[str] = None
    directories_to_exclude: List[str] = field(default_factory=list)
    export_file_type: AttributionFileType = AttributionFileType.UNKNOWN
    export_format: AttributionFormat = AttributionFormat.UNKNOWN
    files_to_exclude: List[str] = field(default_factory=list)
    integration_name: IntegrationName = IntegrationName.SOOS_SAST
    integration_type: IntegrationType = IntegrationType.PLUGIN
    log_level: LogLevel = LogLevel.INFO
    on_failure: OnFailure = OnFailure.CONTINUE
    operating_environment: Optional[str] = None
    scan_type: ScanType = ScanType.SAST
    script_version: Optional[str] = None

    # Scanner selection
    sarif_generator: SarifGenerator = SarifGenerator.SEMGREP
    other_options: Optional[str] = None

    # Paths
    working_directory: str = field(default_factory=os.getcwd)
    output_directory: Optional[str] = None
    source_code_path: Optional[str] = None

    @property
    def resolved_output_directory(self) -> str:
        if self.output_directory:
            return self.output_directory
        return os.path.join(self.working_directory, OUTPUT_SUBDIRECTORY)

    @property
    def sarif_output_file(self) -> str:
        return os.path.join(self.resolved_output_directory, SARIF_OUTPUT_FILE_NAME)

    @property
    def is_debug(self) -> bool:
        return self.log_level is LogLevel.DEBUG

    def to_dict(self, obfuscate: bool = True) -> Dict[str, Any]:
        """Convert config to a plain dictionary, masking secrets by default."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = value.value
        if obfuscate:
            for key in SECRET_OPTIONS:
                if data.get(key):
                    data[key] = "*********"
        return data


def load_config(path: str) -> Dict[str, Any]:
    """
    Load option defaults from a file.

    Supports YAML and JSON formats. The top level must be a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    content = path.read_text(encoding="utf-8")

    try:
        if path.suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not parse configuration file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return data


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def environment_defaults(environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Option defaults read from SOOS_* environment variables."""
    environ = os.environ if environ is None else environ
    return {
        option: environ[variable]
        for option, variable in ENVIRONMENT_FALLBACKS.items()
        if environ.get(variable)
    }
