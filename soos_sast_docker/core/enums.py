"""
Enumerations shared by the argument resolver and the report mapping.

Values match what the downstream SOOS CLIs accept on their command line.
"""

from enum import Enum
from typing import Type, TypeVar


UNKNOWN = "Unknown"

E = TypeVar("E", bound=Enum)


class SarifGenerator(Enum):
    """Source of the SARIF input handed to the report step."""
    UNKNOWN = UNKNOWN
    FILE = "File"
    GITLEAKS = "Gitleaks"
    OPENGREP = "Opengrep"
    SEMGREP = "Semgrep"
    SONARQUBE = "SonarQube"


class LogLevel(Enum):
    """SOOS log levels."""
    PASS = "PASS"
    IGNORE = "IGNORE"
    INFO = "INFO"
    WARN = "WARN"
    FAIL = "FAIL"
    DEBUG = "DEBUG"
    ERROR = "ERROR"


class OnFailure(Enum):
    CONTINUE = "continue_on_failure"
    FAIL = "fail_the_build"


class IntegrationName(Enum):
    SOOS_SAST = "SoosSast"


class IntegrationType(Enum):
    PLUGIN = "Plugin"
    SCRIPT = "Script"
    WEBHOOK = "Webhook"


class ScanType(Enum):
    SAST = "SAST"


class AttributionFormat(Enum):
    """Export formats understood by the report CLI."""
    UNKNOWN = UNKNOWN
    CYCLONE_DX = "CycloneDx"
    SPDX = "Spdx"
    SARIF = "Sarif"
    SOOS_ISSUES = "SoosIssues"
    SOOS_LICENSES = "SoosLicenses"
    SOOS_PACKAGES = "SoosPackages"
    SOOS_VULNERABILITIES = "SoosVulnerabilities"


class AttributionFileType(Enum):
    UNKNOWN = UNKNOWN
    CSV = "Csv"
    HTML = "Html"
    JSON = "Json"
    TEXT = "Text"
    XML = "Xml"


class ContributingDeveloperSource(Enum):
    UNKNOWN = UNKNOWN
    OPEN_SOURCE = "OpenSource"
    GITHUB_ACTIONS = "GitHubActions"
    BITBUCKET_PIPELINES = "BitbucketPipelines"
    AZURE_DEVOPS = "AzureDevOps"
    AWS_CODEBUILD = "AwsCodeBuild"
    JENKINS = "Jenkins"
    CIRCLE_CI = "CircleCI"
    TEAMCITY = "TeamCity"
    ENVIRONMENT_VARIABLE = "EnvironmentVariable"


def parse_enum(enum_cls: Type[E], raw: str) -> E:
    """
    Look up an enum member by value or member name, ignoring case.

    Raises ValueError listing the accepted values when nothing matches.
    """
    text = raw.strip().lower()
    for member in enum_cls:
        if member.value.lower() == text or member.name.lower() == text:
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"invalid value '{raw}' (choose from: {choices})")


def is_unknown(value: Enum) -> bool:
    """True for the sentinel that marks an enum option as unset."""
    return value.value == UNKNOWN
