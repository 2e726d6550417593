"""
Report step: translate the scan configuration into arguments for the
SOOS SAST reporting CLI.

Every field of SastAnalysisArguments is mapped in declaration order:

- None values and empty lists are skipped
- enum values equal to ``Unknown`` are skipped, other enums are emitted bare
- booleans become a bare flag when true and nothing when false
- any other scalar is emitted quoted, lists quote each element
"""

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from soos_sast_docker.config import REPORT_CLI_ENTRYPOINT, ScanConfiguration
from soos_sast_docker.core.enums import (
    AttributionFileType,
    AttributionFormat,
    ContributingDeveloperSource,
    IntegrationName,
    IntegrationType,
    LogLevel,
    OnFailure,
    ScanType,
    is_unknown,
)
from soos_sast_docker.core.process import CommandLine

NODE_EXECUTABLE = "node"

# Fields that must be supplied by the caller rather than the configuration
REQUIRED_OVERRIDES = ("directories_to_exclude", "files_to_exclude", "output_directory", "source_code_path")


def _flag(name: str) -> Dict[str, str]:
    return {"flag": name}


@dataclass(frozen=True)
class SastAnalysisArguments:
    """Arguments accepted by the SOOS SAST reporting CLI."""
    api_key: Optional[str] = field(default=None, metadata=_flag("apiKey"))
    api_url: Optional[str] = field(default=None, metadata=_flag("apiURL"))
    app_version: Optional[str] = field(default=None, metadata=_flag("appVersion"))
    branch_name: Optional[str] = field(default=None, metadata=_flag("branchName"))
    branch_uri: Optional[str] = field(default=None, metadata=_flag("branchURI"))
    build_uri: Optional[str] = field(default=None, metadata=_flag("buildURI"))
    build_version: Optional[str] = field(default=None, metadata=_flag("buildVersion"))
    client_id: Optional[str] = field(default=None, metadata=_flag("clientId"))
    commit_hash: Optional[str] = field(default=None, metadata=_flag("commitHash"))
    contributing_developer_id: Optional[str] = field(default=None, metadata=_flag("contributingDeveloperId"))
    contributing_developer_source: Optional[ContributingDeveloperSource] = field(
        default=None, metadata=_flag("contributingDeveloperSource"))
    contributing_developer_source_name: Optional[str] = field(
        default=None, metadata=_flag("contributingDeveloperSourceName"))
    directories_to_exclude: Optional[List[str]] = field(default=None, metadata=_flag("directoriesToExclude"))
    export_file_type: Optional[AttributionFileType] = field(default=None, metadata=_flag("exportFileType"))
    export_format: Optional[AttributionFormat] = field(default=None, metadata=_flag("exportFormat"))
    files_to_exclude: Optional[List[str]] = field(default=None, metadata=_flag("filesToExclude"))
    integration_name: Optional[IntegrationName] = field(default=None, metadata=_flag("integrationName"))
    integration_type: Optional[IntegrationType] = field(default=None, metadata=_flag("integrationType"))
    log_level: Optional[LogLevel] = field(default=None, metadata=_flag("logLevel"))
    on_failure: Optional[OnFailure] = field(default=None, metadata=_flag("onFailure"))
    operating_environment: Optional[str] = field(default=None, metadata=_flag("operatingEnvironment"))
    output_directory: Optional[str] = field(default=None, metadata=_flag("outputDirectory"))
    project_name: Optional[str] = field(default=None, metadata=_flag("projectName"))
    scan_type: Optional[ScanType] = field(default=None, metadata=_flag("scanType"))
    script_version: Optional[str] = field(default=None, metadata=_flag("scriptVersion"))
    source_code_path: Optional[str] = field(default=None, metadata=_flag("sourceCodePath"))


def build_sast_arguments(config: ScanConfiguration, overrides: Dict[str, Any]) -> SastAnalysisArguments:
    """
    Merge the configuration with step-specific overrides.

    An override wins whenever it is not None. The exclusion lists, output
    directory and source code path must come from the overrides.
    """
    for name in REQUIRED_OVERRIDES:
        if overrides.get(name) is None:
            raise ValueError(f"overrides.{name} is required")

    values = {}
    for f in fields(SastAnalysisArguments):
        override = overrides.get(f.name)
        if override is not None:
            values[f.name] = override
        else:
            values[f.name] = getattr(config, f.name, None)
    return SastAnalysisArguments(**values)


def _flag_name(f) -> str:
    return f.metadata.get("flag", f.name)


def _is_enum(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return bool(value) and all(isinstance(item, Enum) for item in value)
    return isinstance(value, Enum)


def _enum_text(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        known = [item.value for item in value if not is_unknown(item)]
        return ",".join(known) if known else None
    if is_unknown(value):
        return None
    return value.value


def iter_mapped_fields(arguments: Any) -> Iterator[Tuple[str, Any, bool]]:
    """
    Yield ``(flag, value, quoted)`` for each field that produces output.

    ``value`` is None for bare boolean flags, a string for scalars and
    enums, and a list of strings for non-enum list fields.
    """
    if not is_dataclass(arguments):
        raise TypeError(f"Expected a dataclass instance, got {type(arguments).__name__}")

    for f in fields(arguments):
        value = getattr(arguments, f.name)
        flag = _flag_name(f)

        if value is None or (isinstance(value, (list, tuple)) and len(value) == 0):
            continue

        if _is_enum(value):
            text = _enum_text(value)
            if text is not None:
                yield flag, text, False
        elif isinstance(value, bool):
            if value:
                yield flag, None, False
        elif isinstance(value, (list, tuple)):
            yield flag, [str(item) for item in value], True
        else:
            yield flag, str(value), True


def map_to_cli_tokens(arguments: Any) -> List[str]:
    """Argument tokens for direct process creation; no quoting is applied."""
    tokens = []
    for flag, value, _ in iter_mapped_fields(arguments):
        tokens.append(f"--{flag}")
        if value is None:
            continue
        tokens.append(",".join(value) if isinstance(value, list) else value)
    return tokens


def format_cli_args(arguments: Any) -> str:
    """Render the mapped arguments as a single human-readable string."""
    parts = []
    for flag, value, quoted in iter_mapped_fields(arguments):
        if value is None:
            parts.append(f"--{flag}")
        elif isinstance(value, list):
            parts.append(f"--{flag} " + ",".join(f'"{item}"' for item in value))
        elif quoted:
            parts.append(f'--{flag} "{value}"')
        else:
            parts.append(f"--{flag} {value}")
    return " ".join(parts)


def format_masked_cli_args(arguments: SastAnalysisArguments) -> str:
    """format_cli_args with the API key masked, for logging."""
    masked = {f.name: getattr(arguments, f.name) for f in fields(arguments)}
    if masked.get("api_key"):
        masked["api_key"] = "*********"
    return format_cli_args(SastAnalysisArguments(**masked))


def build_report_command(arguments: SastAnalysisArguments,
                         entrypoint: str = REPORT_CLI_ENTRYPOINT) -> CommandLine:
    """``node <report-cli-entrypoint> <mapped-flags>``"""
    return CommandLine.of(NODE_EXECUTABLE, [entrypoint], map_to_cli_tokens(arguments))

