"""
Argument resolver.

Turns raw process arguments into a ScanConfiguration. Values are layered
as: command line, then SOOS_* environment variables, then a YAML/JSON
config file, then built-in defaults.
"""

import argparse
import logging
import platform
import sys
from typing import Any, Dict, List, Optional, Sequence

from soos_sast_docker import __version__
from soos_sast_docker.config import (
    DEFAULT_API_URL,
    ScanConfiguration,
    environment_defaults,
    find_config,
    load_config,
)
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
    parse_enum,
)
from soos_sast_docker.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Options preceding the rule packs of the deprecated Semgrep-only surface
LEGACY_SEMGREP_BASE_OPTIONS = "--no-git-ignore --metrics off"

REQUIRED_OPTIONS = ("apiKey", "clientId", "projectName")

# Options whose value is handed on verbatim, even when it starts with a dash
PASS_THROUGH_OPTIONS = ("--otherOptions", "--configs")


class ArgumentResolverParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str):
        raise ConfigurationError(f"{message}\n{self.format_usage().strip()}")


def comma_list(raw: str) -> List[str]:
    """Split comma-separated input into trimmed, non-empty items."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def enum_type(enum_cls):
    """argparse ``type`` callable validating against an enum."""
    def convert(raw: str):
        try:
            return parse_enum(enum_cls, raw)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))
    convert.__name__ = enum_cls.__name__
    return convert


def default_operating_environment() -> str:
    return f"{platform.system()} {platform.machine()} {platform.release()}".strip()


def create_parser() -> ArgumentResolverParser:
    """Create the argument parser."""
    parser = ArgumentResolverParser(
        prog="soos-sast-docker",
        description="Run a SARIF generator and send its results to SOOS SAST.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  soos-sast-docker --clientId ID --apiKey KEY --projectName app
  soos-sast-docker ... --sarifGenerator Gitleaks
  soos-sast-docker ... --sarifGenerator File --sourceCodePath ./reports
  soos-sast-docker ... --otherOptions "--config p/python --metrics off"
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--configFile",
        dest="config_file",
        help="YAML or JSON file supplying option defaults (default: search for .soos-sast.yaml)",
    )

    # Standard scan metadata
    parser.add_argument("--apiKey", dest="api_key", help="SOOS API key (env: SOOS_API_KEY)")
    parser.add_argument(
        "--apiURL",
        dest="api_url",
        default=DEFAULT_API_URL,
        help=f"SOOS API URL (default: {DEFAULT_API_URL})",
    )
    parser.add_argument("--appVersion", dest="app_version", help="App version, intended for internal use only")
    parser.add_argument("--branchName", dest="branch_name", help="Name of the branch being scanned")
    parser.add_argument("--branchURI", dest="branch_uri", help="URI of the branch being scanned")
    parser.add_argument("--buildURI", dest="build_uri", help="URI of the build")
    parser.add_argument("--buildVersion", dest="build_version", help="Version of the build")
    parser.add_argument("--clientId", dest="client_id", help="SOOS client id (env: SOOS_CLIENT_ID)")
    parser.add_argument("--commitHash", dest="commit_hash", help="Commit hash being scanned")
    parser.add_argument(
        "--contributingDeveloperId",
        dest="contributing_developer_id",
        help="Contributing developer id",
    )
    parser.add_argument(
        "--contributingDeveloperSource",
        dest="contributing_developer_source",
        type=enum_type(ContributingDeveloperSource),
        default=ContributingDeveloperSource.UNKNOWN,
        help="Source of the contributing developer id",
    )
    parser.add_argument(
        "--contributingDeveloperSourceName",
        dest="contributing_developer_source_name",
        help="Name of the contributing developer source",
    )
    parser.add_argument(
        "--directoriesToExclude",
        dest="directories_to_exclude",
        type=comma_list,
        default=[],
        help="Comma-separated directories to exclude when looking for SARIF files",
    )
    parser.add_argument(
        "--exportFileType",
        dest="export_file_type",
        type=enum_type(AttributionFileType),
        default=AttributionFileType.UNKNOWN,
        help="Export file type",
    )
    parser.add_argument(
        "--exportFormat",
        dest="export_format",
        type=enum_type(AttributionFormat),
        default=AttributionFormat.UNKNOWN,
        help="Export format",
    )
    parser.add_argument(
        "--filesToExclude",
        dest="files_to_exclude",
        type=comma_list,
        default=[],
        help="Comma-separated files to exclude when looking for SARIF files",
    )
    parser.add_argument(
        "--integrationName",
        dest="integration_name",
        type=enum_type(IntegrationName),
        default=IntegrationName.SOOS_SAST,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--integrationType",
        dest="integration_type",
        type=enum_type(IntegrationType),
        default=IntegrationType.PLUGIN,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--logLevel",
        dest="log_level",
        type=enum_type(LogLevel),
        default=LogLevel.INFO,
        help="Minimum level to show logs: PASS, IGNORE, INFO, WARN, FAIL, DEBUG, ERROR (default: INFO)",
    )
    parser.add_argument(
        "--onFailure",
        dest="on_failure",
        type=enum_type(OnFailure),
        default=OnFailure.CONTINUE,
        help="Action to perform when the scan fails: continue_on_failure or fail_the_build",
    )
    parser.add_argument(
        "--operatingEnvironment",
        dest="operating_environment",
        default=default_operating_environment(),
        help="Operating environment, intended for internal use only",
    )
    parser.add_argument("--projectName", dest="project_name", help="Project name (env: SOOS_PROJECT_NAME)")
    parser.add_argument(
        "--scanType",
        dest="scan_type",
        type=enum_type(ScanType),
        default=ScanType.SAST,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--scriptVersion",
        dest="script_version",
        default=__version__,
        help="Script version, intended for internal use only",
    )

    # Scanner selection and pass-through
    parser.add_argument(
        "--sarifGenerator",
        dest="sarif_generator",
        type=enum_type(SarifGenerator),
        default=SarifGenerator.SEMGREP,
        help="Generator (or file source) for the SARIF 2.1 input: "
             "File, Gitleaks, Opengrep, Semgrep, SonarQube (default: Semgrep)",
    )
    parser.add_argument(
        "--otherOptions",
        dest="other_options",
        help="Other command line arguments sent directly to the SARIF generator",
    )
    parser.add_argument(
        "--configs",
        dest="configs",
        type=comma_list,
        default=[],
        help="Deprecated: comma-separated Semgrep rule packs. Use --otherOptions instead.",
    )

    # Paths
    parser.add_argument(
        "--workingDirectory",
        dest="working_directory",
        help="Directory to scan (default: current directory)",
    )
    parser.add_argument(
        "--outputDirectory",
        dest="output_directory",
        help="Directory receiving the generated SARIF file (default: <workingDirectory>/soos)",
    )
    parser.add_argument(
        "--sourceCodePath",
        dest="source_code_path",
        help="Where existing *.sarif.json files live when --sarifGenerator is File "
             "(default: working directory)",
    )

    return parser


def _option_destinations(parser: argparse.ArgumentParser) -> Dict[str, str]:
    """Map camelCase option names to namespace attributes."""
    destinations = {}
    for action in parser._actions:
        for option in action.option_strings:
            if option.startswith("--"):
                destinations[option[2:]] = action.dest
    return destinations


def _as_default(option: str, value: Any) -> Any:
    # argparse only runs ``type`` over string defaults
    if value is None:
        return value
    items = value if isinstance(value, (list, tuple)) else [value]
    for item in items:
        # YAML reads yes/no as booleans and 1.10 as 1.1
        if isinstance(item, (bool, float)):
            raise ConfigurationError(
                f"Configuration file value for {option} must be quoted: {item!r}"
            )
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def bind_pass_through_values(argv: Sequence[str]) -> List[str]:
    """
    Join each pass-through option with the token after it.

    ``--otherOptions -q`` becomes ``--otherOptions=-q`` so argparse never
    mistakes the value for an option of its own.
    """
    bound: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token in PASS_THROUGH_OPTIONS:
            value = next(tokens, None)
            if value is not None:
                token = f"{token}={value}"
        bound.append(token)
    return bound


def _file_defaults(argv: Sequence[str]) -> Dict[str, Any]:
    pre_parser = ArgumentResolverParser(add_help=False, allow_abbrev=False)
    pre_parser.add_argument("--configFile", dest="config_file")
    pre_parser.add_argument("--workingDirectory", dest="working_directory")
    known, _ = pre_parser.parse_known_args(argv)

    path = known.config_file or find_config(known.working_directory or ".")
    if not path:
        return {}
    logger.debug(f"Loading option defaults from {path}")
    return load_config(path)


def _apply_legacy_configs(values: Dict[str, Any]) -> None:
    configs = values.pop("configs", None)
    if not configs:
        return
    logger.warning("--configs is deprecated and will be removed; use --otherOptions instead.")
    if values.get("sarif_generator") is not SarifGenerator.SEMGREP:
        logger.warning("--configs only applies to the Semgrep generator and is ignored.")
        return
    if values.get("other_options"):
        logger.warning("--configs is ignored because --otherOptions was given.")
        return
    packs = " ".join(f"--config {pack}" for pack in configs)
    values["other_options"] = f"{LEGACY_SEMGREP_BASE_OPTIONS} {packs}"


def parse_arguments(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Dict[str, str]] = None,
) -> ScanConfiguration:
    """
    Resolve process arguments into a ScanConfiguration.

    Raises ConfigurationError for unknown options, invalid enum values,
    unreadable config files and missing required options.
    """
    parser = create_parser()
    argv = bind_pass_through_values(argv if argv is not None else sys.argv[1:])
    destinations = _option_destinations(parser)

    defaults: Dict[str, Any] = {}
    for option, value in _file_defaults(argv).items():
        if option not in destinations:
            raise ConfigurationError(f"Unknown option in configuration file: {option}")
        defaults[destinations[option]] = _as_default(option, value)
    for option, value in environment_defaults(environ).items():
        defaults[destinations[option]] = value
    parser.set_defaults(**defaults)

    namespace = parser.parse_args(argv)
    values = vars(namespace)
    values.pop("config_file", None)

    missing = [
        f"--{option}" for option in REQUIRED_OPTIONS
        if not values.get(destinations[option])
    ]
    if missing:
        parser.error(f"the following arguments are required: {', '.join(missing)}")

    _apply_legacy_configs(values)

    if not values.get("working_directory"):
        values.pop("working_directory", None)

    return ScanConfiguration(**values)
