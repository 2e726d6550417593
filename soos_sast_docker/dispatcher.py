"""
Command dispatcher.

Runs the selected SARIF generator, then hands its output to the SOOS SAST
reporting CLI. The two steps run strictly in sequence; the report step
starts only after the scanner process has exited.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

from soos_sast_docker.config import ScanConfiguration
from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.core.process import CommandLine, run_command
from soos_sast_docker.report import (
    SastAnalysisArguments,
    build_report_command,
    build_sast_arguments,
    format_masked_cli_args,
)
from soos_sast_docker.scanners import get_scanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """What a run did: the scanner command (if any) and the report command."""
    source_code_path: str
    scanner_command: Optional[CommandLine]
    report_command: CommandLine


def run_scanner_step(config: ScanConfiguration) -> Optional[CommandLine]:
    """
    Produce the SARIF input for the report step.

    Returns the scanner command that ran, or None when SARIF files are
    expected to exist already.
    """
    if config.sarif_generator is SarifGenerator.FILE:
        logger.info(f"Checking {resolve_source_code_path(config)} for *.sarif.json files.")
        return None

    descriptor = get_scanner(config.sarif_generator)
    os.makedirs(config.resolved_output_directory, exist_ok=True)

    command = descriptor.build_command(config)
    logger.info(f"Generating SARIF with {descriptor.generator.value}")
    run_command(command, check=not descriptor.force_success_exit)
    return command


def resolve_source_code_path(config: ScanConfiguration) -> str:
    """Where the report CLI looks for *.sarif.json files."""
    if config.sarif_generator is SarifGenerator.FILE:
        return config.source_code_path or config.working_directory
    return config.resolved_output_directory


def build_report_arguments(config: ScanConfiguration) -> SastAnalysisArguments:
    return build_sast_arguments(config, {
        "output_directory": config.resolved_output_directory,
        "files_to_exclude": list(config.files_to_exclude),
        "directories_to_exclude": list(config.directories_to_exclude),
        "source_code_path": resolve_source_code_path(config),
    })


def run_report_step(config: ScanConfiguration) -> CommandLine:
    """Invoke the reporting CLI; a non-zero exit raises CommandError."""
    arguments = build_report_arguments(config)
    command = build_report_command(arguments)
    logger.info("Sending results to SOOS SAST")
    run_command(
        command,
        display=f"{command.executable} {command.arguments[0]} {format_masked_cli_args(arguments)}",
    )
    return command


def run(config: ScanConfiguration) -> RunResult:
    """Run the scanner step followed by the report step."""
    logger.info("Starting SOOS SAST Analysis via Docker")
    logger.debug(json.dumps(config.to_dict(), indent=2))

    scanner_command = run_scanner_step(config)
    report_command = run_report_step(config)

    return RunResult(
        source_code_path=resolve_source_code_path(config),
        scanner_command=scanner_command,
        report_command=report_command,
    )
