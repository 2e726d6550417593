"""
Descriptor records for external SARIF generators.

A descriptor says where a scanner binary lives, which options it runs
with when the user supplies none, and how its argument list is shaped.
One generic routine turns a descriptor plus the scan configuration into a
CommandLine.
"""

from dataclasses import dataclass
from typing import List, Tuple

from soos_sast_docker.config import ScanConfiguration
from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.core.process import CommandLine, split_options

# Placeholders expanding to zero or more tokens
VERBOSE = "{verbose}"
OPTIONS = "{options}"


@dataclass(frozen=True)
class ScannerDescriptor:
    """
    How to invoke one SARIF generator.

    ``argument_template`` lists the tokens following the binary. The
    ``{verbose}`` and ``{options}`` entries expand in place; other tokens may
    reference ``{sarif_output}`` and ``{target}``.
    """
    generator: SarifGenerator
    binary_path: str
    argument_template: Tuple[str, ...]
    default_options: str = ""
    verbose_args: Tuple[str, ...] = ("--verbose",)
    force_success_exit: bool = False

    def options_for(self, config: ScanConfiguration) -> Tuple[str, ...]:
        """User pass-through options when given, otherwise the defaults."""
        if config.other_options and config.other_options.strip():
            return split_options(config.other_options)
        return split_options(self.default_options)

    def build_command(self, config: ScanConfiguration) -> CommandLine:
        tokens: List[str] = []
        for token in self.argument_template:
            if token == VERBOSE:
                if config.is_debug:
                    tokens.extend(self.verbose_args)
            elif token == OPTIONS:
                tokens.extend(self.options_for(config))
            else:
                tokens.append(token.format(
                    sarif_output=config.sarif_output_file,
                    target=config.working_directory,
                ))
        return CommandLine.of(self.binary_path, tokens)
