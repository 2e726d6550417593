"""
Exception types raised while resolving arguments and running commands.
"""

from typing import Optional


class SastDockerError(Exception):
    """Base class for all errors surfaced by the entrypoint."""


class ConfigurationError(SastDockerError):
    """Malformed or missing configuration."""


class ScannerNotImplementedError(SastDockerError):
    """No execution branch exists for the selected SARIF generator."""

    def __init__(self, generator: object):
        self.generator = generator
        super().__init__(f"Sarif generator not implemented: {generator}")


class CommandError(SastDockerError):
    """
    A child process could not be started or exited with a non-zero code.

    ``exit_code`` is None when the process never started.
    """

    def __init__(self, command: str, exit_code: Optional[int] = None, reason: Optional[str] = None):
        self.command = command
        self.exit_code = exit_code
        self.reason = reason
        if exit_code is not None:
            message = f"{command} failed with exit code {exit_code}"
        else:
            message = f"{command} failed to start: {reason}"
        super().__init__(message)
