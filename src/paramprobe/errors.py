"""Error hierarchy for paramprobe with friendly, actionable messages.

Every error is a ``click.ClickException`` so the CLI prints it on stderr and
exits with the class' ``exit_code``. The parameter core raises these and never
catches them; presentation is left to click.
"""

from __future__ import annotations

from typing import Optional, Sequence

import click

EXIT_SYNTAX = 2
EXIT_SEMANTIC = 3
EXIT_FATAL = 4


class ParamProbeError(click.ClickException):
    """Base class for all CLI-visible errors with enhanced formatting."""

    #: Emoji shown at the beginning of every error line
    emoji: str = "❌"

    #: Short, actionable suggestion shown after the main message.
    hint: Optional[str] = None

    exit_code = 1

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint

    @property
    def formatted_message(self) -> str:
        """
        Returns the final string that Click writes to stderr.
        Includes:
        * emoji + main message (bold)
        * optional hint on a new line (dim colour)
        """
        lines = [f"{self.emoji}  {click.style(self.message, fg='red', bold=True)}"]
        if self.hint:
            lines.append(click.style(f"💡 {self.hint}", fg="yellow"))
        return "\n".join(lines)

    # Click calls show to emit the message.
    def show(self, file=None) -> None:
        click.echo(self.formatted_message, err=True, file=file)


class ArgumentSyntaxError(ParamProbeError):
    """Raised when a positional argument is malformed."""
    emoji = "🚫"
    exit_code = EXIT_SYNTAX

    def __init__(
        self,
        field: str,
        value: str,
        hint: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.field = field
        self.value = value
        super().__init__(message or f"invalid {field}: {value}", hint)


class TooManyParametersError(ArgumentSyntaxError):
    """Raised when more positional arguments are given than the command accepts."""

    def __init__(self, parameters: Sequence[str], maximum: int):
        self.parameters = tuple(parameters)
        self.maximum = maximum
        value = " ".join(self.parameters)
        hint = f"Pass at most {maximum}: {click.style('[PARAMETER [SUBPARAM]]', fg='cyan')}"
        super().__init__(
            "parameters",
            value,
            hint,
            message=f"too many parameters (max {maximum}): {value}",
        )


class SemanticError(ParamProbeError):
    """Raised when a well-formed request cannot be satisfied by the device."""
    emoji = "🔍"
    exit_code = EXIT_SEMANTIC


class UnknownParameterError(SemanticError):
    def __init__(self, name: str):
        self.name = name
        hint = f"Run {click.style('paramprobe list-parameters', fg='cyan')} to see visible parameters."
        super().__init__(f"unknown parameter: {name}", hint)


class NoValueError(SemanticError):
    """Raised when an explicitly requested parameter currently has no value."""

    def __init__(self, name: str, subparam: Optional[int] = None):
        self.name = name
        self.subparam = subparam
        target = name if subparam is None else f"{name}[{subparam}]"
        super().__init__(f"parameter has no value: {target}")


class ConfigError(ParamProbeError):
    """Raised when there's a configuration problem."""
    emoji = "🔧"
    exit_code = EXIT_FATAL

    def __init__(self, details: str, hint: Optional[str] = None):
        super().__init__(f"Configuration problem – {details}", hint)


class DeviceConnectionError(ParamProbeError):
    """Raised when the device cannot be reached or refuses a request."""
    emoji = "🌐"
    exit_code = EXIT_FATAL

    def __init__(self, details: str, hint: Optional[str] = None):
        if hint is None:
            hint = (
                f"Check {click.style('--host', fg='cyan')} and "
                f"{click.style('--port', fg='cyan')}, or retry later."
            )
        super().__init__(f"Device error – {details}", hint)


class DeviceProtocolError(DeviceConnectionError):
    """Raised when the device answers with something we cannot interpret."""

    def __init__(self, details: str):
        super().__init__(details, "The device may run an incompatible firmware or API version.")


class AuthenticationError(DeviceConnectionError):
    """Raised when the device rejects our credentials."""
    emoji = "🔐"

    def __init__(self, endpoint: str):
        hint = f"Pass a valid token with {click.style('--auth', fg='cyan')} or PARAMPROBE_AUTH_TOKEN."
        super().__init__(f"authentication failed for {click.style(endpoint, fg='magenta')}", hint)
