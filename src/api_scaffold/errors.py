"""Errors that end a scaffolding run.

They derive from ``click.ClickException`` so the CLI prints the message to
stderr and exits with status 1 without extra handling.
"""

import click


class ScaffoldError(click.ClickException):
    """Base class for fatal scaffolding errors."""


class ConfigurationError(ScaffoldError):
    """The collected answers do not describe a project we can generate."""


class PromptError(ScaffoldError):
    """The interactive input could not be read (closed stdin, abort)."""
