"""
CLI Utilities

Shared utilities for CLI commands to ensure consistency.
"""

import logging
from typing import List, Optional, Union

import click

from ssm_param_resolver.infrastructure.ssm import SSMConfig
from ssm_param_resolver.shared.config import get_config
from ssm_param_resolver.shared.utils import configure_logging
from ssm_param_resolver.shared.utils.logger import PACKAGE_LOGGER


def setup_command(verbose: bool = False, quiet: bool = False) -> None:
    """
    Common setup for all CLI commands.

    Installs the log handler using the configured format, then sets the
    package log level from the verbosity flags, falling back to the
    configured ``logging.level``.

    Args:
        verbose: Enable verbose logging
        quiet: Suppress non-error output
    """
    config = get_config()
    configure_logging(fmt=config.get_log_format())

    if verbose:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.ERROR)
    else:
        logging.getLogger(PACKAGE_LOGGER).setLevel(config.get_log_level().upper())


def build_ssm_config(
    region: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    profile: Optional[str] = None,
) -> SSMConfig:
    """
    Build SSMConfig from CLI flags, ssm_resolver_config.yml and the environment.

    Raises:
        click.ClickException: If the configuration is invalid
    """
    try:
        return SSMConfig.from_config(
            region_override=region,
            endpoint_url_override=endpoint_url,
            profile_override=profile,
        )
    except ValueError as e:
        raise click.ClickException(f"Invalid SSM configuration: {e}")


def read_input(text: Optional[str], input_file: Optional[str], lines: bool = False) -> Union[str, List[str]]:
    """
    Read command input from TEXT, --file, or stdin.

    Args:
        text: Positional TEXT argument
        input_file: Path given with --file
        lines: Split the input into a list of lines

    Returns:
        The input string, or a list of lines when ``lines`` is set
    """
    if text is not None and input_file:
        raise click.UsageError("Pass either TEXT or --file, not both")

    if text is None:
        if input_file:
            with open(input_file, "r", encoding="utf-8") as f:
                text = f.read()
        else:
            text = click.get_text_stream("stdin").read()

    if lines:
        # Only "\n" ends a line; a final newline does not start another one
        split = text.split("\n")
        if split[-1] == "":
            split.pop()
        return [line[:-1] if line.endswith("\r") else line for line in split]
    return text
