"""
Shared CLI Options

Reusable Click option decorators to ensure consistency across commands.
"""

from functools import wraps
from typing import Callable

import click


def input_options(f: Callable) -> Callable:
    """
    Common input options for commands that read text.

    Adds a TEXT argument and --file / -f. When neither is given, the text is
    read from stdin.

    Example:
        @click.command()
        @input_options
        def my_command(text: str, input_file: str):
            ...
    """

    @click.argument("text", required=False)
    @click.option(
        "--file",
        "-f",
        "input_file",
        type=click.Path(exists=True, dir_okay=False),
        help="Read input from a file instead of TEXT",
    )
    @wraps(f)
    def wrapper(*args, **kwargs):
        return f(*args, **kwargs)

    return wrapper


def aws_options(f: Callable) -> Callable:
    """
    Common AWS connection options.

    Adds --region, --endpoint-url and --profile. Each defaults to the value
    from ssm_resolver_config.yml, then to the AWS environment variables.

    Example:
        @click.command()
        @aws_options
        def my_command(region: str, endpoint_url: str, profile: str):
            ...
    """

    @click.option(
        "--profile",
        help="AWS profile name (default: from config or AWS_PROFILE)",
    )
    @click.option(
        "--endpoint-url",
        help="Custom SSM endpoint URL (default: from config or SSM_ENDPOINT_URL)",
    )
    @click.option(
        "--region",
        help="AWS region (default: from config or AWS_REGION)",
    )
    @wraps(f)
    def wrapper(*args, **kwargs):
        return f(*args, **kwargs)

    return wrapper


def verbose_quiet_options(f: Callable) -> Callable:
    """
    Common verbose/quiet options for output control.

    Adds --verbose / -v and --quiet / -q options.
    """

    @click.option(
        "--quiet",
        "-q",
        is_flag=True,
        help="Suppress all output except errors",
    )
    @click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Verbose output",
    )
    @wraps(f)
    def wrapper(*args, **kwargs):
        return f(*args, **kwargs)

    return wrapper
