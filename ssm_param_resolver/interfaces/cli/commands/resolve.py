"""
Resolve Command

CLI command for substituting {{ ssm:name }} references with Parameter Store values.
"""

import traceback

import click

from ssm_param_resolver.core.exceptions import (
    InvalidParametersError,
    MissingParametersError,
    ParameterResolutionError,
)
from ssm_param_resolver.core.resolution import ParameterResolver
from ssm_param_resolver.infrastructure.ssm import SSMParameterStoreClient
from ssm_param_resolver.interfaces.cli.options import aws_options, input_options, verbose_quiet_options
from ssm_param_resolver.interfaces.cli.utils import build_ssm_config, read_input, setup_command
from ssm_param_resolver.shared.config import get_config


@click.command()
@input_options
@aws_options
@click.option("--lines", is_flag=True, help="Treat each input line as a separate list element")
@click.option("--reveal-secrets", is_flag=True, help="Also resolve SecureString parameters")
@click.option(
    "--tolerate-invalid",
    is_flag=True,
    help="Leave references to invalid parameters unresolved instead of failing",
)
@verbose_quiet_options
def resolve(text, input_file, region, endpoint_url, profile, lines, reveal_secrets, tolerate_invalid, verbose, quiet):
    """
    Replace {{ ssm:name }} references with their Parameter Store values.

    Input is read from TEXT, --file, or stdin. SecureString parameters are
    left as references unless --reveal-secrets is given.

    \b
    Examples:
        # Resolve a single string
        ssm-resolve resolve "db={{ssm:/app/db/host}}"

        # Resolve a config file, revealing secrets
        ssm-resolve resolve --file app.env --reveal-secrets

        # Resolve line by line from stdin in another region
        cat app.env | ssm-resolve resolve --lines --region eu-west-1
    """
    setup_command(verbose=verbose, quiet=quiet)

    config = get_config()
    value = read_input(text, input_file, lines=lines)

    ssm_config = build_ssm_config(region=region, endpoint_url=endpoint_url, profile=profile)
    client = SSMParameterStoreClient(ssm_config)
    resolver = ParameterResolver(
        client.get_parameters,
        tolerate_invalid=tolerate_invalid or config.tolerate_invalid_parameters(),
    )

    try:
        output = resolver.resolve(value, resolve_secure_string=reveal_secrets or config.resolve_secure_strings())
    except MissingParametersError as e:
        raise click.ClickException(f"Parameter store did not return: {', '.join(e.missing_names)}")
    except InvalidParametersError as e:
        raise click.ClickException(f"Invalid ssm parameters: {', '.join(e.invalid_names)}")
    except ParameterResolutionError as e:
        if verbose:
            click.echo("Full error traceback:", err=True)
            traceback.print_exc()
        raise click.ClickException(str(e))

    if lines:
        for line in output:
            click.echo(line)
    else:
        click.echo(output, nl=not output.endswith("\n"))
