"""
Debug Command

CLI command for displaying the effective configuration and optionally
checking Parameter Store access.
"""

import traceback

import click

from ssm_param_resolver._version import __version__
from ssm_param_resolver.core.exceptions import LookupServiceError
from ssm_param_resolver.infrastructure.ssm import SSMParameterStoreClient
from ssm_param_resolver.interfaces.cli.options import aws_options
from ssm_param_resolver.interfaces.cli.utils import build_ssm_config, setup_command
from ssm_param_resolver.shared.config import get_config


@click.command()
@aws_options
@click.option("--check", "check_name", metavar="NAME", help="Fetch one parameter (value hidden) to verify access")
@click.option("--verbose", "-v", is_flag=True, help="Show additional details")
def debug(region, endpoint_url, profile, check_name, verbose):
    """
    Show configuration and optionally test Parameter Store access.

    \b
    Examples:
        # Show current configuration
        ssm-resolve debug

        # Verify that a parameter can be read
        ssm-resolve debug --check /app/db/host
    """
    setup_command(verbose=verbose)
    config = get_config()
    ssm_config = build_ssm_config(region=region, endpoint_url=endpoint_url, profile=profile)

    click.echo()
    click.echo(click.style("ssm-resolve debug", bold=True) + f" (v{__version__})")
    click.echo()

    _rule()
    click.echo(click.style("  Configuration", bold=True))
    _rule()

    config_file = config.config_file
    _row("Config file", str(config_file) if config_file else click.style("(defaults)", dim=True))
    _row("Region", ssm_config.region or click.style("(boto3 default)", dim=True))
    _row("Endpoint", ssm_config.endpoint_url or click.style("(AWS default)", dim=True))
    _row("Profile", ssm_config.profile or click.style("(default chain)", dim=True))
    _row("Batch size", str(ssm_config.batch_size))
    _row("Reveal secrets", str(config.resolve_secure_strings()))
    _row("Tolerate invalid", str(config.tolerate_invalid_parameters()))

    _rule()
    click.echo()

    if not check_name:
        click.echo(click.style("  ✓ Configuration loaded", fg="green", bold=True))
        click.echo(click.style("    Use --check NAME to verify Parameter Store access", dim=True))
        click.echo()
        return

    click.echo(f"  Fetching {check_name}...")
    try:
        result = SSMParameterStoreClient(ssm_config).get_parameters([check_name])
    except LookupServiceError as e:
        _error(f"Lookup failed: {e}")
        if verbose:
            traceback.print_exc()
        raise click.ClickException("Could not read from Parameter Store")

    if check_name in result.parameters:
        parameter = result.parameters[check_name]
        click.echo(click.style("  ✓ Parameter found", fg="green", bold=True))
        click.echo(f"    Type: {parameter.type.value}")
        if parameter.version is not None:
            click.echo(f"    Version: {parameter.version}")
    else:
        _error(f"Parameter {check_name} not found")
        raise click.ClickException("Parameter not found")

    click.echo()


def _rule(width: int = 50):
    """Display a horizontal rule."""
    click.echo("  " + "─" * width)


def _row(label: str, value: str):
    """Display a formatted row with label and value."""
    label_styled = click.style(f"{label}:", fg="cyan")
    click.echo(f"  {label_styled:<28} {value}")


def _error(message: str):
    """Display an error message."""
    click.echo(click.style(f"  ✗ {message}", fg="red"))
