"""
References Command

Lists the parameter names referenced by the input without calling AWS.
"""

import click

from ssm_param_resolver.core.models import as_resolvable
from ssm_param_resolver.core.resolution import extract_references, unique_parameter_names
from ssm_param_resolver.interfaces.cli.options import input_options
from ssm_param_resolver.interfaces.cli.utils import read_input


@click.command()
@input_options
@click.option("--raw", is_flag=True, help="Print every raw reference occurrence instead of distinct names")
def references(text, input_file, raw):
    """
    List the {{ ssm:name }} references found in the input.

    \b
    Examples:
        ssm-resolve references --file app.env
        echo "{{ssm:/a}} {{ ssm:/a }}" | ssm-resolve references --raw
    """
    found = extract_references(as_resolvable(read_input(text, input_file)))

    if raw:
        for reference in found:
            click.echo(reference.raw)
    else:
        for name in unique_parameter_names(found):
            click.echo(name)
