"""
Main CLI Module

Command-line interface for ssm-param-resolver.

Provides the `ssm-resolve` command group. A .env file in the current working
directory is loaded first so AWS_REGION, AWS_PROFILE and friends can be
kept next to the files being resolved.
"""

import os

import click
from dotenv import load_dotenv

from ssm_param_resolver._version import __version__
from ssm_param_resolver.interfaces.cli.commands import debug, references, resolve

# Only load from current working directory, never from parents
cwd_env = os.path.join(os.getcwd(), ".env")
if os.path.exists(cwd_env):
    load_dotenv(cwd_env, override=False)


@click.group()
@click.version_option(version=__version__, prog_name="ssm-param-resolver")
def cli():
    """
    ssm-resolve - substitute {{ ssm:name }} references with AWS Parameter Store values

    \b
    - RESOLVE: Replace references in text, files, or stdin
    - REFERENCES: List referenced parameter names without calling AWS
    - DEBUG: Show the effective configuration and check access

    Use --help with any command for detailed options.
    """


cli.add_command(resolve)
cli.add_command(references)
cli.add_command(debug)


def main():
    """Entry point for the ssm-resolve console script."""
    cli()


if __name__ == "__main__":
    main()
