"""
CLI Commands
"""

from ssm_param_resolver.interfaces.cli.commands.debug import debug
from ssm_param_resolver.interfaces.cli.commands.references import references
from ssm_param_resolver.interfaces.cli.commands.resolve import resolve

__all__ = ["debug", "references", "resolve"]
