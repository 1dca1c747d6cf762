"""
Reference Patterns

Builds the regular expressions that match {{ ssm:name }} references.

- Unscoped: matches any parameter name, exposed as the ``name`` group
- Scoped: matches one exact parameter name, used to tie a resolved
  parameter back to the reference spellings it satisfies
"""

import re
from typing import Optional

from ssm_param_resolver.core.exceptions import PatternCompileError
from ssm_param_resolver.shared.utils import get_logger

logger = get_logger(__name__)

# Characters allowed in a parameter name inside a reference
NAME_CHARSET = r"[A-Za-z0-9_/]"

_NAME_RE = re.compile(rf"{NAME_CHARSET}+")

# {{ <spaces> ssm:<name> <spaces> }}
_REFERENCE_TEMPLATE = r"\{{\{{ *ssm:{name} *\}}\}}"

REFERENCE_PATTERN = re.compile(_REFERENCE_TEMPLATE.format(name=rf"(?P<name>{NAME_CHARSET}+)"))


def compile_reference_pattern(name: Optional[str] = None) -> re.Pattern:
    """
    Build the matcher for parameter references.

    Args:
        name: Parameter name to scope the pattern to. None or "" returns the
              unscoped pattern matching every reference.

    Returns:
        Compiled pattern

    Raises:
        PatternCompileError: If the name cannot appear in a reference or the
                             resulting expression does not compile
    """
    if not name:
        return REFERENCE_PATTERN

    if not _NAME_RE.fullmatch(name):
        message = f"Invalid regular expression used to resolve ssm parameters: name '{name}' is not a valid reference name"
        logger.debug(message)
        raise PatternCompileError(message, name=name)

    try:
        return re.compile(_REFERENCE_TEMPLATE.format(name=re.escape(name)))
    except re.error as e:
        message = f"Invalid regular expression used to resolve ssm parameters. Error: {e}"
        logger.debug(message)
        raise PatternCompileError(message, name=name) from e
