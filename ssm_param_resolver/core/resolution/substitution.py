"""
Substitution Engine

Rewrites the input, replacing each resolved reference with its parameter
value while keeping the input's shape.
"""

import re
from typing import Any, Optional

from ssm_param_resolver.core.exceptions import ReshapeError
from ssm_param_resolver.core.models import Resolvable, ResolvedMap
from ssm_param_resolver.core.resolution.patterns import REFERENCE_PATTERN


def substitute_text(text: str, resolved_map: ResolvedMap, pattern: Optional[re.Pattern] = None) -> str:
    """Replace every resolved reference in one string, leaving unknown references untouched."""
    pattern = pattern or REFERENCE_PATTERN

    def replacer(match: re.Match) -> str:
        parameter = resolved_map.get(match.group(0))
        if parameter is None:
            return match.group(0)
        return parameter.value

    return pattern.sub(replacer, text)


def substitute(resolvable: Resolvable, resolved_map: ResolvedMap) -> Resolvable:
    """
    Apply the resolved map to every element of the input.

    Lists keep their length and order; each element is handled on its own.

    Args:
        resolvable: ScalarString or StringList
        resolved_map: Raw reference text -> Parameter

    Returns:
        A resolvable of the same variant with references replaced
    """
    if not resolved_map:
        return resolvable
    return resolvable.map(lambda text: substitute_text(text, resolved_map))


def reshape(value: Any, expected: type) -> Any:
    """
    Check that a resolved value has the shape the caller declared.

    Args:
        value: Value returned by the resolver
        expected: str or list

    Returns:
        value as a str, or as a list of str

    Raises:
        ReshapeError: If value cannot be returned as the expected type
    """
    if expected is str:
        if isinstance(value, str):
            return value
    elif expected is list:
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return list(value)
    else:
        raise ReshapeError(getattr(expected, "__name__", str(expected)), type(value).__name__)

    raise ReshapeError(expected.__name__, type(value).__name__)
