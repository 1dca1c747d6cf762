"""
Secret Filter

Drops SecureString parameters unless the caller asked to reveal secrets.
References to dropped parameters stay verbatim in the output.
"""

from typing import Iterable, List

from ssm_param_resolver.core.models import Parameter
from ssm_param_resolver.shared.utils import get_logger

logger = get_logger(__name__)


def filter_secure_parameters(parameters: Iterable[Parameter], resolve_secure_string: bool) -> List[Parameter]:
    """
    Remove secure parameters when secret resolution is off.

    Args:
        parameters: Parameters returned by the store
        resolve_secure_string: Keep SecureString parameters when True

    Returns:
        Parameters allowed into the resolved map
    """
    parameters = list(parameters)
    if resolve_secure_string:
        return parameters

    kept = [p for p in parameters if not p.is_secure]
    skipped = [p.name for p in parameters if p.is_secure]
    if skipped:
        logger.debug(f"Skipping SecureString parameters: {skipped}")
    return kept
