"""
Reference Extractor

Collects every {{ ssm:name }} occurrence in a string or list of strings.
"""

import re
from typing import Any, List, Optional

from ssm_param_resolver.core.models import Reference, Resolvable, as_resolvable
from ssm_param_resolver.core.resolution.patterns import REFERENCE_PATTERN
from ssm_param_resolver.shared.utils import get_logger

logger = get_logger(__name__)


def extract_references(resolvable: Resolvable, pattern: Optional[re.Pattern] = None) -> List[Reference]:
    """
    Find all parameter references in a resolvable input.

    References are returned in discovery order (element by element, left to
    right) and duplicates are kept, so the result mirrors every occurrence
    in the input.

    Args:
        resolvable: ScalarString or StringList to scan
        pattern: Unscoped reference pattern (defaults to REFERENCE_PATTERN)

    Returns:
        List of Reference objects
    """
    pattern = pattern or REFERENCE_PATTERN
    references = []

    for text in resolvable.strings():
        for match in pattern.finditer(text):
            references.append(Reference(raw=match.group(0), name=match.group("name")))

    logger.debug(f"Extracted {len(references)} ssm parameter reference(s)")
    return references


def extract_raw_references(value: Any) -> List[str]:
    """
    Raw reference texts found in an arbitrary value.

    Unsupported shapes (anything other than a string or a sequence of
    strings) yield an empty list rather than an error.
    """
    resolvable = as_resolvable(value)
    if resolvable is None:
        return []
    return [reference.raw for reference in extract_references(resolvable)]
