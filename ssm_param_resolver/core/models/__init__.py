"""
Core Models

Data structures shared by the resolution pipeline and the parameter store adapter.
"""

from ssm_param_resolver.core.models.parameter import (
    STRING_LIST_DELIMITER,
    LookupResult,
    Parameter,
    ParameterType,
    Reference,
    ResolvedMap,
)
from ssm_param_resolver.core.models.resolvable import Resolvable, ScalarString, StringList, as_resolvable

__all__ = [
    "STRING_LIST_DELIMITER",
    "LookupResult",
    "Parameter",
    "ParameterType",
    "Reference",
    "ResolvedMap",
    "Resolvable",
    "ScalarString",
    "StringList",
    "as_resolvable",
]
