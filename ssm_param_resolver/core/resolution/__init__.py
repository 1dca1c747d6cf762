"""
Resolution Pipeline for ssm-param-resolver

Handles resolution of parameter store references in text:
- {{ ssm:/path/to/name }} - String and StringList parameters
- {{ ssm:/path/to/secret }} - SecureString parameters (only when secrets are requested)

Whitespace inside the braces is optional: {{ssm:/a}} and {{ ssm:/a }} are the
same reference.
"""

from ssm_param_resolver.core.resolution.extractor import extract_raw_references, extract_references
from ssm_param_resolver.core.resolution.lookup import LookupCoordinator, LookupFunction, unique_parameter_names
from ssm_param_resolver.core.resolution.patterns import REFERENCE_PATTERN, compile_reference_pattern
from ssm_param_resolver.core.resolution.resolver import (
    ParameterResolver,
    resolve,
    resolve_secure_string,
    resolve_secure_string_for_string_list,
)
from ssm_param_resolver.core.resolution.secrets import filter_secure_parameters
from ssm_param_resolver.core.resolution.substitution import reshape, substitute, substitute_text

__all__ = [
    "REFERENCE_PATTERN",
    "compile_reference_pattern",
    "extract_references",
    "extract_raw_references",
    "LookupCoordinator",
    "LookupFunction",
    "unique_parameter_names",
    "filter_secure_parameters",
    "substitute",
    "substitute_text",
    "reshape",
    "ParameterResolver",
    "resolve",
    "resolve_secure_string",
    "resolve_secure_string_for_string_list",
]
