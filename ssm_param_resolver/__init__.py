"""
ssm-param-resolver

Resolves {{ ssm:name }} references in configuration text against AWS Systems
Manager Parameter Store.

**Usage Patterns:**
- CLI: Use the ssm-resolve command
- Python API: resolve(), resolve_secure_string(), ParameterResolver
"""

# Import version from dedicated file (avoids circular imports)
from ssm_param_resolver._version import __version__
from ssm_param_resolver.core.exceptions import (
    InvalidParametersError,
    LookupServiceError,
    MissingParametersError,
    ParameterResolutionError,
    PatternCompileError,
    ReshapeError,
)
from ssm_param_resolver.core.models import LookupResult, Parameter, ParameterType
from ssm_param_resolver.core.resolution import (
    ParameterResolver,
    resolve,
    resolve_secure_string,
    resolve_secure_string_for_string_list,
)
from ssm_param_resolver.infrastructure.ssm import SSMConfig, SSMParameterStoreClient

# Main package exports - Python API
__all__ = [
    "__version__",
    # Resolution
    "ParameterResolver",
    "resolve",
    "resolve_secure_string",
    "resolve_secure_string_for_string_list",
    # Models
    "Parameter",
    "ParameterType",
    "LookupResult",
    # Parameter store
    "SSMConfig",
    "SSMParameterStoreClient",
    # Exceptions
    "ParameterResolutionError",
    "PatternCompileError",
    "LookupServiceError",
    "InvalidParametersError",
    "MissingParametersError",
    "ReshapeError",
]
