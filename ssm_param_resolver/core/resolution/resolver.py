"""
Parameter Resolver

Runs the full resolution pipeline for {{ ssm:name }} references:

    compile -> extract -> (nothing found: return input) -> lookup
            -> filter secrets -> substitute -> return in the caller's shape

Every call is independent: no values are cached and the only long-lived
collaborator is the lookup callable handed to the constructor.
"""

from typing import Any, List, Optional

from ssm_param_resolver.core.exceptions import ParameterResolutionError, ReshapeError
from ssm_param_resolver.core.models import as_resolvable
from ssm_param_resolver.core.resolution.extractor import extract_references
from ssm_param_resolver.core.resolution.lookup import LookupCoordinator, LookupFunction
from ssm_param_resolver.core.resolution.patterns import compile_reference_pattern
from ssm_param_resolver.core.resolution.secrets import filter_secure_parameters
from ssm_param_resolver.core.resolution.substitution import reshape, substitute
from ssm_param_resolver.shared.utils import get_logger

logger = get_logger(__name__)


class ParameterResolver:
    """
    Resolves parameter store references in strings and lists of strings.

    Usage:
        resolver = ParameterResolver(lookup=client.get_parameters)
        resolver.resolve("db={{ssm:/app/db/host}}")
        # 'db=10.0.0.5'

    Errors are raised as ParameterResolutionError subclasses whose
    ``original_input`` attribute holds the unmodified input.
    """

    def __init__(self, lookup: LookupFunction, tolerate_invalid: bool = False):
        """
        Initialize the resolver.

        Args:
            lookup: Callable taking a list of parameter names and returning a
                    LookupResult (decrypted values)
            tolerate_invalid: Leave references to names the store reports as
                              invalid unresolved instead of failing
        """
        self.coordinator = LookupCoordinator(lookup, tolerate_invalid=tolerate_invalid)

    @classmethod
    def create_from_config(cls, config=None) -> "ParameterResolver":
        """
        Build a resolver backed by AWS Systems Manager Parameter Store.

        Args:
            config: Optional SSMConfig. Loaded from ssm_resolver_config.yml
                    and the environment when omitted.

        Returns:
            ParameterResolver wired to an SSMParameterStoreClient
        """
        from ssm_param_resolver.infrastructure.ssm import SSMConfig, SSMParameterStoreClient
        from ssm_param_resolver.shared.config import get_config

        config = config or SSMConfig.from_config()
        client = SSMParameterStoreClient(config)
        return cls(client.get_parameters, tolerate_invalid=get_config().tolerate_invalid_parameters())

    def resolve(self, value: Any, resolve_secure_string: bool = False) -> Any:
        """
        Substitute every resolvable reference in value.

        Args:
            value: A string or a list/tuple of strings. Other shapes are
                   returned unchanged.
            resolve_secure_string: Reveal SecureString parameters. When False
                                   their references are left verbatim.

        Returns:
            Value of the same shape with references replaced

        Raises:
            PatternCompileError: If a reference pattern cannot be built
            LookupServiceError: If the parameter store call fails
            InvalidParametersError: If some names could not be resolved
        """
        try:
            pattern = compile_reference_pattern()

            resolvable = as_resolvable(value)
            if resolvable is None:
                logger.debug(f"Unsupported input type '{type(value).__name__}', returning unchanged")
                return value

            references = extract_references(resolvable, pattern)
            if not references:
                return value

            result = self.coordinator.fetch(references)
            parameters = filter_secure_parameters(result.parameters.values(), resolve_secure_string)
            resolved_map = self.coordinator.build_resolved_map(parameters, references)

            logger.debug(f"Substituting {len(resolved_map)} reference spelling(s)")
            return substitute(resolvable, resolved_map).unwrap()

        except ParameterResolutionError as e:
            e.original_input = value
            raise

    def resolve_secure_string(self, value: str) -> str:
        """
        Resolve references in a string, revealing SecureString parameters.

        Raises:
            ReshapeError: If value is not a string
        """
        if not isinstance(value, str):
            raise ReshapeError("str", type(value).__name__, original_input=value)
        output = self.resolve(value, resolve_secure_string=True)
        return self._reshape(output, str, value)

    def resolve_secure_string_list(self, values: List[str]) -> List[str]:
        """
        Resolve references in a list of strings, revealing SecureString parameters.

        Raises:
            ReshapeError: If values is not a list of strings
        """
        output = self.resolve(values, resolve_secure_string=True)
        return self._reshape(output, list, values)

    @staticmethod
    def _reshape(output: Any, expected: type, original: Any) -> Any:
        try:
            return reshape(output, expected)
        except ReshapeError as e:
            e.original_input = original
            raise


def _resolver(lookup: Optional[LookupFunction]) -> ParameterResolver:
    if lookup is None:
        return ParameterResolver.create_from_config()
    return ParameterResolver(lookup)


def resolve(value: Any, resolve_secure_string: bool = False, lookup: Optional[LookupFunction] = None) -> Any:
    """
    Resolve {{ ssm:name }} references in a string or list of strings.

    Args:
        value: Input to resolve
        resolve_secure_string: Reveal SecureString parameters
        lookup: Parameter store callable. Defaults to the boto3 client built
                from configuration.
    """
    return _resolver(lookup).resolve(value, resolve_secure_string=resolve_secure_string)


def resolve_secure_string(value: str, lookup: Optional[LookupFunction] = None) -> str:
    """Resolve references in a string, including SecureString parameters."""
    return _resolver(lookup).resolve_secure_string(value)


def resolve_secure_string_for_string_list(values: List[str], lookup: Optional[LookupFunction] = None) -> List[str]:
    """Resolve references in a list of strings, including SecureString parameters."""
    return _resolver(lookup).resolve_secure_string_list(values)
