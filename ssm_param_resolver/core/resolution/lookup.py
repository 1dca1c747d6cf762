"""
Lookup Coordinator

Turns extracted references into one batched parameter store request and
maps the returned parameters back onto the reference spellings in the input.

The store itself is injected as a callable taking the list of names and
returning a LookupResult, so tests can pass an in-memory fake and production
code passes the boto3 adapter.
"""

from typing import Callable, List, Sequence

from ssm_param_resolver.core.exceptions import (
    InvalidParametersError,
    LookupServiceError,
    MissingParametersError,
    ParameterResolutionError,
)
from ssm_param_resolver.core.models import LookupResult, Parameter, Reference, ResolvedMap
from ssm_param_resolver.core.resolution.patterns import compile_reference_pattern
from ssm_param_resolver.shared.utils import get_logger

logger = get_logger(__name__)

LookupFunction = Callable[[List[str]], LookupResult]


def unique_parameter_names(references: Sequence[Reference]) -> List[str]:
    """Distinct parameter names in first-seen order."""
    names = []
    seen = set()
    for reference in references:
        if reference.name not in seen:
            seen.add(reference.name)
            names.append(reference.name)
    return names


class LookupCoordinator:
    """
    Coordinates the batched parameter store call for one resolution.

    Usage:
        coordinator = LookupCoordinator(client.get_parameters)
        result = coordinator.fetch(references)
        resolved = coordinator.build_resolved_map(result.parameters.values(), references)
    """

    def __init__(self, lookup: LookupFunction, tolerate_invalid: bool = False):
        """
        Initialize the coordinator.

        Args:
            lookup: Callable issuing the GetParameters request
            tolerate_invalid: Leave names the store reports as invalid
                              unresolved instead of failing
        """
        self.lookup = lookup
        self.tolerate_invalid = tolerate_invalid

    def fetch(self, references: Sequence[Reference]) -> LookupResult:
        """
        Request every referenced parameter in a single call and reconcile the response.

        Args:
            references: References extracted from the input (duplicates allowed)

        Returns:
            LookupResult restricted to the requested names

        Raises:
            LookupServiceError: If the store call fails
            InvalidParametersError: If the store reports invalid names
            MissingParametersError: If the response does not account for every name
        """
        names = unique_parameter_names(references)

        logger.info(f"Resolving SSM parameters ({len(names)} distinct name(s))")
        logger.debug(f"Requesting parameters: {names}")

        try:
            result = self.lookup(names)
        except ParameterResolutionError:
            raise
        except Exception as e:
            logger.debug(f"Parameter lookup failed: {e}")
            raise LookupServiceError(f"Failed to look up ssm parameters: {e}") from e

        return self._reconcile(names, result)

    def _reconcile(self, names: List[str], result: LookupResult) -> LookupResult:
        """Check that every requested name is either resolved or reported invalid."""
        requested = set(names)

        unexpected = [name for name in result.parameters if name not in requested]
        if unexpected:
            logger.warning(f"Ignoring parameters returned but not requested: {unexpected}")

        parameters = {name: param for name, param in result.parameters.items() if name in requested}
        invalid_names = list(dict.fromkeys(name for name in result.invalid_names if name in requested))

        conflicting = [name for name in invalid_names if name in parameters]
        if conflicting:
            error = InvalidParametersError(
                conflicting,
                message=f"Parameter store both returned and reported invalid: {', '.join(conflicting)}",
            )
            logger.debug(str(error))
            raise error

        missing = [name for name in names if name not in parameters and name not in invalid_names]

        if missing:
            error = MissingParametersError(missing, invalid_names=invalid_names)
            logger.debug(str(error))
            raise error

        if invalid_names and not self.tolerate_invalid:
            error = InvalidParametersError(invalid_names)
            logger.debug(str(error))
            raise error

        if invalid_names:
            logger.warning(f"Leaving invalid ssm parameters unresolved: {invalid_names}")

        # valid + invalid must account for every requested name
        if len(parameters) + len(invalid_names) != len(names):
            raise LookupServiceError(
                f"Parameter store accounted for {len(parameters) + len(invalid_names)} of {len(names)} "
                f"requested parameter(s)"
            )

        return LookupResult(parameters=parameters, invalid_names=invalid_names)

    @staticmethod
    def build_resolved_map(parameters: Sequence[Parameter], references: Sequence[Reference]) -> ResolvedMap:
        """
        Map raw reference text to the parameter it resolves to.

        A parameter may satisfy several spellings of the same name
        ({{ssm:/a}} and {{ ssm:/a }}), each becoming its own key.

        Raises:
            PatternCompileError: If a returned name cannot be turned into a pattern
        """
        resolved: ResolvedMap = {}
        for parameter in parameters:
            scoped = compile_reference_pattern(parameter.name)
            for reference in references:
                if scoped.fullmatch(reference.raw):
                    resolved[reference.raw] = parameter
        return resolved
