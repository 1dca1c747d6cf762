#!/usr/bin/env python3
"""
SSM Parameter Store Client

boto3-backed implementation of the parameter lookup used by the resolver.

Sends GetParameters requests with decryption enabled, splitting the name
list into chunks the API accepts and merging the responses into a single
LookupResult. AWS errors are converted into LookupServiceError so callers
only deal with the resolver's exception hierarchy.
"""

from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ssm_param_resolver.core.exceptions import LookupServiceError
from ssm_param_resolver.core.models import LookupResult, Parameter, ParameterType
from ssm_param_resolver.infrastructure.ssm.config import SSMConfig
from ssm_param_resolver.shared.utils import get_logger

logger = get_logger("infrastructure.ssm.client")


class SSMParameterStoreClient:
    """
    Fetches parameters from AWS Systems Manager Parameter Store.

    The boto3 client is created lazily on first use and reused for the
    lifetime of this object. An existing client can be injected (tests,
    callers that already hold a session).

    Usage:
        client = SSMParameterStoreClient(SSMConfig(region="us-west-2"))
        result = client.get_parameters(["/app/db/host", "/app/db/password"])

        resolver = ParameterResolver(lookup=client.get_parameters)
    """

    def __init__(self, config: Optional[SSMConfig] = None, ssm_client: Optional[Any] = None):
        """
        Initialize the client.

        Args:
            config: SSMConfig instance (defaults to SSMConfig())
            ssm_client: Pre-built boto3 SSM client
        """
        self.config = config or SSMConfig()
        self._ssm_client = ssm_client

    @property
    def ssm_client(self) -> Any:
        """The boto3 SSM client, created on first access."""
        if self._ssm_client is None:
            try:
                session = boto3.session.Session(**self.config.session_params)
                self._ssm_client = session.client("ssm", **self.config.client_params)
            except BotoCoreError as e:
                logger.error(f"Could not create SSM client: {e}")
                raise LookupServiceError(f"Could not create SSM client: {e}") from e
            logger.debug(
                f"Created SSM client (region={self._ssm_client.meta.region_name}, "
                f"endpoint={self._ssm_client.meta.endpoint_url})"
            )
        return self._ssm_client

    def get_parameters(self, names: List[str]) -> LookupResult:
        """
        Fetch decrypted parameters for the given names.

        Args:
            names: Parameter names, already de-duplicated

        Returns:
            LookupResult with the parameters found and the names AWS reported invalid

        Raises:
            LookupServiceError: If a GetParameters call fails or returns an unexpected payload
        """
        result = LookupResult()
        if not names:
            return result

        batch_size = self.config.batch_size
        for start in range(0, len(names), batch_size):
            chunk = names[start : start + batch_size]
            result.merge(self._get_parameters_chunk(chunk))

        return result

    __call__ = get_parameters

    def _get_parameters_chunk(self, names: List[str]) -> LookupResult:
        """Issue one GetParameters request."""
        logger.debug(f"Calling GetParameters API with names - {names}")

        try:
            response = self.ssm_client.get_parameters(Names=names, WithDecryption=True)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(f"Encountered error while calling GetParameters API ({error_code}). Error: {e}")
            raise LookupServiceError(f"GetParameters failed ({error_code}): {e}") from e
        except BotoCoreError as e:
            logger.error(f"Encountered error while calling GetParameters API. Error: {e}")
            raise LookupServiceError(f"GetParameters failed: {e}") from e

        return self.parse_response(response)

    @staticmethod
    def parse_response(response: Dict[str, Any]) -> LookupResult:
        """
        Decode a GetParameters response payload.

        Args:
            response: Dict returned by boto3

        Returns:
            LookupResult

        Raises:
            LookupServiceError: If the payload is not in the expected format
        """
        result = LookupResult()
        try:
            for item in response.get("Parameters", []):
                parameter = Parameter(
                    name=item["Name"],
                    type=ParameterType.from_value(item["Type"]),
                    value=item["Value"],
                    version=item.get("Version"),
                    arn=item.get("ARN"),
                )
                result.parameters[parameter.name] = parameter
            result.invalid_names = list(response.get("InvalidParameters", []))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Invalid format of GetParameters output. Error: {e}")
            raise LookupServiceError(f"Invalid format of GetParameters output: {e}") from e
        return result
