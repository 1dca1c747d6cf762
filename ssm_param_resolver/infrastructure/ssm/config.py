"""
SSM Configuration

Connection settings for AWS Systems Manager Parameter Store.

Values come from the ``aws`` and ``resolution`` sections of
ssm_resolver_config.yml, falling back to the standard AWS environment
variables. Credentials are left to boto3's default provider chain.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ssm_param_resolver.shared.config import get_config

# GetParameters accepts at most 10 names per request
MAX_BATCH_SIZE = 10


@dataclass
class SSMConfig:
    """
    Configuration for the Parameter Store client.

    Region priority:
    1. Explicit value (CLI flag or constructor)
    2. aws.region in ssm_resolver_config.yml
    3. AWS_REGION / AWS_DEFAULT_REGION
    4. boto3 default (profile config)
    """

    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    profile: Optional[str] = None
    batch_size: int = MAX_BATCH_SIZE

    def __post_init__(self):
        if self.batch_size < 1 or self.batch_size > MAX_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {self.batch_size}")

    @property
    def session_params(self) -> Dict[str, Any]:
        """Keyword arguments for boto3.session.Session."""
        params = {}
        if self.profile:
            params["profile_name"] = self.profile
        if self.region:
            params["region_name"] = self.region
        return params

    @property
    def client_params(self) -> Dict[str, Any]:
        """Keyword arguments for session.client('ssm')."""
        params = {}
        if self.endpoint_url:
            params["endpoint_url"] = self.endpoint_url
        return params

    @classmethod
    def from_config(
        cls,
        region_override: Optional[str] = None,
        endpoint_url_override: Optional[str] = None,
        profile_override: Optional[str] = None,
    ) -> "SSMConfig":
        """
        Create configuration from ssm_resolver_config.yml and the environment.

        Args:
            region_override: Region taking precedence over config and env (CLI --region)
            endpoint_url_override: Endpoint taking precedence (CLI --endpoint-url)
            profile_override: AWS profile taking precedence (CLI --profile)

        Returns:
            SSMConfig instance
        """
        config = get_config()

        region = (
            region_override
            or config.get("aws.region")
            or os.getenv("AWS_REGION")
            or os.getenv("AWS_DEFAULT_REGION")
        )
        endpoint_url = endpoint_url_override or config.get("aws.endpoint_url") or os.getenv("SSM_ENDPOINT_URL")
        profile = profile_override or config.get("aws.profile") or os.getenv("AWS_PROFILE")

        return cls(
            region=region,
            endpoint_url=endpoint_url,
            profile=profile,
            batch_size=config.get_batch_size(),
        )
