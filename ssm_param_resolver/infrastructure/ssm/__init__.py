"""
SSM Infrastructure Module

AWS Systems Manager Parameter Store access via boto3.

Handles:
- Session and client creation (region, endpoint, profile)
- Batched GetParameters calls with decryption
- Translation of AWS errors into LookupServiceError
"""

from ssm_param_resolver.infrastructure.ssm.client import SSMParameterStoreClient
from ssm_param_resolver.infrastructure.ssm.config import MAX_BATCH_SIZE, SSMConfig

__all__ = [
    "SSMParameterStoreClient",
    "SSMConfig",
    "MAX_BATCH_SIZE",
]
