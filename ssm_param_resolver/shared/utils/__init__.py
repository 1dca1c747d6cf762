"""
Shared Utilities
"""

from ssm_param_resolver.shared.utils.logger import configure_logging, get_logger

__all__ = ["get_logger", "configure_logging"]
