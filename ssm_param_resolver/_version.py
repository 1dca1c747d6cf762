"""Version information for ssm-param-resolver."""

__version__ = "0.3.0"
