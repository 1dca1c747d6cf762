"""
CLI Interface

Command-line entry point for ssm-param-resolver (ssm-resolve).
"""
