"""
Infrastructure Module

Adapters for external systems used by the resolver.
"""
