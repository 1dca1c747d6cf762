"""
Core Module

Domain models, exceptions and the parameter reference resolution pipeline.
"""
