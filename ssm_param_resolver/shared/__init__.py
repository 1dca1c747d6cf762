"""
Shared Module

Configuration and utilities used across the package.
"""
