"""
Interfaces Module
"""
