"""
Core module - configuration, logging, errors and password handling.
"""
