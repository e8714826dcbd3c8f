"""
Core infrastructure: configuration, error description and console logging.
"""
