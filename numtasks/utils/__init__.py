"""
Generic utility functions shared across modules.

Includes the numeric operations themselves and logging setup.
"""
