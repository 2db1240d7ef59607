"""
Configuration loading and validation for settings.

Provides strongly typed settings objects for rounding behaviour, output
formatting and logging, loaded from environment variables with upfront
validation.
"""
