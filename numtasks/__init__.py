"""
numtasks: numeric utility functions.

Geometry formulas, arithmetic helpers, primality testing and string-to-number
coercion, each a pure function over scalar inputs.
"""

__version__ = "0.1.0"
