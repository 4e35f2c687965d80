"""
Word Numbers - Turn English number words into typed integer literals.

This package provides tools for:
- Evaluating phrases like "two hundred forty-seven thousand" exactly
- Choosing the narrowest fixed-width integer type for the value
- Expanding num!(...) invocations in source files
"""

__version__ = "0.1.0"
