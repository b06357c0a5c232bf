"""
Credential service: registers users with hashed passwords and authenticates
them by issuing signed, time-limited tokens.

Version: 1.0
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
