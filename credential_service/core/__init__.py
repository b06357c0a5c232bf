"""
Core module for the credential service: constants, exceptions, logging
helpers and security primitives.

Version: 1.0
"""
