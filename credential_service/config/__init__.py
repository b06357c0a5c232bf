"""
Configuration Package Initialization
Version: 1.0
Purpose: Centralizes access to service configuration and logging setup.

Settings are read once per process through the cached get_settings() accessor
and handed to the components that need them.
"""

from credential_service.config.settings import Settings, get_settings
from credential_service.config.logging_config import configure_logging

__all__ = [
    'Settings',
    'get_settings',
    'configure_logging',
]
