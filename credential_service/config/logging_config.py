# Version: 1.0
# Purpose: Logging configuration with JSON output for production and a separate security audit stream

import logging
import logging.config
import os
from typing import Dict, Any, Optional
import json
import socket
from datetime import datetime, timezone

from credential_service.config.settings import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
SERVICE_NAME = 'credential-service'
AUDIT_LOGGER_NAME = 'security_audit'
AUDIT_LOG_FILE = 'security_audit.log'

class JsonFormatter(logging.Formatter):
    """JSON formatter for log shipping"""

    def __init__(self, environment: str = "production"):
        super().__init__()
        self.hostname = socket.gethostname()
        self.environment = environment

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(LOG_DATE_FORMAT),
            'level': record.levelname,
            'service': SERVICE_NAME,
            'name': record.name,
            'message': record.getMessage(),
            'trace_id': getattr(record, 'trace_id', None),
            'environment': self.environment,
            'host': self.hostname,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        # Structured event payloads from SecurityLogger and the request middleware
        if hasattr(record, 'details'):
            log_entry['details'] = record.details

        return json.dumps(log_entry, default=str)

class SecurityAuditFormatter(logging.Formatter):
    """Specialized formatter for security audit logs"""

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(LOG_DATE_FORMAT)
        details = getattr(record, 'details', {})
        return (f"[{timestamp}] [{record.levelname}] "
                f"[Event: {getattr(record, 'event', 'N/A')}] "
                f"{record.getMessage()} {json.dumps(details, default=str, sort_keys=True)}")

def get_file_handler_config(log_dir: str, filename: str, formatter: str, additional_settings: Dict[str, Any]) -> Dict[str, Any]:
    """Generate configuration for file-based logging handlers"""
    handler_config = {
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': os.path.join(log_dir, filename),
        'maxBytes': 10485760,  # 10MB
        'backupCount': 10,
        'encoding': 'utf-8',
        'formatter': formatter,
        'mode': 'a',
    }
    handler_config.update(additional_settings)
    return handler_config

def get_log_config(settings: Settings) -> Dict[str, Any]:
    """Generate the dictConfig for the service"""
    level = settings.LOG_LEVEL
    main_formatter = 'json' if settings.ENVIRONMENT == 'production' else 'standard'

    formatters = {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': LOG_DATE_FORMAT
        },
        'json': {
            '()': JsonFormatter,
            'environment': settings.ENVIRONMENT
        },
        'security': {
            '()': SecurityAuditFormatter
        }
    }

    handlers: Dict[str, Any] = {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': main_formatter,
            'level': level
        },
        'security_console': {
            'class': 'logging.StreamHandler',
            'formatter': 'security',
            'level': logging.INFO
        }
    }
    root_handlers = ['console']
    audit_handlers = ['security_console']

    if settings.LOG_DIR:
        handlers['file'] = get_file_handler_config(
            settings.LOG_DIR, 'app.log', main_formatter, {}
        )
        handlers['security_audit'] = get_file_handler_config(
            settings.LOG_DIR,
            AUDIT_LOG_FILE,
            'security',
            {
                'maxBytes': 52428800,  # 50MB
                'backupCount': 30,
            }
        )
        root_handlers.append('file')
        audit_handlers.append('security_audit')

    loggers = {
        '': {  # Root logger
            'handlers': root_handlers,
            'level': level,
        },
        AUDIT_LOGGER_NAME: {
            'handlers': audit_handlers,
            'level': logging.INFO,
            'propagate': False
        }
    }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': handlers,
        'loggers': loggers,
    }

def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure application-wide logging with appropriate handlers and formatters."""
    if settings is None:
        from credential_service.config.settings import get_settings
        settings = get_settings()

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)

    logging.config.dictConfig(get_log_config(settings))
    logging.getLogger(__name__).info("Logging configuration completed successfully")

# Export constants and functions
__all__ = [
    'LOG_FORMAT',
    'LOG_DATE_FORMAT',
    'AUDIT_LOGGER_NAME',
    'JsonFormatter',
    'SecurityAuditFormatter',
    'get_log_config',
    'configure_logging'
]
