"""
Logging helpers for request tracing and security auditing.

Version: 1.0
"""

import logging
import re
from typing import Dict, Any, List, Optional, Union

from credential_service.config.logging_config import AUDIT_LOGGER_NAME

class PIIMasker:
    """Utility class for masking PII (Personally Identifiable Information) in logs."""

    PII_PATTERNS = {
        'email': r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}',
        'phone': r'\b\d{3}[-.]?\d{3}[-.]?\d{4}\b',
    }

    # Keys whose values are never written to a log, masked or not
    SENSITIVE_KEYS = ('password', 'password_hash', 'token', 'secret', 'authorization')

    @staticmethod
    def mask_pii(data: Union[str, Dict[str, Any], List[Any]]) -> Union[str, Dict[str, Any], List[Any]]:
        """
        Mask PII in the provided data.

        Args:
            data: String, dictionary, or list containing potential PII

        Returns:
            Data with PII masked
        """
        if isinstance(data, str):
            return PIIMasker._mask_string(data)
        elif isinstance(data, dict):
            return {
                k: '[REDACTED]' if str(k).lower() in PIIMasker.SENSITIVE_KEYS else PIIMasker.mask_pii(v)
                for k, v in data.items()
            }
        elif isinstance(data, list):
            return [PIIMasker.mask_pii(item) for item in data]
        return data

    @staticmethod
    def _mask_string(text: str) -> str:
        for pattern_name, pattern in PIIMasker.PII_PATTERNS.items():
            text = re.sub(
                pattern,
                f'[MASKED_{pattern_name.upper()}]',
                text
            )
        return text

class SecurityLogger:
    """Security event logging utility."""

    def __init__(self, logger_name: str = AUDIT_LOGGER_NAME):
        self.logger = logging.getLogger(logger_name)

    def log_security_event(self, event_type: str, details: Optional[Dict[str, Any]] = None, level: int = logging.INFO):
        """Log security event with PII-masked details."""
        self.logger.log(
            level,
            f"Security event: {event_type}",
            extra={"event": event_type, "details": PIIMasker.mask_pii(details or {})}
        )

def get_request_logger(
    trace_id: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> Union[logging.Logger, logging.LoggerAdapter]:
    """
    Get a logger instance with request context.

    Args:
        trace_id: Optional trace ID for correlation
        context: Optional additional context information

    Returns:
        Logger instance with request context
    """
    logger = logging.getLogger('request')

    extra: Dict[str, Any] = {}
    if trace_id:
        extra['trace_id'] = trace_id
    if context:
        extra['details'] = context

    if extra:
        return logging.LoggerAdapter(logger, extra)

    return logger

def log_error(
    logger: Union[logging.Logger, logging.LoggerAdapter],
    error: Exception,
    message: str,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log an error with context and traceback.

    Args:
        logger: The logger instance to use
        error: The exception that occurred
        message: A descriptive message about the error
        context: Additional context to include in the log
    """
    error_context = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        **(context or {})
    }

    logger.error(
        message,
        exc_info=(type(error), error, error.__traceback__),
        extra={"details": PIIMasker.mask_pii(error_context)}
    )

__all__ = [
    'PIIMasker',
    'SecurityLogger',
    'get_request_logger',
    'log_error',
]
