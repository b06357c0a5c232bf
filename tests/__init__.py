"""
Credential Service Test Suite

Tests are grouped by layer:
- test_core: security primitives and settings
- test_services: credential store behaviour against an in-memory MongoDB
- test_db: connection management and migrations
- test_middleware: error formatting and request logging
- test_api: HTTP endpoints end to end
"""
