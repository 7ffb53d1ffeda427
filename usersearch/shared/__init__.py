"""
Shared module package.

Contains cross-cutting concerns used across the service:
- Error handling and mapping
- Security middleware and rate limiting
- Logging configuration
"""
