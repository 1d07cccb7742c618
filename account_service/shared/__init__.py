"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Failure kinds and error-to-HTTP mapping
- Request metrics
- Security middleware
- Rate limiting
- Logging configuration
"""
