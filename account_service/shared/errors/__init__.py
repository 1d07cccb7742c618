"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that application failures
are consistently translated into API responses.
"""

from account_service.shared.errors.kinds import AppError, ErrorKind

__all__ = ["AppError", "ErrorKind"]
