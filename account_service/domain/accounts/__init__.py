"""
Accounts bounded context — domain layer.

Users and admins share a single entity shape and a single
repository contract, parameterized by entity type.
"""
