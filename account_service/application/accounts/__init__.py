"""
Application layer for the accounts bounded context.

Use cases validate input, call the repository port and translate
storage errors into application failure kinds.
"""
