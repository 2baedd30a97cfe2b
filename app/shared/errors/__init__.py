"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that errors from both upstream
clients are translated into one uniform API error contract.
"""
