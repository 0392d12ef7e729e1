"""
Shared module package.

Cross-cutting concerns used by the whole application:
error-to-HTTP mapping, security middleware and logging setup.
"""
