"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors, framework
errors and unexpected failures all reach clients as the same
{"msg": ...} envelope.
"""
