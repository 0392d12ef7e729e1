"""
News bounded context: domain layer.

This module contains all domain logic for the news context:
- Topics and users
- Articles and their vote counters
- Comments owned by articles
- Validation of listing parameters (sort, order, limit)
"""
