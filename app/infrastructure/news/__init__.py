"""
Infrastructure adapters for the news bounded context.

Each repository implements a domain port (ABC) on top of an
SQLAlchemy AsyncSession.
"""
