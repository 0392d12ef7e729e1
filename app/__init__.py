"""
NC News: REST API over topics, users, articles and comments.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - news: Topics, users, articles, comments, votes and listings.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQL tables, query builder, repositories).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
