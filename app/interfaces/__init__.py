"""
Interfaces layer package.

Contains the FastAPI routers, Pydantic request/response schemas and the
dependency functions that build use cases for each request.
No business logic belongs here.
"""
