"""
Domain-specific errors for the news bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.

Each error carries the fixed message shown to API clients in
`client_message`; `message` holds the internal detail used for logs.
"""


class NewsDomainError(Exception):
    """Base error for all news domain errors."""

    client_message = "INTERNAL SERVER ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ResourceNotFoundError(NewsDomainError):
    """Raised when a lookup by a well-formed identifier matches nothing."""

    client_message = "NOT FOUND"

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class BadRequestError(NewsDomainError):
    """Raised for malformed identifiers, sort/order/limit values or vote deltas."""

    client_message = "BAD REQUEST"

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


class MissingInfoError(NewsDomainError):
    """Raised when a create payload lacks one or more required fields."""

    client_message = "MISSING INFO"

    def __init__(self, resource: str, missing: list[str]) -> None:
        super().__init__(f"{resource} is missing required fields: {', '.join(missing)}")
        self.resource = resource
        self.missing = missing


class UsernameAlreadyExistsError(NewsDomainError):
    """Raised when a user is created with a username that is already taken."""

    client_message = "USERNAME ALREADY EXISTS"

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username
