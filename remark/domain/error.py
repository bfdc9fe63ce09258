"""Domain layer errors.

Scoped writes that match nothing report NotFound as a False/None return.
NotFoundError is raised only where a flow must stop, and ConflictError
marks the expected duplicate-key outcome of a unique (user, comment) pair.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """A unique (user, comment) pair already exists."""

    pass


class DuplicateReportError(ConflictError):
    """Raised when a user already reported a comment."""

    def __init__(self, reporter_id: str, comment_id: str):
        super().__init__(f"User {reporter_id} already reported comment {comment_id}")
