"""
Domain error taxonomy.

Services raise these; the handlers in app.exception_handlers translate them
into HTTP responses.
"""


class TeamManagementError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(TeamManagementError):
    """A referenced id does not exist."""
    status_code = 404


class DuplicateResourceError(TeamManagementError):
    """A unique name or email is already taken."""
    status_code = 409


class InvalidOperationError(TeamManagementError):
    """The operation is valid in general but not in the entity's current state."""
    status_code = 400
