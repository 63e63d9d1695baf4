"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class AuthorizationError(Exception):
    """Raised when an admin-only operation is attempted without an admin session."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Admin session required for '{operation}'")


class InvalidCredentialsError(Exception):
    """Raised when a login attempt does not match the admin account.

    The message is deliberately generic — it never says which field was wrong.
    """

    def __init__(self, message: str = "Login details not correct"):
        self.message = message
        super().__init__(message)


class StorageWriteError(Exception):
    """Raised when an uploaded attachment could not be written to storage."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not store attachment '{filename}': {reason}")
