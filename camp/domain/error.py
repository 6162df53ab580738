"""Domain layer errors.

The taxonomy mirrors how each failure is handled:

- ``UnauthenticatedError`` / ``NotFoundError`` / ``NotAuthorizedError``:
  surfaced immediately, never retried.
- ``ConflictError``: a transaction lost a race; retried with backoff by the
  service, surfaced once attempts run out.
- ``PermissionDeniedError``: the remote store refused access. Unavailable
  for the rest of the session, triggers one-way failover.
- ``TransientStoreError``: network trouble or timeout. Surfaced without
  touching failover state.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation needs a user identity and none was given."""

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Must be signed in to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a transaction lost an optimistic-concurrency race."""

    pass


class StoreUnavailableError(DomainError):
    """Base for backend availability failures."""

    pass


class PermissionDeniedError(StoreUnavailableError):
    """The backend explicitly refused access.

    Classified as unavailable for the rest of the session.
    """

    pass


class TransientStoreError(StoreUnavailableError):
    """Timeout or transient network failure. Caller may retry."""

    pass
