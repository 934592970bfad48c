"""Service-level errors. Each maps to one HTTP status in app.main."""


class ServiceError(Exception):
    """Base for errors raised deliberately by services; carries a client-safe message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConflictError(ServiceError):
    """Duplicate email or invalid role on registration."""

    status_code = 409


class UnauthorizedError(ServiceError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = 401


class ForbiddenError(UnauthorizedError):
    """Authenticated caller lacks the required role. Reported as 401."""


class NotFoundError(ServiceError):
    status_code = 404


class ValidationFailed(ServiceError):
    """Field values rejected before persisting."""

    status_code = 422


class InternalError(ServiceError):
    """Unexpected persistence or hashing failure; message is always generic."""

    status_code = 500
