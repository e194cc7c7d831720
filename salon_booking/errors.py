"""Domain errors raised by the salon services and rendered by the API layer"""


class SalonError(Exception):
    """Base class for every error a single operation can surface to the caller"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SalonError):
    """Malformed or incomplete request (no services, duplicate email, ...)"""

    status_code = 400


class AuthError(SalonError):
    status_code = 401


class NotFoundError(SalonError):
    status_code = 404


class ConflictError(SalonError):
    """Requested interval overlaps an active appointment"""

    status_code = 409


class SchedulingBusyError(SalonError):
    """The scheduling lock could not be acquired in time"""

    status_code = 503
