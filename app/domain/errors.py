# app/domain/errors.py


class ApiError(Exception):
    """Blad domenowy niosacy status HTTP, mapowany w routerach na HTTPException."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class InvalidRequestError(ApiError):
    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Please authenticate"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Forbidden"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Conflict"


class InternalError(ApiError):
    status_code = 500
