from fastapi import HTTPException, status
from fastapi.exceptions import RequestValidationError


class BadRequestException(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedException(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenException(HTTPException):
    def __init__(self, detail: str = "Not authorized"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictException(HTTPException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class FieldValidationException(RequestValidationError):
    """
    A single-field validation failure detected after schema parsing.

    Rendered by FastAPI's validation handler as a 422 with the same
    `detail` shape pydantic produces, so clients show it inline.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__([
            {
                "type": "value_error",
                "loc": ("body", field),
                "msg": message,
                "input": None,
            }
        ])

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
