"""Errors raised by resolvers and the persistence layer."""


class CollabLiteError(Exception):
    """Base class for errors reported back to API clients."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CollabLiteError):
    code = "NOT_FOUND"


class InvalidInputError(CollabLiteError, ValueError):
    code = "BAD_USER_INPUT"


class DatabaseNotConnectedError(CollabLiteError):
    code = "DATABASE_UNAVAILABLE"


class InvalidReferenceError(TypeError):
    """A reference field holds neither an entity nor a primitive key.

    This is a programming error, not something a client can cause.
    """
