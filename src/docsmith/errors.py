class DocsmithError(Exception):
    """Base class for errors raised by the service."""


class BadRequestError(DocsmithError):
    """The client sent a request the service cannot act on (HTTP 400)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
