from __future__ import annotations


class TokboxError(Exception):
    """Base class for every error raised by the tokbox client."""


class SigningError(TokboxError):
    """The token signature could not be computed."""


class TransportError(TokboxError):
    """The request could not be sent or the connection failed.

    The underlying ``httpx`` exception is kept as ``__cause__``.
    """


class RemoteError(TokboxError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"TokBox returned error code: {status_code}")


class EmptyResponseError(TokboxError):
    """The service answered 200 but returned no session."""


class BodyReadError(TokboxError):
    """The response body could not be fully read."""


class DecodeError(TokboxError):
    """The response (or a token) could not be parsed into the expected shape."""
