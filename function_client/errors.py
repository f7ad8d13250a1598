from typing import Optional


class FunctionClientError(Exception):
    """Base class for everything this client reports as a failed run."""


class ConfigurationError(FunctionClientError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required environment variable: {name}")


class TokenAcquisitionError(FunctionClientError):
    """
    The identity provider call failed. status_code and body are set when a
    response came back, otherwise only the transport message is available.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class InvocationError(FunctionClientError):
    pass


class ResponseError(InvocationError):
    """The function answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code} {body}")


class NoResponseError(InvocationError):
    """The request went out but nothing came back."""


class SetupError(InvocationError):
    """The request could not be built or sent at all."""
