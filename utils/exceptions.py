"""
Custom exception classes for resource provider handlers.

Each error carries the HandlerErrorCode the provider framework reports
back to CloudFormation when the handler fails with it.
"""
from typing import Optional

from cloudformation_cli_python_lib import HandlerErrorCode


class ResourceProviderError(Exception):
    """Base class for errors that end a handler invocation."""

    error_code: HandlerErrorCode = HandlerErrorCode.InternalFailure

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotStabilizedError(ResourceProviderError):
    """Exception raised when an asynchronous operation ends in failure."""

    error_code = HandlerErrorCode.NotStabilized

    def __init__(self, type_name: str, identifier: Optional[str]):
        """
        Initialize stabilization error.

        Args:
            type_name: CloudFormation resource type being provisioned
            identifier: Identifier of the resource that did not stabilize
        """
        super().__init__(
            f"Resource of type '{type_name}' with identifier "
            f"'{identifier}' did not stabilize."
        )
        self.type_name = type_name
        self.identifier = identifier


class NotFoundError(ResourceProviderError):
    """Exception raised when the resource does not exist."""

    error_code = HandlerErrorCode.NotFound

    def __init__(self, type_name: str, identifier: Optional[str]):
        super().__init__(
            f"Resource of type '{type_name}' with identifier "
            f"'{identifier}' was not found."
        )
        self.type_name = type_name
        self.identifier = identifier


class InternalFailureError(ResourceProviderError):
    """Exception raised when an AWS call returns nothing usable."""

    error_code = HandlerErrorCode.InternalFailure

    def __init__(self, message: str = "Internal error occurred."):
        super().__init__(message)
