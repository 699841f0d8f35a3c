"""
Handler decorators for error handling, logging, and progress event shaping.
"""
import functools
import uuid
from typing import Any, Callable, MutableMapping, Optional

from botocore.exceptions import ClientError
from cloudformation_cli_python_lib import HandlerErrorCode, ProgressEvent

from logger_config import get_logger
from utils.exceptions import ResourceProviderError

logger = get_logger(__name__)

HandlerSignature = Callable[
    [Any, Any, MutableMapping[str, Any]], ProgressEvent
]

NOT_FOUND_ERROR_CODES = {'TypeNotFoundException'}


def provider_handler(func: HandlerSignature) -> HandlerSignature:
    """
    Decorator for resource provider handler functions.

    Provides:
    - Request correlation IDs for logging
    - Translation of raised errors into FAILED progress events

    Failed events echo the desired resource state of the request so
    CloudFormation can report which model was rejected.

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(
        session: Any,
        request: Any,
        callback_context: Optional[MutableMapping[str, Any]]
    ) -> ProgressEvent:
        correlation_id = str(uuid.uuid4())
        if callback_context is None:
            callback_context = {}

        logger.info(
            f"Handler {func.__name__} invoked",
            extra={
                "correlation_id": correlation_id,
                "handler": func.__name__,
                "client_request_token": getattr(request, "clientRequestToken", None)
            }
        )

        try:
            event = func(session, request, callback_context)

            logger.info(
                f"Handler {func.__name__} returned {event.status}",
                extra={"correlation_id": correlation_id}
            )
            return event

        except ResourceProviderError as e:
            logger.warning(
                f"Handler {func.__name__} failed with {e.error_code}: {e.message}",
                extra={"correlation_id": correlation_id}
            )
            return _failed(request, e.error_code, e.message)

        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            handler_error_code = (
                HandlerErrorCode.NotFound
                if error_code in NOT_FOUND_ERROR_CODES
                else HandlerErrorCode.GeneralServiceException
            )
            logger.error(
                f"Handler {func.__name__} AWS call failed ({error_code}): {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _failed(request, handler_error_code, str(e))

        except ValueError as e:
            logger.warning(
                f"Handler {func.__name__} validation error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _failed(request, HandlerErrorCode.InvalidRequest, str(e))

        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={"correlation_id": correlation_id},
                exc_info=True
            )
            return _failed(request, HandlerErrorCode.InternalFailure, str(e))

    return wrapper


def _failed(
    request: Any,
    error_code: HandlerErrorCode,
    message: str
) -> ProgressEvent:
    event = ProgressEvent.failed(error_code, message)
    event.resourceModel = getattr(request, "desiredResourceState", None)
    return event
