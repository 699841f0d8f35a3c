"""
Handlers for the AWS::CloudFormation::ResourceVersion resource type.

Creating a resource version registers a new version of a private type.
Registration is asynchronous: the create handler starts it, then reports
IN_PROGRESS until DescribeTypeRegistration reaches a terminal status. The
provider framework re-invokes the handler with the returned callback
context after the delay hint.
"""
from dataclasses import replace
from typing import Any, MutableMapping, Optional

from cloudformation_cli_python_lib import (
    Action,
    OperationStatus,
    ProgressEvent,
    Resource,
    SessionProxy,
)
from cloudformation_cli_python_lib.interface import BaseResourceHandlerRequest

from config import get_config
from logger_config import get_logger
from models import RESOURCE_VERSION_TYPE_NAME, ResourceVersionModel
from services.cloudformation_service import CloudFormationRegistryService
from translator import (
    translate_from_list_response,
    translate_from_read_response,
    translate_to_create_request,
    translate_to_delete_request,
    translate_to_list_request,
    translate_to_read_request,
)
from utils.decorators import provider_handler
from utils.exceptions import (
    InternalFailureError,
    NotFoundError,
    NotStabilizedError,
)

logger = get_logger(__name__)

TYPE_NAME = RESOURCE_VERSION_TYPE_NAME
REGISTRATION_TOKEN = "RegistrationToken"

STATUS_COMPLETE = "COMPLETE"
STATUS_FAILED = "FAILED"
STATUS_IN_PROGRESS = "IN_PROGRESS"

resource = Resource(TYPE_NAME, ResourceVersionModel)
test_entrypoint = resource.test_entrypoint


@resource.handler(Action.CREATE)
@provider_handler
def create_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    """Register a new type version and wait for the registration to finish."""
    model = request.desiredResourceState
    service = CloudFormationRegistryService(session)

    registration_token = callback_context.get(REGISTRATION_TOKEN)
    if not registration_token:
        register_request = translate_to_create_request(model)
        if request.clientRequestToken:
            register_request["ClientRequestToken"] = request.clientRequestToken
        response = service.register_type(**register_request)
        if not response or not response.get("RegistrationToken"):
            raise InternalFailureError()
        registration_token = response["RegistrationToken"]

    return stabilize_registration(service, model, registration_token)


def stabilize_registration(
    service: CloudFormationRegistryService,
    model: ResourceVersionModel,
    registration_token: str,
) -> ProgressEvent:
    """
    Check the registration once and map its status to a progress event.

    Raises:
        NotStabilizedError: If the registration FAILED
        InternalFailureError: If the registry returned no status
    """
    response = service.describe_type_registration(registration_token)
    if not response or not response.get("ProgressStatus"):
        raise InternalFailureError()

    status = response["ProgressStatus"]
    version_arn = response.get("TypeVersionArn")
    logger.info(f"Registration {registration_token} is {status}")

    if status == STATUS_FAILED:
        logger.warning(
            f"Registration of {model.TypeName} failed: {response.get('Description')}"
        )
        raise NotStabilizedError(TYPE_NAME, version_arn)

    if status == STATUS_COMPLETE:
        registered = read_version(service, replace(model, Arn=version_arn))
        if response.get("TypeArn"):
            registered.TypeArn = response["TypeArn"]
        return ProgressEvent(
            status=OperationStatus.SUCCESS,
            resourceModel=registered,
        )

    return ProgressEvent(
        status=OperationStatus.IN_PROGRESS,
        resourceModel=model,
        callbackContext={REGISTRATION_TOKEN: registration_token},
        callbackDelaySeconds=get_config().callback_delay_seconds,
    )


def read_version(
    service: CloudFormationRegistryService,
    model: ResourceVersionModel,
) -> ResourceVersionModel:
    """
    Describe a type version.

    Raises:
        NotFoundError: If the version has been deregistered
        InternalFailureError: If DescribeType returned nothing
    """
    response = service.describe_type(**translate_to_read_request(model))
    if not response:
        raise InternalFailureError()
    if response.get("DeprecatedStatus") == "DEPRECATED":
        raise NotFoundError(TYPE_NAME, model.Arn)
    return translate_from_read_response(response)


@resource.handler(Action.READ)
@provider_handler
def read_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    service = CloudFormationRegistryService(session)
    return ProgressEvent(
        status=OperationStatus.SUCCESS,
        resourceModel=read_version(service, request.desiredResourceState),
    )


@resource.handler(Action.UPDATE)
@provider_handler
def update_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    """Every property is create-only, so an update only refreshes state."""
    service = CloudFormationRegistryService(session)
    return ProgressEvent(
        status=OperationStatus.SUCCESS,
        resourceModel=read_version(service, request.desiredResourceState),
    )


@resource.handler(Action.DELETE)
@provider_handler
def delete_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    service = CloudFormationRegistryService(session)

    # Whether the version is the default decides how it is deregistered
    current = read_version(service, request.desiredResourceState)
    service.deregister_type(**translate_to_delete_request(current))

    return ProgressEvent(status=OperationStatus.SUCCESS)


@resource.handler(Action.LIST)
@provider_handler
def list_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    service = CloudFormationRegistryService(session)
    response = service.list_type_versions(
        **translate_to_list_request(request.desiredResourceState, request.nextToken)
    )
    return ProgressEvent(
        status=OperationStatus.SUCCESS,
        resourceModels=translate_from_list_response(response),
        nextToken=response.get("NextToken"),
    )
