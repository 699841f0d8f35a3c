"""
Handlers for the AWS::CloudFormation::ResourceDefaultVersion resource type.
"""
from typing import Any, MutableMapping, Optional

from cloudformation_cli_python_lib import (
    Action,
    OperationStatus,
    ProgressEvent,
    Resource,
    SessionProxy,
)
from cloudformation_cli_python_lib.interface import BaseResourceHandlerRequest

from logger_config import get_logger
from models import (
    RESOURCE_DEFAULT_VERSION_TYPE_NAME,
    ResourceDefaultVersionModel,
)
from services.cloudformation_service import CloudFormationRegistryService
from translator import (
    translate_from_default_read_response,
    translate_from_list_response,
    translate_to_default_read_request,
    translate_to_default_list_request,
    translate_to_set_default_request,
)
from utils.decorators import provider_handler
from utils.exceptions import InternalFailureError

logger = get_logger(__name__)

TYPE_NAME = RESOURCE_DEFAULT_VERSION_TYPE_NAME

resource = Resource(TYPE_NAME, ResourceDefaultVersionModel)
test_entrypoint = resource.test_entrypoint


def read_default_version(
    service: CloudFormationRegistryService,
    model: ResourceDefaultVersionModel,
) -> ResourceDefaultVersionModel:
    response = service.describe_type(**translate_to_default_read_request(model))
    if not response:
        raise InternalFailureError()
    return translate_from_default_read_response(response)


def set_default_version(
    session: Optional[SessionProxy],
    model: ResourceDefaultVersionModel,
) -> ProgressEvent:
    """Point the type at the requested version and read the result back."""
    service = CloudFormationRegistryService(session)
    service.set_type_default_version(**translate_to_set_default_request(model))
    return ProgressEvent(
        status=OperationStatus.SUCCESS,
        resourceModel=read_default_version(service, model),
    )


@resource.handler(Action.CREATE)
@provider_handler
def create_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return set_default_version(session, request.desiredResourceState)


@resource.handler(Action.UPDATE)
@provider_handler
def update_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return set_default_version(session, request.desiredResourceState)


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
        resourceModel=read_default_version(service, request.desiredResourceState),
    )


@resource.handler(Action.DELETE)
@provider_handler
def delete_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    """
    A registered type always has a default version, so there is nothing
    to undo. The resource is simply released from the stack.
    """
    model = request.desiredResourceState
    logger.info(
        f"Releasing default version {model.DefaultVersionId if model else None} "
        "without changing the registry"
    )
    return ProgressEvent(status=OperationStatus.SUCCESS)


@resource.handler(Action.LIST)
@provider_handler
def list_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    """Return the default version of the requested type, scanning all pages."""
    model = request.desiredResourceState
    service = CloudFormationRegistryService(session)

    next_token = None
    while True:
        response = service.list_type_versions(
            **translate_to_default_list_request(model, next_token)
        )
        for version in translate_from_list_response(response):
            if version.IsDefaultVersion:
                return ProgressEvent(
                    status=OperationStatus.SUCCESS,
                    resourceModels=[
                        ResourceDefaultVersionModel(
                            Arn=version.TypeArn,
                            TypeName=version.TypeName,
                            DefaultVersionId=version.VersionId,
                        )
                    ],
                )
        next_token = response.get("NextToken")
        if not next_token:
            break

    return ProgressEvent(status=OperationStatus.SUCCESS, resourceModels=[])
