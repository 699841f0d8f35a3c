"""
Translation between resource models and CloudFormation registry API shapes.

Requests are built as keyword dictionaries for the boto3 client, and
responses are the dictionaries boto3 returns. Every function rejects a
missing argument before touching it.
"""
from typing import Any, Dict, List, Optional

from models import (
    LoggingConfig,
    ResourceDefaultVersionModel,
    ResourceVersionModel,
)

REGISTRY_TYPE_RESOURCE = "RESOURCE"
DEPRECATED_STATUS_LIVE = "LIVE"


def _require(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


def _split_version_arn(arn: Optional[str]) -> Optional[List[str]]:
    """
    arn:aws:cloudformation:us-west-2:123456789012:type/resource/AWS-Demo-Resource/00000001
    => ['type', 'resource', 'AWS-Demo-Resource', '00000001']
    """
    if not arn:
        return None
    parts = arn.split(":", 5)
    if len(parts) != 6:
        return None
    segments = parts[5].split("/")
    if len(segments) != 4:
        return None
    return segments


def version_id_from_arn(arn: Optional[str]) -> Optional[str]:
    """Return the version segment of a type version ARN, if it has one."""
    segments = _split_version_arn(arn)
    return segments[-1] if segments else None


def type_arn_from_version_arn(arn: Optional[str]) -> Optional[str]:
    """Strip the version segment from a type version ARN."""
    if not _split_version_arn(arn):
        return arn
    return arn.rsplit("/", 1)[0]


def translate_to_create_request(model: ResourceVersionModel) -> Dict[str, Any]:
    """Build RegisterType arguments for a new resource version."""
    _require(model, "model")

    request = {
        "Type": REGISTRY_TYPE_RESOURCE,
        "TypeName": model.TypeName,
        "SchemaHandlerPackage": model.SchemaHandlerPackage,
    }
    if model.ExecutionRoleArn:
        request["ExecutionRoleArn"] = model.ExecutionRoleArn
    if model.LoggingConfig:
        request["LoggingConfig"] = {
            "LogGroupName": model.LoggingConfig.LogGroupName,
            "LogRoleArn": model.LoggingConfig.LogRoleArn,
        }
    return request


def translate_to_read_request(model: ResourceVersionModel) -> Dict[str, Any]:
    """Build DescribeType arguments, by ARN when the version is known."""
    _require(model, "model")

    if model.Arn:
        return {"Arn": model.Arn}

    request = {"Type": REGISTRY_TYPE_RESOURCE, "TypeName": model.TypeName}
    if model.VersionId:
        request["VersionId"] = model.VersionId
    return request


def translate_from_read_response(response: Dict[str, Any]) -> ResourceVersionModel:
    """Build a resource version model from a DescribeType response."""
    _require(response, "response")

    logging_config = None
    if response.get("LoggingConfig"):
        logging_config = LoggingConfig(
            LogGroupName=response["LoggingConfig"].get("LogGroupName"),
            LogRoleArn=response["LoggingConfig"].get("LogRoleArn"),
        )

    arn = response.get("Arn")
    return ResourceVersionModel(
        Arn=arn,
        TypeArn=type_arn_from_version_arn(arn),
        TypeName=response.get("TypeName"),
        VersionId=version_id_from_arn(arn),
        IsDefaultVersion=response.get("IsDefaultVersion"),
        Visibility=response.get("Visibility"),
        ProvisioningType=response.get("ProvisioningType"),
        ExecutionRoleArn=response.get("ExecutionRoleArn"),
        LoggingConfig=logging_config,
    )


def translate_to_delete_request(model: ResourceVersionModel) -> Dict[str, Any]:
    """
    Build DeregisterType arguments.

    The default version cannot be deregistered on its own, so deleting it
    deregisters the whole type. Any other version is removed by its ARN.
    """
    _require(model, "model")

    if model.IsDefaultVersion:
        return {"Type": REGISTRY_TYPE_RESOURCE, "TypeName": model.TypeName}
    return {"Arn": model.Arn}


def translate_to_list_request(
    model: ResourceVersionModel,
    next_token: Optional[str] = None
) -> Dict[str, Any]:
    """Build ListTypeVersions arguments for the live versions of a type."""
    _require(model, "model")

    if model.TypeArn:
        request = {"Arn": model.TypeArn}
    else:
        request = {"Type": REGISTRY_TYPE_RESOURCE, "TypeName": model.TypeName}
    request["DeprecatedStatus"] = DEPRECATED_STATUS_LIVE
    if next_token:
        request["NextToken"] = next_token
    return request


def translate_from_list_response(response: Dict[str, Any]) -> List[ResourceVersionModel]:
    """Build one model per TypeVersionSummaries entry."""
    _require(response, "response")

    return [
        ResourceVersionModel(
            Arn=summary.get("Arn"),
            TypeArn=type_arn_from_version_arn(summary.get("Arn")),
            TypeName=summary.get("TypeName"),
            VersionId=summary.get("VersionId") or version_id_from_arn(summary.get("Arn")),
            IsDefaultVersion=summary.get("IsDefaultVersion"),
        )
        for summary in response.get("TypeVersionSummaries") or []
    ]


def translate_to_set_default_request(model: ResourceDefaultVersionModel) -> Dict[str, Any]:
    """Build SetTypeDefaultVersion arguments, by ARN when one is given."""
    _require(model, "model")

    if model.Arn:
        return {"Arn": model.Arn, "VersionId": model.DefaultVersionId}
    return {
        "Type": REGISTRY_TYPE_RESOURCE,
        "TypeName": model.TypeName,
        "VersionId": model.DefaultVersionId,
    }


def translate_to_default_list_request(
    model: ResourceDefaultVersionModel,
    next_token: Optional[str] = None
) -> Dict[str, Any]:
    """Build ListTypeVersions arguments for the type whose default is wanted."""
    _require(model, "model")

    return translate_to_list_request(
        ResourceVersionModel(TypeName=model.TypeName, TypeArn=model.Arn),
        next_token
    )


def translate_to_default_read_request(model: ResourceDefaultVersionModel) -> Dict[str, Any]:
    _require(model, "model")

    if model.Arn and not model.TypeName:
        return {"Arn": model.Arn}

    request = {"Type": REGISTRY_TYPE_RESOURCE, "TypeName": model.TypeName}
    if model.DefaultVersionId:
        request["VersionId"] = model.DefaultVersionId
    return request


def translate_from_default_read_response(
    response: Dict[str, Any]
) -> ResourceDefaultVersionModel:
    _require(response, "response")

    return ResourceDefaultVersionModel(
        Arn=type_arn_from_version_arn(response.get("Arn")),
        TypeName=response.get("TypeName"),
        DefaultVersionId=response.get("DefaultVersionId"),
    )
