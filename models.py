"""
Resource models for the registry resource types.

Field names follow the CloudFormation resource schemas, so models
round-trip through the provider framework's JSON payloads unchanged.
"""
# pylint: disable=invalid-name
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Type, TypeVar

from cloudformation_cli_python_lib.interface import BaseModel

T = TypeVar("T")

RESOURCE_VERSION_TYPE_NAME = "AWS::CloudFormation::ResourceVersion"
RESOURCE_DEFAULT_VERSION_TYPE_NAME = "AWS::CloudFormation::ResourceDefaultVersion"


def _to_bool(value: Any) -> Optional[bool]:
    """CloudFormation passes template booleans through as strings."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


@dataclass
class LoggingConfig(BaseModel):
    LogGroupName: Optional[str] = None
    LogRoleArn: Optional[str] = None

    @classmethod
    def _deserialize(
        cls: Type[T],
        json_data: Optional[Mapping[str, Any]],
    ) -> Optional[T]:
        if not json_data:
            return None
        return cls(
            LogGroupName=json_data.get("LogGroupName"),
            LogRoleArn=json_data.get("LogRoleArn"),
        )


# Field names shadow the class inside ResourceVersionModel
_LoggingConfig = LoggingConfig


@dataclass
class ResourceVersionModel(BaseModel):
    """One registered version of a private resource type."""

    Arn: Optional[str] = None
    TypeArn: Optional[str] = None
    TypeName: Optional[str] = None
    VersionId: Optional[str] = None
    IsDefaultVersion: Optional[bool] = None
    Visibility: Optional[str] = None
    ProvisioningType: Optional[str] = None
    ExecutionRoleArn: Optional[str] = None
    SchemaHandlerPackage: Optional[str] = None
    LoggingConfig: Optional["_LoggingConfig"] = None

    @classmethod
    def _deserialize(
        cls: Type[T],
        json_data: Optional[Mapping[str, Any]],
    ) -> Optional[T]:
        if not json_data:
            return None
        return cls(
            Arn=json_data.get("Arn"),
            TypeArn=json_data.get("TypeArn"),
            TypeName=json_data.get("TypeName"),
            VersionId=json_data.get("VersionId"),
            IsDefaultVersion=_to_bool(json_data.get("IsDefaultVersion")),
            Visibility=json_data.get("Visibility"),
            ProvisioningType=json_data.get("ProvisioningType"),
            ExecutionRoleArn=json_data.get("ExecutionRoleArn"),
            SchemaHandlerPackage=json_data.get("SchemaHandlerPackage"),
            LoggingConfig=_LoggingConfig._deserialize(json_data.get("LoggingConfig")),
        )


@dataclass
class ResourceDefaultVersionModel(BaseModel):
    """The version CloudFormation uses when a template names only the type."""

    Arn: Optional[str] = None
    TypeName: Optional[str] = None
    DefaultVersionId: Optional[str] = None

    @classmethod
    def _deserialize(
        cls: Type[T],
        json_data: Optional[Mapping[str, Any]],
    ) -> Optional[T]:
        if not json_data:
            return None
        return cls(
            Arn=json_data.get("Arn"),
            TypeName=json_data.get("TypeName"),
            DefaultVersionId=json_data.get("DefaultVersionId"),
        )
