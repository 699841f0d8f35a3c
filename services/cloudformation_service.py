"""
CloudFormation registry service for type registration operations.
"""
import boto3
from typing import Any, Dict, Optional, TYPE_CHECKING
from botocore.exceptions import ClientError
from config import get_config
from logger_config import get_logger

if TYPE_CHECKING:
    from mypy_boto3_cloudformation import CloudFormationClient
else:
    CloudFormationClient = Any

logger = get_logger(__name__)


class CloudFormationRegistryService:
    """Service for CloudFormation registry operations."""

    def __init__(self, session: Optional[Any] = None) -> None:
        """
        Initialize CloudFormation registry service.

        Args:
            session: Provider framework session proxy. When absent a plain
                boto3 client is created in the configured region.
        """
        self.session = session
        self._client: Optional[CloudFormationClient] = None

    @property
    def client(self) -> CloudFormationClient:
        """Lazy initialization of CloudFormation client."""
        if self._client is None:
            if self.session is not None:
                self._client = self.session.client('cloudformation')
            else:
                self._client = boto3.client(
                    'cloudformation', region_name=get_config().aws_region
                )
        return self._client

    def _call(self, operation: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = getattr(self.client, operation)(**kwargs)
            logger.debug(f'CloudFormation {operation} succeeded')
            return response
        except ClientError as e:
            logger.error(f'CloudFormation {operation} failed: {str(e)}')
            raise

    def register_type(self, **kwargs: Any) -> Dict[str, Any]:
        """
        Start registering a new type version.

        Returns:
            Response carrying the RegistrationToken

        Raises:
            ClientError: If the registry rejects the request
        """
        response = self._call('register_type', **kwargs)
        logger.info(
            f'Registration of {kwargs.get("TypeName")} started '
            f'(token: {response.get("RegistrationToken") if response else None})'
        )
        return response

    def describe_type_registration(self, registration_token: str) -> Optional[Dict[str, Any]]:
        """
        Get the progress of a registration.

        Args:
            registration_token: Token returned by register_type

        Raises:
            ClientError: If the registry rejects the request
        """
        return self._call(
            'describe_type_registration', RegistrationToken=registration_token
        )

    def describe_type(self, **kwargs: Any) -> Optional[Dict[str, Any]]:
        """
        Describe a type or one of its versions.

        Raises:
            ClientError: If the registry rejects the request
        """
        return self._call('describe_type', **kwargs)

    def set_type_default_version(self, **kwargs: Any) -> None:
        """
        Make a registered version the default for its type.

        Raises:
            ClientError: If the registry rejects the request
        """
        self._call('set_type_default_version', **kwargs)
        logger.info(f'Default version set to {kwargs.get("VersionId")}')

    def deregister_type(self, **kwargs: Any) -> None:
        """
        Deregister a type version, or the whole type.

        Raises:
            ClientError: If the registry rejects the request
        """
        self._call('deregister_type', **kwargs)
        logger.info(f'Deregistered {kwargs.get("Arn") or kwargs.get("TypeName")}')

    def list_type_versions(self, **kwargs: Any) -> Dict[str, Any]:
        """
        List one page of versions of a type.

        Raises:
            ClientError: If the registry rejects the request
        """
        return self._call('list_type_versions', **kwargs)
