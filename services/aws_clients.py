"""
AWS SDK client wiring.

Clients are created lazily, bound to the configured region, and reused
for the lifetime of the Lambda container. Credentials come from the
default boto3 chain, i.e. the function's execution role.
"""
import boto3
from typing import Any, Optional, TYPE_CHECKING
from config import Config, get_config
from logger_config import get_logger
from utils.exceptions import EmailNotificationsDisabledError

if TYPE_CHECKING:
    from mypy_boto3_cloudwatch import CloudWatchClient
    from mypy_boto3_s3 import S3Client
    from mypy_boto3_secretsmanager import SecretsManagerClient
    from mypy_boto3_ses import SESClient
else:
    CloudWatchClient = Any
    S3Client = Any
    SecretsManagerClient = Any
    SESClient = Any

logger = get_logger(__name__)


class AwsClients:
    """Lazily built boto3 clients for S3, Secrets Manager, SES and CloudWatch."""

    def __init__(self, region: str, email_notifications: bool = True) -> None:
        self.region = region
        self.email_notifications = email_notifications
        self._clients: dict = {}

    @classmethod
    def from_config(cls, config: Config) -> "AwsClients":
        return cls(
            region=config.aws_region,
            email_notifications=config.email_notifications,
        )

    def _client(self, service_name: str):
        if service_name not in self._clients:
            logger.debug(f'Creating {service_name} client for region {self.region}')
            self._clients[service_name] = boto3.client(
                service_name, region_name=self.region
            )
        return self._clients[service_name]

    @property
    def s3(self) -> S3Client:
        """S3 client for document storage."""
        return self._client('s3')

    @property
    def secrets_manager(self) -> SecretsManagerClient:
        """Secrets Manager client for credentials and application secrets."""
        return self._client('secretsmanager')

    @property
    def ses(self) -> SESClient:
        """
        SES client for sending emails.

        Raises:
            EmailNotificationsDisabledError: If EMAIL_NOTIFICATIONS is off
        """
        if not self.email_notifications:
            raise EmailNotificationsDisabledError(
                'Email notifications are disabled (EMAIL_NOTIFICATIONS=false)'
            )
        return self._client('ses')

    @property
    def cloudwatch(self) -> CloudWatchClient:
        """CloudWatch client for custom metrics."""
        return self._client('cloudwatch')


_aws_clients: Optional[AwsClients] = None


def get_aws_clients() -> AwsClients:
    """Get the container-wide AwsClients instance."""
    global _aws_clients
    if _aws_clients is None:
        _aws_clients = AwsClients.from_config(get_config())
    return _aws_clients
